import collections

SCOPE_REGION = 'Region'
SCOPE_AVAILABILITY_ZONE = 'Availability Zone'

# availability_zone is '' for region-scoped reservations.
InstanceKey = collections.namedtuple(
    'InstanceKey',
    [
        'type',
        'availability_zone',
    ]
)

ReportedInstance = collections.namedtuple(
    'ReportedInstance',
    [
        'type',
        'count',
        'availability_zone',
    ]
)
