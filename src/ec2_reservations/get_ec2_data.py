import collections
import itertools
import sys

import boto3

from .errors import UnknownReservationScope
from .mytypes import *

DEFAULT_REGION = 'us-east-1'

boto_sessions = {}


def log(profile, region, message):
    print('[{} - {}] {}'.format(profile, region, message), file=sys.stderr)


def get_session(profile):
    if profile != 'env':
        session = boto3.Session(profile_name=profile)
    else:
        session = boto3.Session()
    return session


def get_region(profile):
    return get_session(profile).region_name or DEFAULT_REGION


def boto_session_getter(profile, region):
    if (profile, region) in boto_sessions:
        return boto_sessions[(profile, region)]
    session = get_session(profile)
    ec2 = session.client('ec2', region_name=region)
    boto_sessions[(profile, region)] = ec2
    return ec2


def get_ondemand_instances(ec2):
    instance_paginator = ec2.get_paginator('describe_instances')
    pages = instance_paginator.paginate(
        Filters=[
            {
                'Name': 'instance-state-name',
                'Values': [
                    'running',
                ],
            },
        ]
    )
    reservations = itertools.chain.from_iterable(
        p['Reservations'] for p in pages)
    instances = itertools.chain.from_iterable(
        r['Instances'] for r in reservations)
    running = collections.defaultdict(int)
    for i in instances:
        # Spot and scheduled instances never consume a reservation.
        if i.get('InstanceLifecycle', 'ondemand') != 'ondemand':
            continue
        key = InstanceKey(
            type=i['InstanceType'],
            availability_zone=i['Placement']['AvailabilityZone'],
        )
        running[key] += 1
    return running


def parse_reserved_instances(reserved_instances):
    """Aggregate DescribeReservedInstances records into zone-scoped and
    region-scoped counts. Raises UnknownReservationScope on any other scope."""
    zone_reservations = collections.defaultdict(int)
    region_reservations = collections.defaultdict(int)
    for ri in reserved_instances:
        scope = ri['Scope']
        if scope == SCOPE_REGION:
            key = InstanceKey(type=ri['InstanceType'], availability_zone='')
            region_reservations[key] += ri['InstanceCount']
        elif scope == SCOPE_AVAILABILITY_ZONE:
            key = InstanceKey(
                type=ri['InstanceType'],
                availability_zone=ri['AvailabilityZone'],
            )
            zone_reservations[key] += ri['InstanceCount']
        else:
            raise UnknownReservationScope(scope)
    return zone_reservations, region_reservations


def get_reserved_instances(ec2):
    reserved_instances_data = ec2.describe_reserved_instances(
        Filters=[
            {
                'Name': 'state',
                'Values': [
                    'active',
                ]
            },
        ],
    )
    return parse_reserved_instances(
        reserved_instances_data['ReservedInstances'])


def get_ec2_instances(profiles, region):
    instances = collections.defaultdict(int)
    for profile in profiles:
        log(profile, region, 'Getting on-demand instances...')
        ec2 = boto_session_getter(profile, region)
        for key, count in get_ondemand_instances(ec2).items():
            instances[key] += count
    return instances


def get_ec2_reservations(profiles, region):
    zone_reservations = collections.defaultdict(int)
    region_reservations = collections.defaultdict(int)
    for profile in profiles:
        log(profile, region, 'Getting reserved instances...')
        ec2 = boto_session_getter(profile, region)
        zone, regional = get_reserved_instances(ec2)
        for key, count in zone.items():
            zone_reservations[key] += count
        for key, count in regional.items():
            region_reservations[key] += count
    return zone_reservations, region_reservations
