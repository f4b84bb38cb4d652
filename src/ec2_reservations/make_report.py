import csv

from tabulate import tabulate

HEADER_ON_DEMAND = 'On-demand instances:'
HEADER_UNUSED = 'Unused reservations:'

CSV_FIELDNAMES = [
    'status',
    'instance_type',
    'availability_zone',
    'count',
]


def write_text_report(f, on_demand, unused):
    """Write both report sections as aligned text. Empty sections, header
    included, are left out."""
    if on_demand:
        f.write(HEADER_ON_DEMAND + '\n')
        f.write(tabulate([
            [ri.type, ri.count, ri.availability_zone]
            for ri in on_demand
        ], tablefmt='plain', disable_numparse=[0, 2]) + '\n')
    if unused:
        f.write(HEADER_UNUSED + '\n')
        f.write(tabulate([
            [ri.type, ri.count]
            for ri in unused
        ], tablefmt='plain', disable_numparse=[0]) + '\n')


def write_csv_report(f, on_demand, unused):
    writer = csv.DictWriter(f, fieldnames=CSV_FIELDNAMES)
    writer.writeheader()
    for status, rows in (('on-demand', on_demand), ('unused', unused)):
        for ri in rows:
            writer.writerow({
                'status': status,
                'instance_type': ri.type,
                'availability_zone': ri.availability_zone,
                'count': ri.count,
            })
