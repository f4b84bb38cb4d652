import argparse
import io
import sys
from datetime import datetime

import botocore.exceptions
import xlsxwriter.exceptions

from . import get_ec2_data
from . import make_report
from . import make_xlsx
from .errors import ReservationError
from .reconcile import reconcile, split_report

FATAL_ERRORS = (
    botocore.exceptions.BotoCoreError,
    botocore.exceptions.ClientError,
    ReservationError,
    xlsxwriter.exceptions.XlsxWriterException,
)


class Parser(argparse.ArgumentParser):
    def print_help(self, file=sys.stdout):
        super(Parser, self).print_help(file)
        print(
            """
AWS ENVIRONMENT:
  Credentials and the default region are read the usual boto3 way:
  AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY, AWS_DEFAULT_REGION, AWS_PROFILE
  and the shared ~/.aws/config and ~/.aws/credentials files. The special
  profile name 'env' uses that default session.

  Only instance type and availability zone are matched. Platform, tenancy
  and VPC attributes of instances and reservations are ignored.""",
            file=file,
        )

    def error(self, message):
        print(message, file=sys.stderr)
        self.print_help(sys.stderr)
        sys.exit(2)


def parse_args(argv=None):
    parser = Parser(
        prog="ec2-reservations",
        description="Report running on-demand EC2 instances not covered by a "
                    "reservation, and reservations that are not used.",
    )
    parser.add_argument(
        "--profile",
        help="Get EC2 data for PROFILE. Can be repeated to pool several accounts.",
        dest="profiles",
        action="append",
        metavar="PROFILE",
        default=[],
    )
    parser.add_argument(
        "--region",
        help="Region to reconcile. Defaults to the session region, then us-east-1.",
        default=None,
    )
    parser.add_argument(
        "--format",
        help="Format of the report written to stdout.",
        choices=["text", "csv"],
        default="text",
    )
    parser.add_argument(
        "--generate-xlsx",
        help="Also write the report to a XLSX file.",
        dest="generate_xlsx",
        action="store_true",
        default=False,
    )
    now = datetime.now()
    parser.add_argument(
        "--xlsx-name",
        help="Name of the XLSX file.",
        dest="xlsx_name",
        default=now.strftime("ec2_reservations_%Y_%m_%d"),
    )
    args = parser.parse_args(argv)
    if not args.profiles:
        args.profiles = ["env"]
    return args, parser


def do(args, out):
    region = args.region or get_ec2_data.get_region(args.profiles[0])
    running = get_ec2_data.get_ec2_instances(args.profiles, region)
    zone_reservations, region_reservations = get_ec2_data.get_ec2_reservations(
        args.profiles, region)
    result = reconcile(running, zone_reservations, region_reservations)
    on_demand, unused = split_report(result)
    report = io.StringIO()
    if args.format == "csv":
        make_report.write_csv_report(report, on_demand, unused)
    else:
        make_report.write_text_report(report, on_demand, unused)
    if args.generate_xlsx:
        print("Generating xlsx file...", file=sys.stderr)
        filename = make_xlsx.main(args.xlsx_name, on_demand, unused)
        print("{} generated!".format(filename), file=sys.stderr)
    out.write(report.getvalue())


def main(argv=None):
    args, parser = parse_args(argv)
    try:
        do(args, sys.stdout)
    except FATAL_ERRORS as e:
        print(e, file=sys.stderr)
        sys.exit(1)

