#!/usr/bin/env python3

import argparse
import logging
import sys

from prompipe.config import get_settings
from prompipe.errors import (
    GatewayRejection,
    InputReadError,
    LabelFormatError,
    MissingRequiredArgument,
    NetworkError,
)
from prompipe.exposition import read_metric_value
from prompipe.gateway import push
from prompipe.label_utils import resolve_labels
from prompipe.logging_utils import setup_logging
from prompipe.model import MetricSample


def build_parser():
    # -h is the metric help text, so argparse's own -h is disabled
    parser = argparse.ArgumentParser(
        prog="prompipe",
        description="Push a single metric value read from stdin to a Prometheus Pushgateway",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument("-j", dest="job", default="", help="The job name")
    parser.add_argument("-n", dest="name", default="", help="The name of the metric")
    parser.add_argument(
        "-t",
        dest="metric_type",
        default="gauge",
        help="The type of the metric (gauge, counter, etc.) (default: gauge)",
    )
    parser.add_argument("-h", dest="help_text", default="", help="Help text for the metric")
    parser.add_argument(
        "-l",
        dest="labels",
        default="",
        help="Comma-separated labels in key=value format",
    )
    parser.add_argument(
        "-v", dest="verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def check_required(args):
    if not args.job:
        raise MissingRequiredArgument("job name is required")
    if not args.name:
        raise MissingRequiredArgument("metric name is required")


def run(argv=None, stdin=None, stdout=None, settings=None):
    """Run one push and return the process exit code."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        check_required(args)
    except MissingRequiredArgument as e:
        logging.error(f"Error: {e}")
        parser.print_usage(sys.stderr)
        return 1

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        settings = settings or get_settings()
    except ValueError as e:
        logging.error(f"Error loading configuration: {e}")
        return 1

    try:
        labels = resolve_labels(args.labels, settings.LABELS)
    except LabelFormatError as e:
        logging.error(f"Error parsing labels: {e}")
        return 1

    try:
        value = read_metric_value(stdin)
    except InputReadError as e:
        logging.error(f"Error reading metric value from stdin: {e}")
        return 1

    sample = MetricSample(
        name=args.name,
        value=value,
        metric_type=args.metric_type,
        help_text=args.help_text,
        labels=labels,
    )

    try:
        push(sample.payload(), args.job, settings.GATEWAY_URL, settings.TIMEOUT)
    except NetworkError as e:
        logging.error(str(e))
        return 1
    except GatewayRejection as e:
        logging.error(f"Failed to push to Pushgateway: {e}")
        return 1

    print(
        f"Metric pushed to Pushgateway successfully: {sample.metric_line()}",
        end="",
        file=stdout,
    )
    return 0


def main():
    setup_logging()
    sys.exit(run())


if __name__ == "__main__":
    main()
