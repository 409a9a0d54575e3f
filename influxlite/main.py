"""Command-line entry point for writing to and querying an InfluxDB server."""
import argparse
import json
import logging
import sys

import requests
from pydantic import ValidationError

from influxlite import client
from influxlite.errors import Error
from influxlite.session import Session


def setup_logging(log_level: str):
    """Setup logging configuration."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr
    )

    # Reduce noise from some libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Write points to and query points from an InfluxDB server"
    )
    parser.add_argument("--host", required=True, help="Server host name")
    parser.add_argument("--database", "-d", required=True, help="Database name")
    parser.add_argument("--username", "-u", default="", help="User name")
    parser.add_argument("--password", "-p", default="", help="Password")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: wait forever)"
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level")

    commands = parser.add_subparsers(dest="command", required=True)

    query_cmd = commands.add_parser("query", help="Run a query and print the points as JSON")
    query_cmd.add_argument("query", help="Query text")

    write_cmd = commands.add_parser("write", help="Write series read as JSON")
    write_cmd.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="JSON list of {name, points} objects (default: stdin)"
    )

    return parser


def main(argv=None) -> int:
    """Main function."""
    args = build_parser().parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        session = Session(
            host=args.host,
            database=args.database,
            username=args.username,
            password=args.password,
            timeout_s=args.timeout
        )
    except ValidationError as e:
        logger.error(f"Invalid connection settings: {e}")
        return 1

    try:
        if args.command == "query":
            result = client.query(session, args.query)
            print(json.dumps(result.model_dump()))
        else:
            with args.file as f:
                series_list = json.load(f)
            if isinstance(series_list, dict):
                series_list = [series_list]
            client.write(session, series_list)
            logger.info(f"Wrote {len(series_list)} series to {session.database}")
    except (Error, requests.RequestException, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
