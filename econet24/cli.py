"""
Command-line interface for the econet24 client.

Provides argument parsing and main execution flow.
"""

import argparse
import json
import sys

from econet24.client import Econet24Client
from econet24.config import DEFAULT_HOST, DEFAULT_PASSWORD, DEFAULT_UID, DEFAULT_USER
from econet24.errors import Econet24Error
from econet24.logging_setup import log, setup_logging
from econet24.models import BoilerStatus, ByIndex, ByKey, ByName


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Read and control an ecoMAX boiler through econet24.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Credentials and device uid can also be provided via the\n"
            "ECONET24_USER, ECONET24_PASSWORD and ECONET24_UID env vars.\n"
            "If the password is not supplied, you will be prompted for it."
        ),
    )
    parser.add_argument(
        "--host", default=DEFAULT_HOST,
        help=f"Service base URL (default: {DEFAULT_HOST})",
    )
    parser.add_argument("--user", default=DEFAULT_USER, help="econet24 username")
    parser.add_argument(
        "--password", default=DEFAULT_PASSWORD,
        help="econet24 password (overrides ECONET24_PASSWORD env var)",
    )
    parser.add_argument("--uid", default=DEFAULT_UID, help="Controller device uid")
    parser.add_argument(
        "--timeout", type=float, default=None,
        help="Per-request timeout in seconds (default: none)",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("params", help="Print current device parameters as JSON")

    p = sub.add_parser("boiler-status", help="Set the boiler status (name or number)")
    p.add_argument("status", help=", ".join(s.name.lower() for s in BoilerStatus))

    p = sub.add_parser("huw-heater", help="Switch the hot-water heater (0/1)")
    p.add_argument("status", type=int)

    p = sub.add_parser("co-temp", help="Set the CO circuit setpoint")
    p.add_argument("value", type=int)

    p = sub.add_parser("huw-temp", help="Set the hot-water setpoint")
    p.add_argument("value", type=int)

    p = sub.add_parser("set", help="Write a raw parameter")
    target = p.add_mutually_exclusive_group(required=True)
    target.add_argument("--key", help="Address by key (rmCurrNewParam)")
    target.add_argument("--index", type=int, help="Address by index (rmNewParam)")
    target.add_argument("--name", help="Address by name (newParam)")
    p.add_argument("value", type=int)

    return parser.parse_args(argv)


def run_command(client: Econet24Client, args: argparse.Namespace) -> None:
    if args.command == "params":
        print(json.dumps(client.read_parameters().as_dict(), indent=2))
    elif args.command == "boiler-status":
        client.set_boiler_status(args.status)
    elif args.command == "huw-heater":
        client.set_hot_water_heater_status(args.status)
    elif args.command == "co-temp":
        client.set_co_temperature(args.value)
    elif args.command == "huw-temp":
        client.set_hot_water_temperature(args.value)
    elif args.command == "set":
        if args.key is not None:
            address = ByKey(args.key)
        elif args.index is not None:
            address = ByIndex(args.index)
        else:
            address = ByName(args.name)
        client.write_parameter(address, args.value)


def main(argv: list[str] | None = None) -> None:
    """
    Main entry point for the econet24 CLI.
    """
    args = parse_args(argv)

    setup_logging(debug=args.debug)

    if not args.verify_ssl:
        import urllib3
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    if not args.uid:
        log.error("A device uid is required (--uid or ECONET24_UID)")
        sys.exit(2)

    if not args.password:
        import getpass
        args.password = getpass.getpass("econet24 password: ")

    try:
        with Econet24Client(
            args.user,
            args.password,
            args.uid,
            args.host,
            verify_ssl=args.verify_ssl,
            timeout=args.timeout,
        ) as client:
            run_command(client, args)
    except (Econet24Error, ValueError) as exc:
        log.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
