"""
SMSGATE command line client.

Sends messages and checks delivery status from the shell.

Usage:
    # Send a message to two recipients
    python -m smsgate.run_smsgate send 79001234567 79001234568 --text "Test message"

    # Request a delivery report and use another charset
    python -m smsgate.run_smsgate send 79001234567 --text "Test" --charset windows-1251 --rep 1

    # Check delivery status
    python -m smsgate.run_smsgate status 7ef98495-597c-4a99-8030-a58e7e9d1f13

Environment Variables:
    SMSGATE_HOST: Gateway scheme and host
    SMSGATE_USER: Gateway username
    SMSGATE_PASSWORD: Gateway password
    SMSGATE_TIMEOUT: Request timeout in seconds (default: 30)
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger

from smsgate.client import SmsGateClient
from smsgate.config import GatewaySettings
from smsgate.domain.interfaces import SMSGateError
from smsgate.utils.logging import setup_logging


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="SMSGATE command line client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  smsgate send 79001234567 79001234568 --text "Test message"
  smsgate status 7ef98495-597c-4a99-8030-a58e7e9d1f13
        """,
    )

    parser.add_argument("--host", help="Gateway host (default: SMSGATE_HOST)")
    parser.add_argument("--user", help="Gateway username (default: SMSGATE_USER)")
    parser.add_argument("--password", help="Gateway password (default: SMSGATE_PASSWORD)")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument("--log-file", help="Also write logs to this file (rotated at 10 MB)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    send_parser = subparsers.add_parser("send", help="Send an SMS")
    send_parser.add_argument("phones", nargs="+", help="Recipient phone numbers")
    send_parser.add_argument("--text", required=True, help="Message text")
    send_parser.add_argument("--charset", help="Text charset declared to the gateway")
    send_parser.add_argument(
        "--rep",
        type=int,
        choices=[0, 1],
        help="Request a delivery report (1) or not (0)",
    )

    status_parser = subparsers.add_parser("status", help="Check delivery status")
    status_parser.add_argument("id", help="Message id returned by send")

    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> GatewaySettings:
    """
    Build settings from the environment, then apply command line overrides.

    Raises:
        ValueError: If no username is available
    """
    overrides = {}
    if args.user:
        overrides["user"] = args.user
    if args.host:
        overrides["host"] = args.host
    if args.password is not None:
        overrides["password"] = args.password
    return GatewaySettings.from_env(**overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else "INFO", log_file=args.log_file)

    try:
        settings = load_settings(args)
        client = SmsGateClient.from_settings(settings)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        if args.command == "send":
            results = client.send(
                args.phones,
                args.text,
                charset=args.charset,
                rep=args.rep,
            )
            for sent in results:
                print(f"{sent.phone}\t{sent.id}")
        else:
            statuses = client.query_status(args.id)
            for status in statuses:
                state = status.state.name if status.state else status.status
                print(f"{status.phone}\t{status.id}\t{state}\t{status.err}\t{status.err_msg}")
    except SMSGateError as e:
        logger.error(f"Request failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
