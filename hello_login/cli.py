"""
Command-line interface entry point for hello_login
"""

import sys
import os
import argparse
import logging

from .credentials import Credentials, DEFAULT_USERNAME, DEFAULT_PASSWORD
from .trigger import HelloLogin, DEFAULT_BASE_URL


def build_parser():
    parser = argparse.ArgumentParser(
        description="Call GET /api/hello with HTTP Basic auth and print the response text",
        prog="hello_login"
    )
    parser.add_argument(
        "--base-url",
        default=os.environ.get("HELLO_BASE_URL", DEFAULT_BASE_URL),
        help=f"Server the /api/hello path is resolved against (default: {DEFAULT_BASE_URL})"
    )
    parser.add_argument(
        "--username",
        default=os.environ.get("HELLO_USERNAME", DEFAULT_USERNAME),
        help=f"Basic auth username (default: {DEFAULT_USERNAME})"
    )
    parser.add_argument(
        "--password",
        default=os.environ.get("HELLO_PASSWORD", DEFAULT_PASSWORD),
        help="Basic auth password (default: the built-in demo password)"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for the server (default: wait indefinitely)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser


def main(argv=None):
    """Entry point for 'hello_login' command"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    trigger = HelloLogin(
        base_url=args.base_url,
        credentials=Credentials(args.username, args.password),
        timeout=args.timeout
    )

    try:
        trigger.run()
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(0)
