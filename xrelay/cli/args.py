"""Command line argument parsing."""

import argparse
from typing import Any

from xrelay import __version__


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xrelay",
        description="xrelay - SSH terminal with X11 forwarding to the local display",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("host", nargs="?", default=None, help="Remote host name or address")
    parser.add_argument("username", nargs="?", default=None, help="Remote user name")
    parser.add_argument(
        "password",
        nargs="?",
        default=None,
        help="Password (default: $XRELAY_PASSWORD or prompt)",
    )
    parser.add_argument("-p", "--port", type=int, default=None, help="SSH port (default: 22)")
    parser.add_argument(
        "-i",
        "--key",
        dest="key_filename",
        default=None,
        help="Private key file for public key authentication",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="YAML config file (default: $XRELAY_CONFIG_PATH or xrelay.yaml)",
    )
    parser.add_argument(
        "--display",
        default=None,
        help="Local display to forward to (default: $DISPLAY)",
    )
    parser.add_argument("--term", dest="term_type", default=None, help="Remote terminal type")
    parser.add_argument(
        "--no-forwarding",
        action="store_true",
        help="Do not request X11 forwarding",
    )
    parser.add_argument(
        "--single-connection",
        action="store_true",
        help="Ask the server to forward only one X11 connection",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show informational logs",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Trace the SSH transport",
    )
    parser.add_argument("--log-file", default=None, help="Write logs to this file")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace.
    """
    return create_parser().parse_args(argv)


def build_overrides(args: argparse.Namespace) -> dict[str, dict[str, Any]]:
    """Map parsed arguments onto config sections.

    Options left unset come back as None so file values survive.
    """
    return {
        "ssh": {
            "host": args.host,
            "username": args.username,
            "port": args.port,
            "key_filename": args.key_filename,
        },
        "terminal": {
            "term_type": args.term_type,
        },
        "forwarding": {
            "display": args.display,
            "enabled": False if args.no_forwarding else None,
            "single_connection": True if args.single_connection else None,
        },
    }
