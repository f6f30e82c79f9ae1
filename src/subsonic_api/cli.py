"""
Subsonic API CLI - Command Line Interface

Commands:
    decode FILE --shape NAME [--format json|xml]
        Decode a saved Subsonic response and print its canonical JSON form.
    ping
        Ping the server configured by the SUBSONIC_* environment variables.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import httpx

from . import __version__
from .client import SubsonicClient
from .documents import ResponseFormat
from .envelope import dump_envelope, parse_response
from .exceptions import SubsonicError
from .logger import setup_logging
from .models import SubsonicConfig
from .responses import RESPONSE_SHAPES

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """
    Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="subsonic-api",
        description="Subsonic API client tools",
        epilog="Example: subsonic-api decode starred.json --shape Starred2Response",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_parser = subparsers.add_parser("decode", help="Decode a saved response")
    decode_parser.add_argument("file", metavar="FILE", help="Response body (JSON or XML)")
    decode_parser.add_argument(
        "--shape",
        required=True,
        choices=sorted(RESPONSE_SHAPES),
        metavar="NAME",
        help="Response shape, e.g. AlbumResponse or Starred2Response",
    )
    decode_parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in ResponseFormat],
        default=None,
        help="Document format (default: from the file extension, else json)",
    )

    subparsers.add_parser("ping", help="Ping the server configured in the environment")

    return parser


def _guess_format(path: Path, explicit: Optional[str]) -> ResponseFormat:
    if explicit:
        return ResponseFormat.parse(explicit)
    if path.suffix.lower() == ".xml":
        return ResponseFormat.XML
    return ResponseFormat.JSON


def run_decode(args: argparse.Namespace) -> int:
    """Decode a saved response and print the canonical JSON envelope."""
    path = Path(args.file)
    try:
        content = path.read_bytes()
    except OSError as e:
        logger.error(f"Cannot read {args.file}: {e}")
        return 1

    envelope = parse_response(content, RESPONSE_SHAPES[args.shape], _guess_format(path, args.format))
    print(dump_envelope(envelope))
    return 0


def run_ping(args: argparse.Namespace) -> int:
    """Ping the configured server and report what it is."""
    config = SubsonicConfig.from_environment()
    with SubsonicClient(config) as client:
        envelope = client.system.ping()

    server = envelope.type or "Subsonic"
    if envelope.server_version:
        server = f"{server} {envelope.server_version}"
    print(f"OK: {server} (API {envelope.version}, OpenSubsonic: {envelope.open_subsonic})")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else None)

    commands = {"decode": run_decode, "ping": run_ping}
    try:
        return commands[args.command](args)
    except (SubsonicError, httpx.HTTPError, EnvironmentError, ValueError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        if args.verbose:
            logger.exception("Detailed error traceback:")
        return 1


if __name__ == "__main__":
    sys.exit(main())
