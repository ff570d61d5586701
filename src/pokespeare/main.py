from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from pokespeare.app import serve
from pokespeare.config import (
    ConfigurationError,
    ServerConfig,
    configure_logging,
    get_app_config,
    get_server_config,
)
from pokespeare.config.server import DEFAULT_HOST

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Serve Shakespearean Pokémon descriptions over HTTP"
    )
    parser.add_argument(
        "--host",
        type=str,
        default=DEFAULT_HOST,
        help="Interface to bind (default: %(default)s)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (defaults to $PORT, then 3000)",
    )
    return parser.parse_args(list(argv))


def _build_server_config(args: argparse.Namespace) -> ServerConfig:
    if args.port is not None:
        return ServerConfig(host=args.host, port=args.port)
    return get_server_config(host=args.host)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        config = get_app_config(server=_build_server_config(parsed_args))
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        serve(config)
    except Exception:
        log.exception("Fatal error while serving")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point: load ``.env``, install the SIGINT handler, serve."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
