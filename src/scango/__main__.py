"""Scan & Go entry point.

Usage:
  scango                      Start the API server on 127.0.0.1:8000
  scango --host 0.0.0.0       Listen on all interfaces
  scango --dev                Auto-reload on source changes
  scango --check-config       Report unset configuration keys and exit
"""

import argparse
import logging
import sys

from scango import __version__
from scango.config import ADMIN_KEYS, ALL_KEYS, CALLBACK_KEYS, INSTALL_KEYS, Settings
from scango.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def check_config(settings: Settings) -> int:
    """Print which operations are usable. Returns a process exit code."""
    from rich.console import Console
    from rich.table import Table

    table = Table(title="Scan & Go configuration")
    table.add_column("Operation", style="cyan")
    table.add_column("Status")

    for label, keys in (
        ("Install redirect", INSTALL_KEYS),
        ("OAuth callback", CALLBACK_KEYS),
        ("Products / orders", ADMIN_KEYS),
    ):
        missing = settings.missing(*keys)
        status = "[green]ready[/green]" if not missing else f"[red]missing {', '.join(missing)}"
        table.add_row(label, status)

    Console().print(table)
    return 1 if settings.missing(*ALL_KEYS) else 0


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="scango",
        description="Scan & Go backend: Shopify install handshake, baskets and unpaid orders",
    )
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Bind host")
    parser.add_argument("--port", "-p", type=int, default=8000, help="Bind port (default: 8000)")
    parser.add_argument("--dev", action="store_true", help="Development mode with auto-reload")
    parser.add_argument(
        "--check-config",
        action="store_true",
        help="Report unset configuration keys and exit",
    )
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)

    if args.check_config:
        sys.exit(check_config(Settings.load()))

    from scango.api.serve import run_api_server

    run_api_server(host=args.host, port=args.port, dev=args.dev)


if __name__ == "__main__":
    main()
