"""Command-line interface for albsync."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
import signal
import sys
from importlib.metadata import PackageNotFoundError, version

from albsync.config import load_config_files
from albsync.contracts.exceptions import ConfigError
from albsync.service import AlbSync

_LOG = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _package_version() -> str:
    try:
        return version("albsync")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="albsync",
        description="Keep ALB target groups in sync with healthy Consul service instances.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("config_files", nargs="+", metavar="config-file", help="JSON config file(s) to merge")
    parser.add_argument("--dry-run", action="store_true", help="Log target changes without applying them")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )
    # botocore is chatty at DEBUG.
    logging.getLogger("botocore").setLevel(logging.INFO)


async def _run(args: argparse.Namespace) -> int:
    config = load_config_files(args.config_files)
    app = AlbSync.from_config(config, dry_run=args.dry_run)

    loop = asyncio.get_running_loop()
    main_task = asyncio.current_task()
    if main_task is not None:
        for sig in (signal.SIGINT, signal.SIGTERM):
            with contextlib.suppress(NotImplementedError, RuntimeError):
                loop.add_signal_handler(sig, main_task.cancel)

    try:
        await app.run()
    except asyncio.CancelledError:
        _LOG.info("Shutting down")
        return 0

    _LOG.error("All sync workers have stopped")
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        return asyncio.run(_run(args))
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except KeyboardInterrupt:
        return 0
