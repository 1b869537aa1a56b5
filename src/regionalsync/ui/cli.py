from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from signal import SIGINT, SIGTERM, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from regionalsync.app import (
    build_scheduler,
    list_active_regionals,
    regional_history,
    sync_regionals,
)
from regionalsync.config import ConfigurationError, configure_logging, get_sync_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from regionalsync.domain.model import Regional

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Synchronise regionals with the external source")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("sync", help="Run one reconciliation cycle now")
    subparsers.add_parser("list", help="Show the active regionals ordered by name")

    history = subparsers.add_parser("history", help="Show every record stored under a name")
    history.add_argument("name", type=str, help="Regional name")

    run = subparsers.add_parser("run", help="Run the periodic sync in the foreground")
    run.add_argument(
        "--no-initial-sync",
        action="store_true",
        help="Wait one full interval before the first cycle",
    )

    return parser.parse_args(list(argv))


def _format_regional(regional: Regional) -> str:
    status = "active" if regional.active else "inactive"
    created = regional.created_at.isoformat() if regional.created_at else "-"
    updated = regional.updated_at.isoformat() if regional.updated_at else "-"
    return f"{regional.id}\t{regional.name}\t{status}\tcreated={created}\tupdated={updated}"


def _run_scheduler(*, initial_sync: bool) -> None:
    config = get_sync_config()
    if not initial_sync:
        config = replace(config, run_on_start=False)
    scheduler = build_scheduler(config=config)

    def stop(_signal_received: int, _frame: FrameType | None) -> None:
        log.info("Shutting down regional sync")
        scheduler.shutdown(wait=False)

    signal(SIGINT, stop)
    signal(SIGTERM, stop)
    scheduler.start()
    scheduler.wait()


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "sync":
            result = sync_regionals()
            if not result.succeeded:
                sys.exit(1)
        elif parsed_args.command == "list":
            for regional in list_active_regionals():
                print(_format_regional(regional))  # noqa: T201
        elif parsed_args.command == "history":
            for regional in regional_history(parsed_args.name):
                print(_format_regional(regional))  # noqa: T201
        elif parsed_args.command == "run":
            _run_scheduler(initial_sync=not parsed_args.no_initial_sync)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
