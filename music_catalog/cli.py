from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .commands import queries as cmd_queries
from .commands import report as cmd_report
from .config import Settings, find_config
from .models import CatalogError
from .seeding import build_catalog

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}

logger = logging.getLogger(__name__)


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


class WarningBufferHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.WARNING)
        self.records: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
        except Exception:  # pragma: no cover
            msg = record.getMessage()
        self.records.append(msg)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Music catalog queries")
    parser.add_argument("--version", action="version", version=f"music-catalog {__version__}")
    parser.add_argument("--config", type=Path, help="Path to catalog.yaml")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Python logging level (overrides logging.level in the config)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("songs", help="List song names in ascending order")
    subparsers.add_parser("albums", help="List album names")
    year_parser = subparsers.add_parser("albums-in-year", help="List albums released in a year")
    year_parser.add_argument("year", type=int)
    count_parser = subparsers.add_parser("count", help="Count the songs of an album")
    count_parser.add_argument("album")
    subparsers.add_parser("count-no-album", help="Count songs that belong to no album")
    average_parser = subparsers.add_parser(
        "average", help="Average song duration of an album (n/a when it has no songs)"
    )
    average_parser.add_argument("album")
    subparsers.add_parser("longest-song", help="Name of the longest song")
    subparsers.add_parser("longest-album", help="Name of the album with the longest total duration")
    subparsers.add_parser("report", help="Summarize the catalog")
    return parser


def _configure_logging(level_name: str, warnings_log: Optional[Path]) -> WarningBufferHandler:
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)

    color_handler = logging.StreamHandler()
    color_handler.setFormatter(ColorFormatter(LOG_FORMAT))
    root_logger.addHandler(color_handler)

    warn_buffer = WarningBufferHandler()
    warn_buffer.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(warn_buffer)

    if warnings_log:
        file_handler = logging.FileHandler(warnings_log, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.WARNING)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(file_handler)
    return warn_buffer


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    config_path = find_config(args.config)
    settings = Settings.load(config_path)
    warn_buffer = _configure_logging(
        args.log_level or settings.logging.level,
        settings.logging.warnings_log,
    )

    try:
        try:
            catalog = build_catalog(settings)
        except CatalogError as exc:
            logger.error("Could not load catalog from %s: %s", config_path, exc)
            raise SystemExit(1) from exc

        match args.command:
            case "songs":
                cmd_queries.songs(catalog)
            case "albums":
                cmd_queries.albums(catalog)
            case "albums-in-year":
                cmd_queries.albums_in_year(catalog, args.year)
            case "count":
                cmd_queries.count(catalog, args.album)
            case "count-no-album":
                cmd_queries.count_no_album(catalog)
            case "average":
                cmd_queries.average(catalog, args.album)
            case "longest-song":
                cmd_queries.longest_song(catalog)
            case "longest-album":
                cmd_queries.longest_album(catalog)
            case "report":
                result = cmd_report.run(catalog)
                for line in result.checks:
                    print(line)
                if not result.ok:
                    raise SystemExit(1)
            case _:
                parser.error("Unknown command")
    finally:
        if warn_buffer.records:
            print("\n\033[33mWarnings/Errors summary:\033[0m")
            for line in warn_buffer.records:
                print(f" - {line}")


if __name__ == "__main__":  # pragma: no cover
    main()
