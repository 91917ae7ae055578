from __future__ import annotations

import argparse
import logging
from pathlib import Path

from librarycatalog.catalog import Catalog
from librarycatalog.config import load_config
from librarycatalog.menu import CatalogMenu
from librarycatalog.prompts import Console
from librarycatalog.validators import DEFAULT_DATE_FORMAT

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str, log_file: str | None) -> None:
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    ap = argparse.ArgumentParser(
        description="Interactive in-memory catalog: add, remove and list items, filtered by category."
    )
    ap.add_argument("--config", default=None, help="Path to config file (default: ~/.config/librarycatalog/config.toml)")
    ap.add_argument("--date-format", default=None, help="strftime format for release dates (overrides config)")

    # Logging
    ap.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config, default WARNING)",
    )
    ap.add_argument("--log-file", default=None, help="Write logs here instead of stderr (overrides config)")

    args = ap.parse_args(argv)

    cfg = load_config(Path(args.config) if args.config else None)

    log_cfg = cfg.get("logging", {})
    paths_cfg = cfg.get("paths", {})
    setup_logging(
        args.log_level or log_cfg.get("level", "WARNING"),
        args.log_file or paths_cfg.get("log_file"),
    )

    input_cfg = cfg.get("input", {})
    date_format = args.date_format or input_cfg.get("date_format", DEFAULT_DATE_FORMAT)

    console = console or Console()
    menu = CatalogMenu(console, Catalog(), date_format=date_format)

    try:
        menu.run()
    except (EOFError, KeyboardInterrupt):
        # input stream gone; nothing to save
        console.write("")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
