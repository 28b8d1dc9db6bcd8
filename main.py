import argparse
import curses
import logging
import os
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

from _version import __version__
from app_state import AppState
from config_paths import (
    LOG_LEVEL_DEFAULT,
    load_config,
    set_log_level,
    setup_logging,
)
from data_sources import DataSourceError, DemoDataSource, load_data_source
from orchestrator import Orchestrator
from styler import DefaultStyler


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabview",
        description="tabview - terminal viewer for tabular files",
    )
    parser.add_argument("path", nargs="?", help=".csv, .tsv, .parquet or .xlsx file")
    parser.add_argument(
        "-v", "--version", action="store_true", help="print the version and exit"
    )
    parser.add_argument(
        "--no-header",
        action="store_true",
        help="treat the first record as data instead of column names",
    )
    parser.add_argument(
        "--demo", action="store_true", help="show the built-in demo table"
    )
    return parser


def _init_logging(level):
    try:
        setup_logging(level)
    except OSError as exc:
        # no writable config dir; run without a log file
        logging.getLogger().addHandler(logging.NullHandler())
        print(f"Logging disabled: {exc}", file=sys.stderr)


def load_source(args):
    if args.demo and args.path:
        raise DataSourceError("give either a path or --demo, not both")
    if args.demo:
        return DemoDataSource()
    if not args.path:
        raise DataSourceError("no data source given")
    return load_data_source(args.path, header=not args.no_header)


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    # config warnings belong in the log file
    _init_logging(LOG_LEVEL_DEFAULT)
    cfg = load_config()
    set_log_level(cfg["LOG_LEVEL"])

    try:
        source = load_source(args)
    except DataSourceError as exc:
        print(f"Load failed: {exc}", file=sys.stderr)
        return 1

    styler = DefaultStyler(
        row_spacing=cfg["ROW_SPACING"], col_spacing=cfg["COL_SPACING"]
    )
    state = AppState(source, styler, args.path)
    logger.info("starting session for %s", args.path or "demo")

    def curses_main(stdscr):
        Orchestrator(stdscr, state, cfg).run()

    curses.wrapper(curses_main)
    logger.info("session closed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
