import argparse
import logging
import sys

from .config import Config
from .exceptions import MenuError, OutputError
from .get_menu import collect_menus
from .records import DateFormat, dump_records


logger = logging.getLogger("lionsmeal")


def write_output(days, date_format, output_path=None):
    if output_path is None:
        dump_records(days, sys.stdout, date_format)
        sys.stdout.flush()
        return

    try:
        with open(output_path, "w", encoding="utf-8") as f:
            dump_records(days, f, date_format)
    except OSError as exc:
        raise OutputError(f"Could not write {output_path}: {exc}") from exc


def build_parser():
    parser = argparse.ArgumentParser(
        description="Fetch this and next week's garrison menu and print it as JSON."
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="File to create or overwrite (default: stdout)",
    )
    parser.add_argument(
        "--date-format",
        choices=[f.value for f in DateFormat],
        default=None,
        help="epoch = Unix seconds at UTC midnight; string = day-month-year",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = Config()
    except ValueError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.error("Invalid configuration: %s", exc)
        return 1

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    date_format = DateFormat(args.date_format) if args.date_format else config.date_format

    try:
        days = collect_menus(config.urls, **config.scraper_options())
        write_output(days, date_format, args.output)
    except MenuError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Wrote %d days to %s", len(days), args.output or "stdout")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
