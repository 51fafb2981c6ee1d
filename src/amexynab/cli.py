"""
Command-line interface for Amex to YNAB conversion.
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from .columns import MissingColumnsError
from .converter import YNABConverter
from .csv_parser import AmexCSVReader, RecordReadError
from .output_formatter import RecordWriteError

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path.home() / "Desktop"


def load_config(config_file: str | None) -> dict:
    """Load CLI configuration from JSON file."""
    if not config_file:
        return {}

    config_path = Path(config_file)
    if not config_path.exists():
        logger.debug(f"CLI config file {config_file} does not exist")
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            config = json.load(f)
        logger.debug(f"Loaded CLI config from {config_file}")
    except json.JSONDecodeError as e:
        logger.warning(f"Invalid JSON in CLI config file {config_file}: {e}")
        return {}
    except OSError as e:
        logger.warning(f"Failed to load CLI config from {config_file}: {e}")
        return {}

    if not isinstance(config, dict):
        logger.warning(f"CLI config file {config_file} must contain a JSON object")
        return {}
    return config


def default_output_path(
    output_dir: str | Path | None = None,
    now: datetime | None = None,
) -> Path:
    """Build the timestamped output path, e.g. ynab_amex_export_20240131120000.csv."""
    directory = Path(output_dir).expanduser() if output_dir else DEFAULT_OUTPUT_DIR
    timestamp = (now or datetime.now()).strftime("%Y%m%d%H%M%S")
    return directory / f"ynab_amex_export_{timestamp}.csv"


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Convert Amex CSV exports to YNAB import format",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )

    parser.add_argument(
        "--config",
        help="Path to CLI configuration file (contains defaults for output_dir, encoding, delimiter)",
    )

    parser.add_argument(
        "--input",
        "-i",
        help="Path to input CSV file (required)",
    )

    parser.add_argument(
        "--output",
        "-o",
        help="Path to output CSV file (default: ~/Desktop/ynab_amex_export_<timestamp>.csv)",
    )

    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s",
    )

    if not args.input:
        logger.error("Error: input file path is required")
        parser.print_usage(sys.stderr)
        sys.exit(1)

    config = load_config(args.config)

    if args.output:
        output_path = Path(args.output)
    else:
        output_path = default_output_path(config.get("output_dir"))

    csv_reader = AmexCSVReader(
        encoding=config.get("encoding", "utf-8-sig"),
        delimiter=config.get("delimiter", ","),
    )
    converter = YNABConverter(csv_reader=csv_reader)

    try:
        result = converter.convert_file(args.input, output_path)
    except (
        MissingColumnsError,
        RecordReadError,
        RecordWriteError,
        OSError,
    ) as e:
        logger.error(f"Error converting file: {e}")
        sys.exit(1)

    logger.info(
        f"Successfully converted {args.input} to YNAB format. Output saved to {output_path}",
    )
    logger.info(converter.format_summary(result, str(output_path)))


if __name__ == "__main__":
    main()
