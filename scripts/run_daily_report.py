"""
Run the daily market report:
1. Load trades from one or more semicolon separated files
2. Aggregate per day and per ticker
3. Compute the weighted market index (with fallback on gap days)
4. Print the daily reports
"""

import sys
import os
import argparse
import logging

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tqdm import tqdm

from src.aggregation.aggregator import DailyAggregator
from src.config.settings import LOG_LEVEL, MARKET_DATA_PATH
from src.config.weights import ACTIVE_WEIGHTS, WEIGHT_TABLES
from src.index.weights import load_weight_table
from src.ingestion.source import SsvRecordSource
from src.reporting.sinks import ConsoleReportSink

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Daily ticker statistics and market index")
    parser.add_argument(
        "paths",
        nargs="*",
        default=[MARKET_DATA_PATH],
        help=f"Trade files to read (default: {MARKET_DATA_PATH})",
    )
    weights = parser.add_mutually_exclusive_group()
    weights.add_argument(
        "--weights-table",
        choices=sorted(WEIGHT_TABLES),
        help=f"Named weight table (default: {ACTIVE_WEIGHTS.name})",
    )
    weights.add_argument("--weights-file", help="JSON file of ticker -> weight")
    parser.add_argument("--log-level", default=LOG_LEVEL)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.weights_file:
            weight_table = load_weight_table(args.weights_file)
        elif args.weights_table:
            weight_table = WEIGHT_TABLES[args.weights_table]
        else:
            weight_table = ACTIVE_WEIGHTS
    except (OSError, ValueError) as e:
        print(f"Error: could not load weights - {e}", file=sys.stderr)
        return 1

    records = []
    skipped = 0
    for path in tqdm(args.paths, desc="Loading trade files", disable=len(args.paths) < 2):
        source = SsvRecordSource(path)
        try:
            records.extend(source.read_records())
        except FileNotFoundError:
            print(f"Error: File not found - {path}", file=sys.stderr)
            return 1
        except OSError as e:
            print(f"Error reading file: {e}", file=sys.stderr)
            return 1
        skipped += source.last_report.skipped_count

    logger.info(
        f"Using weight table '{weight_table.name}' "
        f"({len(records)} records, {skipped} rows skipped)"
    )

    aggregator = DailyAggregator(weight_table)
    reports = aggregator.process_all(records)
    ConsoleReportSink().emit_all(reports)
    return 0


if __name__ == "__main__":
    sys.exit(main())
