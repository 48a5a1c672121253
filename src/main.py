import argparse
import logging
import sys

from csv_input import TransactionParseError
from csv_output import write_accounts
from engine import TransactionEngine

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="transaction-engine",
        description="Replay a CSV of client transactions and print final account balances.",
    )
    parser.add_argument("csv_input_file", help="CSV file with type,client,tx,amount records")
    parser.add_argument(
        "--reject-frozen",
        action="store_true",
        help="refuse deposits and withdrawals on accounts frozen by a chargeback",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="stderr log level (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    engine = TransactionEngine(reject_frozen=args.reject_frozen)
    try:
        accounts = engine.process_file(args.csv_input_file)
    except (OSError, TransactionParseError) as e:
        logger.error(f"Failed to read {args.csv_input_file}: {e}")
        return 1

    write_accounts(accounts, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
