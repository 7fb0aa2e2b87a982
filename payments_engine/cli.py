"""Command line entry point.

Usage::

    payments-engine transactions.csv > accounts.csv

Several input files may be given; each is processed as one batch, in order,
against the same ledger.
"""

import argparse
import sys
from typing import Sequence

from payments_engine.config import LOG_FORMATS, LOG_LEVELS, EngineConfig
from payments_engine.engine import Engine
from payments_engine.exceptions import PaymentsEngineError
from payments_engine.logging import get_logger, setup_logging
from payments_engine.sinks import AccountCsvSink
from payments_engine.sources import read_transactions

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="payments-engine",
        description="Replay a CSV stream of client transactions and print final account balances as CSV",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="TRANSACTIONS_CSV",
        help="Transactions file(s) with header type,client,tx,amount",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level (default: $LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=None,
        help="Log format (default: $LOG_FORMAT or standard)",
    )
    return parser


def run(inputs: Sequence[str], config: EngineConfig) -> Engine:
    """Process every input file in order and return the engine."""
    engine = Engine()
    for path in inputs:
        batch = read_transactions(path.strip(), amount_scale=config.ingestion.amount_scale)
        engine.process(batch)
    return engine


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = EngineConfig.from_env()
    except PaymentsEngineError as e:
        print(f"payments-engine: {e}", file=sys.stderr)
        return 1

    if args.log_level:
        config.logging.level = args.log_level
    if args.log_format:
        config.logging.format_type = args.log_format
    setup_logging(config.logging.level, config.logging.format_type)

    try:
        engine = run(args.inputs, config)
        sink = AccountCsvSink(sys.stdout)
        sink.write_batch(engine.accounts.all_sorted_by_client_id())
        sink.close()
    except PaymentsEngineError as e:
        logger.error("%s", e)
        return 1

    logger.info(
        "Processed %d transactions into %d accounts",
        len(engine.entries),
        sink.count,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
