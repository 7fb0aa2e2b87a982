#!/usr/bin/env python3
"""Generate a synthetic transactions CSV for the payments engine.

The output follows the engine's input format (type,client,tx,amount) and
can be fed straight back into ``payments-engine``::

    python scripts/generate_transactions.py --rows 100000 -o transactions.csv
    payments-engine transactions.csv > accounts.csv
"""

import argparse
import logging
import sys
import time
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from payments_engine.exceptions import ReportingError
from payments_engine.generators import TransactionStreamGenerator
from payments_engine.sinks import TransactionCsvSink

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

BATCH_SIZE = 10_000


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Generate a synthetic transactions CSV")
    parser.add_argument(
        "--rows",
        type=int,
        default=10_000,
        help="Number of transaction rows to emit (default: 10000)",
    )
    parser.add_argument(
        "--clients",
        type=int,
        default=100,
        help="Number of distinct client ids (default: 100)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--max-amount",
        type=Decimal,
        default=Decimal("10000"),
        help="Largest deposit amount (default: 10000)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file (default: stdout)",
    )
    args = parser.parse_args()

    if args.rows < 0:
        parser.error("--rows must be non-negative")
    if args.clients < 1:
        parser.error("--clients must be at least 1")

    generator = TransactionStreamGenerator(
        seed=args.seed,
        num_clients=args.clients,
        max_amount=args.max_amount,
    )

    t0 = time.perf_counter()
    out = open(args.output, "w", newline="", encoding="utf-8") if args.output else sys.stdout
    try:
        sink = TransactionCsvSink(out)
        remaining = args.rows
        while remaining > 0:
            size = min(BATCH_SIZE, remaining)
            sink.write_batch(generator.generate(size))
            remaining -= size
        sink.close()
    except ReportingError as e:
        logger.error("%s", e)
        sys.exit(1)
    finally:
        if out is not sys.stdout:
            out.close()

    logger.info(
        "Generated %d transactions for %d clients in %.1fs",
        sink.count,
        args.clients,
        time.perf_counter() - t0,
    )


if __name__ == "__main__":
    main()
