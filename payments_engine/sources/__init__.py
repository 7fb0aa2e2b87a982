"""Input sources that feed transactions into the engine."""

from payments_engine.sources.csv_file import iter_transactions, read_transactions

__all__ = ["iter_transactions", "read_transactions"]
