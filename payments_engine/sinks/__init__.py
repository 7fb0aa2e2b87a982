"""Output sinks for exporting ledger state."""

from payments_engine.sinks.csv_file import AccountCsvSink, TransactionCsvSink

__all__ = ["AccountCsvSink", "TransactionCsvSink"]
