"""CSV sinks for account reports and transaction streams."""

import csv
from typing import Iterable, TextIO

from payments_engine.exceptions import ReportingError
from payments_engine.sinks.serialization import to_row


class _CsvSink:
    """Write dataclass records as CSV rows with a fixed header."""

    columns: tuple[str, ...] = ()

    def __init__(self, stream: TextIO) -> None:
        """Initialize CSV sink.

        Parameters
        ----------
        stream : TextIO
            Text stream to write to, opened with ``newline=""`` if it is a file.
        """
        self.stream = stream
        self._writer = csv.writer(stream, lineterminator="\n")
        self._header_written = False
        self.count = 0

    def write_batch(self, records: Iterable) -> None:
        """Write records, emitting the header before the first batch."""
        try:
            if not self._header_written:
                self._writer.writerow(self.columns)
                self._header_written = True

            for record in records:
                self._writer.writerow(to_row(record, self.columns))
                self.count += 1
        except (OSError, ValueError, csv.Error) as e:
            raise ReportingError(f"Failed to write {type(self).__name__} output: {e}") from e

    def close(self) -> None:
        """Flush the underlying stream, writing the header if nothing was written."""
        if not self._header_written:
            self.write_batch([])
        try:
            self.stream.flush()
        except (OSError, ValueError) as e:
            raise ReportingError(f"Failed to flush {type(self).__name__} output: {e}") from e


class AccountCsvSink(_CsvSink):
    """Account report: ``client,available,held,total,locked``."""

    columns = ("client", "available", "held", "total", "locked")


class TransactionCsvSink(_CsvSink):
    """Transaction stream in the engine's input format."""

    columns = ("type", "client", "tx", "amount")
