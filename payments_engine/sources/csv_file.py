"""CSV transaction reader.

Input rows look like::

    type,       client, tx, amount
    deposit,    1,      1,  1.0
    dispute,    1,      1,

Fields are whitespace-trimmed, the header row is required and rows are
returned in file order. Dispute, resolve and chargeback rows may leave the
amount empty or omit the column entirely; an amount given on such a row is
ignored. A leading UTF-8 byte order mark is skipped.
"""

import csv
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterator

from payments_engine.exceptions import IngestionError, InvalidTransactionError
from payments_engine.logging import get_logger
from payments_engine.models import Transaction, TransactionType

logger = get_logger(__name__)

REQUIRED_COLUMNS = ("type", "client", "tx")


def read_transactions(path: str | Path, amount_scale: int = 4) -> list[Transaction]:
    """Read every transaction from a CSV file.

    Parameters
    ----------
    path : str | Path
        Input file path.
    amount_scale : int
        Maximum number of fraction digits accepted in an amount.

    Returns
    -------
    list[Transaction]
        Transactions in file order.

    Raises
    ------
    IngestionError
        If the file is missing or any row fails to parse.
    """
    transactions = list(iter_transactions(path, amount_scale=amount_scale))
    logger.info("Read %d transactions from %s", len(transactions), path)
    return transactions


def iter_transactions(path: str | Path, amount_scale: int = 4) -> Iterator[Transaction]:
    """Lazily parse transactions from a CSV file, in file order."""
    path = Path(path)
    if not path.is_file():
        raise IngestionError(f"Transactions csv file does not exist: '{path}'")

    try:
        with open(path, newline="", encoding="utf-8-sig") as f:
            yield from _parse_rows(csv.reader(f), amount_scale)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise IngestionError(f"Failed to read transactions file '{path}': {e}") from e


def _parse_rows(reader: Iterator[list[str]], amount_scale: int) -> Iterator[Transaction]:
    header = next(reader, None)
    if header is None:
        raise IngestionError("Transactions file is empty, a header row is required")

    columns = {name.strip(): i for i, name in enumerate(header)}
    missing = [name for name in REQUIRED_COLUMNS if name not in columns]
    if missing:
        raise IngestionError(f"Header is missing column(s): {', '.join(missing)}")

    for row_number, row in enumerate(reader, start=1):
        if not any(cell.strip() for cell in row):
            continue

        fields = {name: _cell(row, i) for name, i in columns.items()}
        try:
            yield _parse_record(fields, amount_scale)
        except InvalidTransactionError as e:
            raise InvalidTransactionError(f"Failed to parse transaction at row {row_number}: {e}") from e


def _cell(row: list[str], index: int) -> str:
    return row[index].strip() if index < len(row) else ""


def _parse_record(fields: dict[str, str], amount_scale: int) -> Transaction:
    """Build a transaction from trimmed string fields."""
    try:
        tx_type = TransactionType(fields["type"])
    except ValueError as e:
        raise InvalidTransactionError(f"unknown transaction type {fields['type']!r}") from e

    client = _parse_unsigned(fields["client"], "client")
    tx = _parse_unsigned(fields["tx"], "tx")

    # Dispute-family rows refer to another record's amount; a stray value is ignored
    raw_amount = fields.get("amount", "") if tx_type.carries_amount else ""
    amount = _parse_amount(raw_amount, amount_scale) if raw_amount else None

    return Transaction(type=tx_type, client=client, tx=tx, amount=amount)


def _parse_unsigned(text: str, name: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise InvalidTransactionError(f"{name} must be an unsigned integer, got {text!r}")
    return int(text)


def _parse_amount(text: str, amount_scale: int) -> Decimal:
    try:
        amount = Decimal(text)
    except InvalidOperation as e:
        raise InvalidTransactionError(f"amount is not a decimal number: {text!r}") from e

    if not amount.is_finite():
        raise InvalidTransactionError(f"amount must be finite, got {text!r}")

    exponent = amount.as_tuple().exponent
    if isinstance(exponent, int) and -exponent > amount_scale:
        raise InvalidTransactionError(
            f"amount {text!r} has more than {amount_scale} fraction digits"
        )
    return amount
