"""Ledger engine deriving client account balances from a transaction stream."""

from payments_engine.engine import Engine, TransactionProcessor
from payments_engine.models import Account, Transaction, TransactionType
from payments_engine.store import AccountTable, EntryStore

__all__ = [
    "Account",
    "AccountTable",
    "Engine",
    "EntryStore",
    "Transaction",
    "TransactionProcessor",
    "TransactionType",
]

__version__ = "0.1.0"
