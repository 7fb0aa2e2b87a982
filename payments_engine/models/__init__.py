"""Domain models for the ledger engine."""

from payments_engine.models.account import Account
from payments_engine.models.enums import TransactionType
from payments_engine.models.transaction import Transaction

__all__ = ["Account", "Transaction", "TransactionType"]
