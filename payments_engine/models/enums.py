"""Enumeration types for ledger entities."""

from enum import Enum


class TransactionType(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"

    @property
    def carries_amount(self) -> bool:
        """Whether records of this type carry their own amount.

        Only deposits and withdrawals move funds by themselves and can be
        referenced by a later dispute, resolve or chargeback.
        """
        return self in (TransactionType.DEPOSIT, TransactionType.WITHDRAWAL)
