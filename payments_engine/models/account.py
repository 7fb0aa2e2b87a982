"""Account model for the ledger."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Account:
    """Client account balances.

    ``total`` always equals ``available + held`` once a transaction has been
    fully applied. ``locked`` is set by a chargeback and never cleared.
    """

    client: int
    available: Decimal = Decimal(0)
    held: Decimal = Decimal(0)
    total: Decimal = Decimal(0)
    locked: bool = False

    @classmethod
    def new(cls, client: int) -> "Account":
        """Create a zero-valued, unlocked account."""
        return cls(client=client)
