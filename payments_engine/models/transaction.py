"""Transaction record model."""

from dataclasses import dataclass, field
from decimal import Decimal

from payments_engine.exceptions import InvalidTransactionError
from payments_engine.models.enums import TransactionType

MAX_CLIENT_ID = 2**16 - 1
MAX_TX_ID = 2**32 - 1


@dataclass
class Transaction:
    """A single ledger entry as read from the input stream.

    Deposits and withdrawals carry an ``amount`` and their own ``tx`` id.
    Disputes, resolves and chargebacks carry no amount and reuse the ``tx``
    of the record they refer to.

    ``disputed`` is internal state toggled while processing dispute-family
    records; it is not part of the input format.
    """

    type: TransactionType
    client: int
    tx: int
    amount: Decimal | None = None
    disputed: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        try:
            self.type = TransactionType(self.type)
        except ValueError as e:
            raise InvalidTransactionError(f"Unknown transaction type: {self.type!r}") from e

        if not 0 <= self.client <= MAX_CLIENT_ID:
            raise InvalidTransactionError(f"Client id {self.client} out of range")
        if not 0 <= self.tx <= MAX_TX_ID:
            raise InvalidTransactionError(f"Transaction id {self.tx} out of range")

        if self.type.carries_amount:
            if self.amount is None:
                raise InvalidTransactionError(f"{self.type.value} {self.tx} requires an amount")
            if self.amount < 0:
                raise InvalidTransactionError(f"{self.type.value} {self.tx} has a negative amount")
        elif self.amount is not None:
            raise InvalidTransactionError(f"{self.type.value} {self.tx} must not carry an amount")

    @classmethod
    def deposit(cls, client: int, tx: int, amount: Decimal | str) -> "Transaction":
        return cls(TransactionType.DEPOSIT, client, tx, Decimal(amount))

    @classmethod
    def withdrawal(cls, client: int, tx: int, amount: Decimal | str) -> "Transaction":
        return cls(TransactionType.WITHDRAWAL, client, tx, Decimal(amount))

    @classmethod
    def dispute(cls, client: int, tx: int) -> "Transaction":
        return cls(TransactionType.DISPUTE, client, tx)

    @classmethod
    def resolve(cls, client: int, tx: int) -> "Transaction":
        return cls(TransactionType.RESOLVE, client, tx)

    @classmethod
    def chargeback(cls, client: int, tx: int) -> "Transaction":
        return cls(TransactionType.CHARGEBACK, client, tx)
