"""Transaction stream generator."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from decimal import ROUND_DOWN, Decimal
from typing import Iterator

from payments_engine.generators.base import BaseGenerator
from payments_engine.models import Transaction, TransactionType

AMOUNT_QUANTUM = Decimal("0.0001")


@dataclass
class _ClientHistory:
    """What the generator remembers about one client's emitted stream."""

    available: Decimal = Decimal(0)
    deposits: dict[int, Decimal] = field(default_factory=dict)  # undisputed
    disputes: dict[int, Decimal] = field(default_factory=dict)  # open


class TransactionStreamGenerator(BaseGenerator):
    """Generate plausible, chronologically ordered transaction streams.

    Withdrawals mostly stay within the client's balance, disputes target
    the client's own undisputed deposits, and resolves/chargebacks only
    close open disputes. A small share of withdrawals deliberately
    overdraw so insufficient-funds handling is exercised.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    num_clients : int
        Number of distinct client ids (1..num_clients).
    min_amount, max_amount : Decimal
        Bounds for deposit amounts.
    overdraft_rate : float
        Probability a withdrawal asks for more than the client has.
    """

    TRANSACTION_TYPES = list(TransactionType)
    TRANSACTION_WEIGHTS = [0.60, 0.25, 0.08, 0.04, 0.03]

    def __init__(
        self,
        seed: int | None = None,
        num_clients: int = 10,
        min_amount: Decimal = Decimal("0.01"),
        max_amount: Decimal = Decimal("10000"),
        overdraft_rate: float = 0.05,
    ) -> None:
        super().__init__(seed)
        if num_clients < 1:
            raise ValueError("num_clients must be at least 1")
        self.num_clients = num_clients
        self.min_amount = Decimal(min_amount)
        self.max_amount = Decimal(max_amount)
        self.overdraft_rate = overdraft_rate
        self._history: dict[int, _ClientHistory] = {}
        self._next_tx = 1

    def generate(self, count: int) -> Iterator[Transaction]:
        """Yield ``count`` transactions.

        Parameters
        ----------
        count : int
            Number of records to emit.

        Yields
        ------
        Transaction
            Next record in arrival order.
        """
        for _ in range(count):
            yield self.generate_one()

    def generate_one(self) -> Transaction:
        """Generate the next transaction in the stream."""
        client = self.fake.random_int(min=1, max=self.num_clients)
        history = self._history.setdefault(client, _ClientHistory())
        tx_type = random.choices(self.TRANSACTION_TYPES, weights=self.TRANSACTION_WEIGHTS, k=1)[0]

        if tx_type == TransactionType.WITHDRAWAL and history.available > 0:
            return self._withdrawal(client, history)
        if tx_type == TransactionType.DISPUTE and history.deposits:
            return self._dispute(client, history)
        if tx_type in (TransactionType.RESOLVE, TransactionType.CHARGEBACK) and history.disputes:
            return self._close_dispute(tx_type, client, history)
        return self._deposit(client, history)

    def _deposit(self, client: int, history: _ClientHistory) -> Transaction:
        amount = self._random_amount()
        tx = self._take_tx_id()
        history.available += amount
        history.deposits[tx] = amount
        return Transaction.deposit(client, tx, amount)

    def _withdrawal(self, client: int, history: _ClientHistory) -> Transaction:
        if random.random() < self.overdraft_rate:
            amount = history.available + self._random_amount()
        else:
            fraction = Decimal(str(random.uniform(0.05, 1.0)))
            amount = (history.available * fraction).quantize(AMOUNT_QUANTUM, rounding=ROUND_DOWN)
            history.available -= amount
        return Transaction.withdrawal(client, self._take_tx_id(), amount)

    def _dispute(self, client: int, history: _ClientHistory) -> Transaction:
        tx = random.choice(list(history.deposits))
        amount = history.deposits.pop(tx)
        history.available -= amount
        history.disputes[tx] = amount
        return Transaction.dispute(client, tx)

    def _close_dispute(
        self, tx_type: TransactionType, client: int, history: _ClientHistory
    ) -> Transaction:
        tx = random.choice(list(history.disputes))
        amount = history.disputes.pop(tx)
        if tx_type == TransactionType.RESOLVE:
            history.available += amount
            history.deposits[tx] = amount
            return Transaction.resolve(client, tx)
        return Transaction.chargeback(client, tx)

    def _random_amount(self) -> Decimal:
        """Deposit amount with exactly four fraction digits."""
        value = self.fake.pydecimal(
            right_digits=4,
            positive=True,
            min_value=float(self.min_amount),
            max_value=float(self.max_amount),
        )
        amount = Decimal(value).quantize(AMOUNT_QUANTUM, rounding=ROUND_DOWN)
        return max(amount, self.min_amount.quantize(AMOUNT_QUANTUM))

    def _take_tx_id(self) -> int:
        tx = self._next_tx
        self._next_tx += 1
        return tx
