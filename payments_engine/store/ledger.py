"""Ledger entry store and account table."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from payments_engine.models import Account, Transaction


@dataclass
class EntryStore:
    """Append-only sequence of transactions in arrival order.

    Deposits and withdrawals are indexed by ``tx`` id so dispute-family
    records can find their target in O(1). Records are mutated in place
    through the index (only the ``disputed`` flag changes), never copied.
    """

    transactions: list[Transaction] = field(default_factory=list)

    # tx id -> position in ``transactions``
    _tx_index: dict[int, int] = field(default_factory=dict, repr=False)

    @classmethod
    def from_records(cls, records: Iterable[Transaction]) -> "EntryStore":
        """Build a store holding ``records`` in order."""
        store = cls()
        store.append(records)
        return store

    def append(self, batch: Iterable[Transaction]) -> None:
        """Append a batch in arrival order and extend the tx index.

        Duplicate tx ids among deposits and withdrawals are not rejected;
        the index points at the last one seen.
        """
        start = len(self.transactions)
        self.transactions.extend(batch)
        self._index_from(start)

    def reindex(self) -> None:
        """Rebuild the tx index from scratch over the whole sequence."""
        self._tx_index.clear()
        self._index_from(0)

    def _index_from(self, start: int) -> None:
        for position in range(start, len(self.transactions)):
            transaction = self.transactions[position]
            if transaction.type.carries_amount:
                self._tx_index[transaction.tx] = position

    def get(self, position: int) -> Transaction | None:
        """Return the transaction at a 0-based position, if any."""
        if 0 <= position < len(self.transactions):
            return self.transactions[position]
        return None

    def position_of(self, tx: int) -> int | None:
        """Return the position of the indexed deposit or withdrawal ``tx``."""
        return self._tx_index.get(tx)

    def get_mutable_by_tx_id(self, tx: int) -> Transaction | None:
        """Return the indexed deposit or withdrawal with this tx id, if any."""
        position = self._tx_index.get(tx)
        if position is None:
            return None
        return self.transactions[position]

    def __len__(self) -> int:
        return len(self.transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.transactions)


@dataclass
class AccountTable:
    """Client accounts keyed by client id, created on first reference."""

    accounts: dict[int, Account] = field(default_factory=dict)

    def get(self, client: int) -> Account | None:
        """Look up an account without creating it."""
        return self.accounts.get(client)

    def get_or_create_mutable(self, client: int) -> Account:
        """Return the client's account, creating a zero-valued one if needed."""
        account = self.accounts.get(client)
        if account is None:
            account = Account.new(client)
            self.accounts[client] = account
        return account

    def all_sorted_by_client_id(self) -> Iterator[Account]:
        """Iterate accounts in ascending client id order.

        Each call starts a fresh iteration; nothing is consumed.
        """
        for client in sorted(self.accounts):
            yield self.accounts[client]

    def __len__(self) -> int:
        return len(self.accounts)

    def __contains__(self, client: object) -> bool:
        return client in self.accounts
