"""Transaction processing state machine and incremental runner."""

from typing import Iterable

from payments_engine.logging import get_logger
from payments_engine.models import Account, Transaction, TransactionType
from payments_engine.store import AccountTable, EntryStore

logger = get_logger(__name__)


class TransactionProcessor:
    """Apply one stored transaction to its client's account.

    Every precondition failure is a silent no-op: locked account, unknown
    position, missing or later-arriving dispute target, insufficient funds
    or wrong dispute state. Nothing here raises on well-formed records.
    """

    def __init__(self, entries: EntryStore, accounts: AccountTable) -> None:
        self.entries = entries
        self.accounts = accounts

    def apply(self, position: int, client: int) -> None:
        """Apply the transaction stored at ``position`` for ``client``."""
        account = self.accounts.get_or_create_mutable(client)

        # Frozen after a chargeback
        if account.locked:
            return

        transaction = self.entries.get(position)
        if transaction is None:
            return

        handler = self._handlers[transaction.type]
        handler(self, position, account, transaction)

    def _target(self, position: int, tx: int) -> Transaction | None:
        """Deposit or withdrawal ``tx`` referenced from ``position``.

        Only records that arrived before the referencing one count, so a
        dispute never acts on funds that have not been applied yet. Within a
        single batch this means a dispute listed ahead of its deposit is
        ignored rather than holding the deposit and suppressing it.
        """
        target_position = self.entries.position_of(tx)
        if target_position is None or target_position > position:
            return None
        return self.entries.get_mutable_by_tx_id(tx)

    def _deposit(self, position: int, account: Account, transaction: Transaction) -> None:
        if transaction.disputed or transaction.amount is None:
            return

        account.available += transaction.amount
        account.total += transaction.amount

    def _withdrawal(self, position: int, account: Account, transaction: Transaction) -> None:
        if transaction.disputed or transaction.amount is None:
            return

        if account.available < transaction.amount:
            return

        account.available -= transaction.amount
        account.total -= transaction.amount

    def _dispute(self, position: int, account: Account, transaction: Transaction) -> None:
        target = self._target(position, transaction.tx)
        if target is None or target.disputed or target.amount is None:
            return

        account.available -= target.amount
        account.held += target.amount
        target.disputed = True

    def _resolve(self, position: int, account: Account, transaction: Transaction) -> None:
        target = self._target(position, transaction.tx)
        if target is None or not target.disputed or target.amount is None:
            return

        account.available += target.amount
        account.held -= target.amount
        target.disputed = False

    def _chargeback(self, position: int, account: Account, transaction: Transaction) -> None:
        target = self._target(position, transaction.tx)
        if target is None or not target.disputed or target.amount is None:
            return

        account.held -= target.amount
        account.total -= target.amount
        account.locked = True

    _handlers = {
        TransactionType.DEPOSIT: _deposit,
        TransactionType.WITHDRAWAL: _withdrawal,
        TransactionType.DISPUTE: _dispute,
        TransactionType.RESOLVE: _resolve,
        TransactionType.CHARGEBACK: _chargeback,
    }


class Engine:
    """Owns the ledger and applies each appended batch exactly once.

    A cursor records how far the entry store has been applied, so calling
    :meth:`process` with successive batches gives the same account state
    as processing their concatenation in a single call. Re-submitting a
    batch that was already processed appends it again.

    Parameters
    ----------
    accounts : AccountTable | None
        Pre-existing account table to update (a fresh one by default).
    """

    def __init__(self, accounts: AccountTable | None = None) -> None:
        self._accounts = accounts if accounts is not None else AccountTable()
        self._entries = EntryStore()
        self._processor = TransactionProcessor(self._entries, self._accounts)
        self._last_processed = 0

    @property
    def accounts(self) -> AccountTable:
        return self._accounts

    @property
    def entries(self) -> EntryStore:
        return self._entries

    @property
    def last_processed(self) -> int:
        """Number of leading entries already applied."""
        return self._last_processed

    def process(self, batch: Iterable[Transaction]) -> None:
        """Append ``batch`` and apply every entry not yet processed."""
        self._entries.append(batch)

        start, end = self._last_processed, len(self._entries)
        for position in range(start, end):
            transaction = self._entries.get(position)
            if transaction is not None:
                self._processor.apply(position, transaction.client)

        self._last_processed = end
        logger.debug("Applied entries %d..%d (%d accounts)", start, end, len(self._accounts))
