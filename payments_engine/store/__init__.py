"""In-memory stores for ledger entries and account balances."""

from payments_engine.store.ledger import AccountTable, EntryStore

__all__ = ["AccountTable", "EntryStore"]
