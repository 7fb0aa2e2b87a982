"""Tests for domain models."""

from decimal import Decimal

import pytest

from payments_engine.exceptions import InvalidTransactionError
from payments_engine.models import Account, Transaction, TransactionType


class TestTransactionType:
    """Tests for TransactionType enum."""

    def test_values_are_lowercase_names(self) -> None:
        assert [t.value for t in TransactionType] == [
            "deposit",
            "withdrawal",
            "dispute",
            "resolve",
            "chargeback",
        ]

    def test_carries_amount(self) -> None:
        assert TransactionType.DEPOSIT.carries_amount
        assert TransactionType.WITHDRAWAL.carries_amount
        assert not TransactionType.DISPUTE.carries_amount
        assert not TransactionType.RESOLVE.carries_amount
        assert not TransactionType.CHARGEBACK.carries_amount


class TestAccount:
    """Tests for Account model."""

    def test_new_account_is_zeroed(self) -> None:
        account = Account.new(1)

        assert account.client == 1
        assert account.available == Decimal(0)
        assert account.held == Decimal(0)
        assert account.total == Decimal(0)
        assert account.locked is False

    def test_accounts_are_independent(self) -> None:
        first = Account.new(1)
        second = Account.new(2)
        first.available += Decimal("5")

        assert second.available == Decimal(0)


class TestTransaction:
    """Tests for Transaction model."""

    def test_deposit(self) -> None:
        tx = Transaction.deposit(1, 10, "1.5")

        assert tx.type == TransactionType.DEPOSIT
        assert tx.client == 1
        assert tx.tx == 10
        assert tx.amount == Decimal("1.5")
        assert tx.disputed is False

    def test_dispute_has_no_amount(self) -> None:
        tx = Transaction.dispute(1, 10)

        assert tx.type == TransactionType.DISPUTE
        assert tx.amount is None

    def test_type_coerced_from_string(self) -> None:
        tx = Transaction("resolve", 3, 4)

        assert tx.type is TransactionType.RESOLVE

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(InvalidTransactionError, match="Unknown transaction type"):
            Transaction("refund", 1, 1)

    @pytest.mark.parametrize("tx_type", [TransactionType.DEPOSIT, TransactionType.WITHDRAWAL])
    def test_amount_required(self, tx_type: TransactionType) -> None:
        with pytest.raises(InvalidTransactionError, match="requires an amount"):
            Transaction(tx_type, 1, 1)

    @pytest.mark.parametrize(
        "tx_type",
        [TransactionType.DISPUTE, TransactionType.RESOLVE, TransactionType.CHARGEBACK],
    )
    def test_amount_forbidden(self, tx_type: TransactionType) -> None:
        with pytest.raises(InvalidTransactionError, match="must not carry an amount"):
            Transaction(tx_type, 1, 1, Decimal("1"))

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(InvalidTransactionError, match="negative"):
            Transaction.withdrawal(1, 1, "-0.01")

    def test_zero_amount_allowed(self) -> None:
        assert Transaction.deposit(1, 1, "0").amount == Decimal(0)

    @pytest.mark.parametrize("client", [-1, 65536])
    def test_client_out_of_range(self, client: int) -> None:
        with pytest.raises(InvalidTransactionError, match="Client id"):
            Transaction.dispute(client, 1)

    @pytest.mark.parametrize("tx", [-1, 2**32])
    def test_tx_out_of_range(self, tx: int) -> None:
        with pytest.raises(InvalidTransactionError, match="Transaction id"):
            Transaction.dispute(1, tx)

    def test_boundary_ids_accepted(self) -> None:
        tx = Transaction.deposit(65535, 2**32 - 1, "1")

        assert tx.client == 65535
        assert tx.tx == 4294967295

    def test_disputed_ignored_in_equality(self) -> None:
        a = Transaction.deposit(1, 1, "2")
        b = Transaction.deposit(1, 1, "2")
        b.disputed = True

        assert a == b
