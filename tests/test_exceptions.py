"""Tests for custom exception hierarchy."""

from payments_engine.exceptions import (
    ConfigurationError,
    IngestionError,
    InvalidTransactionError,
    PaymentsEngineError,
    ReportingError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_payments_engine_error_is_exception(self) -> None:
        assert isinstance(PaymentsEngineError("test"), Exception)

    def test_ingestion_error_is_payments_engine_error(self) -> None:
        assert isinstance(IngestionError("test"), PaymentsEngineError)

    def test_invalid_transaction_is_ingestion_error(self) -> None:
        err = InvalidTransactionError("test")
        assert isinstance(err, IngestionError)
        assert isinstance(err, PaymentsEngineError)

    def test_reporting_error_is_payments_engine_error(self) -> None:
        assert isinstance(ReportingError("test"), PaymentsEngineError)

    def test_configuration_error_is_payments_engine_error(self) -> None:
        assert isinstance(ConfigurationError("test"), PaymentsEngineError)

    def test_exception_message(self) -> None:
        err = InvalidTransactionError("deposit 7 requires an amount")
        assert str(err) == "deposit 7 requires an amount"
