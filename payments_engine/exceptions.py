"""Custom exception hierarchy for payments-engine."""


class PaymentsEngineError(Exception):
    """Base exception for all payments-engine errors."""


class IngestionError(PaymentsEngineError):
    """Raised when transaction input cannot be read or parsed."""


class InvalidTransactionError(IngestionError):
    """Raised when a transaction record has an invalid shape for its type."""


class ReportingError(PaymentsEngineError):
    """Raised when account state cannot be written out."""


class ConfigurationError(PaymentsEngineError):
    """Raised when configuration is invalid or missing."""
