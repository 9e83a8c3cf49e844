"""Custom exception hierarchy for ledger-sim."""


class LedgerError(Exception):
    """Base exception for all ledger-sim errors."""


class ValidationError(LedgerError):
    """Raised when an input value is rejected before any state changes."""


class InvalidAmountError(ValidationError):
    """Raised when a transaction amount is not strictly positive."""


class InvalidRateError(ValidationError):
    """Raised when an interest rate is outside the open interval (0, 100)."""


class InvalidDateError(ValidationError):
    """Raised when a date or month string cannot be parsed."""


class InvalidFormatError(ValidationError):
    """Raised when a command line or identifier is malformed."""


class InsufficientFundsError(LedgerError):
    """Raised when a withdrawal exceeds the account's current balance."""


class EntityNotFoundError(LedgerError):
    """Raised when a referenced entity does not exist."""


class AccountNotFoundError(EntityNotFoundError):
    """Raised when a statement is requested for an account with no history."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
