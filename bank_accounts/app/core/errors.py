class BankAccountError(Exception):
    """Base class for errors raised by the account core."""


class InvalidArgumentError(BankAccountError):
    """Raised when a caller-supplied value violates a precondition."""


class InvariantViolationError(InvalidArgumentError):
    """Raised when an account would be left in a state its type forbids."""


class AccountNotFoundError(BankAccountError):
    """Raised when an account id is missing from the store."""


class RuleViolationError(BankAccountError):
    """Raised when a withdrawal would break the account type's balance floor."""


class ConfigurationError(BankAccountError):
    """Raised when no rule is registered for an account type."""


class AccountNumberConflictError(BankAccountError):
    """Raised when no unused account number could be drawn."""
