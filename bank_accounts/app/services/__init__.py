from .accounts import AccountService
from .customers import CustomerValidator, HttpCustomerValidator
from .repository import BankAccountRepository
from .rules import (
    CheckingWithdrawalRule,
    DepositRule,
    SavingsWithdrawalRule,
    check_rule_coverage,
    withdrawal_rule_for,
)

__all__ = [
    "AccountService",
    "BankAccountRepository",
    "CheckingWithdrawalRule",
    "CustomerValidator",
    "DepositRule",
    "HttpCustomerValidator",
    "SavingsWithdrawalRule",
    "check_rule_coverage",
    "withdrawal_rule_for",
]
