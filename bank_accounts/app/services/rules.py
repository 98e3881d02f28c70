from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Protocol

from ..core.errors import ConfigurationError, InvalidArgumentError, RuleViolationError
from ..core.money import OVERDRAFT_CEILING, ZERO
from ..models import AccountType, BankAccount


class BusinessRule(Protocol):
    def validate(self, account: BankAccount, amount: Decimal) -> None:
        ...


class DepositRule:
    """Amounts moved in or out of an account must be strictly positive.

    The service applies this to withdrawals as well, so it is the only place
    amount positivity is decided.
    """

    def validate(self, account: BankAccount, amount: Decimal) -> None:
        if amount <= ZERO:
            raise InvalidArgumentError("Amount must be positive.")


class SavingsWithdrawalRule:
    def validate(self, account: BankAccount, amount: Decimal) -> None:
        if account.balance - amount < ZERO:
            raise RuleViolationError("Savings accounts cannot have a negative balance.")


class CheckingWithdrawalRule:
    def validate(self, account: BankAccount, amount: Decimal) -> None:
        if account.balance - amount < OVERDRAFT_CEILING:
            raise RuleViolationError(
                f"Checking accounts cannot have a balance below {OVERDRAFT_CEILING}."
            )


WITHDRAWAL_RULES: Mapping[AccountType, BusinessRule] = MappingProxyType(
    {
        AccountType.SAVINGS: SavingsWithdrawalRule(),
        AccountType.CHECKING: CheckingWithdrawalRule(),
    }
)


def withdrawal_rule_for(
    account_type: AccountType,
    rules: Mapping[AccountType, BusinessRule] = WITHDRAWAL_RULES,
) -> BusinessRule:
    try:
        return rules[account_type]
    except KeyError as exc:
        raise ConfigurationError(
            f"No withdrawal rule defined for account type {account_type!r}"
        ) from exc


def check_rule_coverage(
    rules: Mapping[AccountType, BusinessRule] = WITHDRAWAL_RULES,
) -> None:
    """Fail fast when an account type has no withdrawal rule registered."""
    missing = [account_type.value for account_type in AccountType if account_type not in rules]
    if missing:
        raise ConfigurationError(
            f"No withdrawal rule defined for account types: {', '.join(missing)}"
        )
