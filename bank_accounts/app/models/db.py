from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Optional, Union
from uuid import uuid4

from sqlalchemy import Column
from sqlmodel import Field, SQLModel

from ..core.errors import InvalidArgumentError, InvariantViolationError
from ..core.money import OVERDRAFT_CEILING, ZERO, MoneyLike, to_money
from .types import ExactDecimal


class AccountType(str, Enum):
    SAVINGS = "SAVINGS"
    CHECKING = "CHECKING"


def generate_account_number() -> str:
    return uuid4().hex[:12]


class BankAccount(SQLModel, table=True):
    """Bank account row.

    Mutations go through the ``set_*`` methods, which refuse any state the
    account type does not allow regardless of what the caller checked first.
    """

    __tablename__ = "bank_accounts"

    id: Optional[int] = Field(default=None, primary_key=True)
    account_number: str = Field(
        default_factory=generate_account_number,
        max_length=12,
        unique=True,
        nullable=False,
    )
    balance: Decimal = Field(default=ZERO, sa_column=Column(ExactDecimal(), nullable=False))
    account_type: AccountType = Field(nullable=False)
    customer_id: int = Field(index=True, nullable=False)

    @classmethod
    def open(
        cls,
        account_type: Union[AccountType, str],
        customer_id: int,
        balance: MoneyLike = ZERO,
    ) -> "BankAccount":
        initial = to_money(balance)
        if initial < ZERO:
            raise InvalidArgumentError("Initial balance must be zero or greater.")

        account = cls(account_number=generate_account_number())
        account.set_account_type(account_type)
        account.set_customer_id(customer_id)
        account.set_balance(initial)
        return account

    def set_balance(self, value: MoneyLike) -> None:
        new_balance = to_money(value)
        if self.account_type is AccountType.SAVINGS and new_balance < ZERO:
            raise InvariantViolationError("Savings accounts cannot have a negative balance.")
        if self.account_type is AccountType.CHECKING and new_balance < OVERDRAFT_CEILING:
            raise InvariantViolationError(
                f"Checking accounts cannot have a balance below {OVERDRAFT_CEILING}."
            )
        self.balance = new_balance

    def set_account_type(self, account_type: Union[AccountType, str, None]) -> None:
        if account_type is None:
            raise InvalidArgumentError("Account type is required.")
        try:
            self.account_type = AccountType(account_type)
        except ValueError as exc:
            raise InvalidArgumentError(f"Unknown account type: {account_type!r}") from exc

    def set_customer_id(self, customer_id: Optional[int]) -> None:
        if (
            customer_id is None
            or isinstance(customer_id, bool)
            or not isinstance(customer_id, int)
            or customer_id <= 0
        ):
            raise InvalidArgumentError("Customer ID must be a positive value.")
        self.customer_id = customer_id
