from .db import AccountType, BankAccount
from .schemas import (
    AccountCreate,
    AccountResponse,
    AccountUpdate,
    CustomerAccountsStatus,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "AccountType",
    "AccountUpdate",
    "BankAccount",
    "CustomerAccountsStatus",
]
