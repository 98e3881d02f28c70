from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from .db import AccountType


class AccountCreate(BaseModel):
    customer_id: int = Field(..., gt=0, description="Id of the owning customer")
    account_type: AccountType
    balance: Decimal = Field(
        default=Decimal("0.00"),
        ge=0,
        description="Opening balance in the base currency",
    )


class AccountUpdate(BaseModel):
    customer_id: int = Field(..., gt=0)
    account_type: AccountType
    balance: Decimal = Field(..., description="New balance; checked against the account type's floor")


class AccountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    account_number: str
    balance: Decimal
    account_type: AccountType
    customer_id: int


class CustomerAccountsStatus(BaseModel):
    customer_id: int
    has_accounts: bool
