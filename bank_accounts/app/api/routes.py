from decimal import Decimal
from typing import Union

from fastapi import APIRouter, Depends, Query, Response, status

from ..core.dependencies import get_account_service
from ..models import (
    AccountCreate,
    AccountResponse,
    AccountUpdate,
    CustomerAccountsStatus,
)
from ..services import AccountService


router = APIRouter(prefix="/accounts", tags=["accounts"])

@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_account(
    payload: AccountCreate,
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    return service.create_account(payload)

@router.get("", response_model=list[AccountResponse])
def list_accounts(
    service: AccountService = Depends(get_account_service),
) -> list[AccountResponse]:
    return service.list_accounts()

@router.get("/customer/{customer_id}", response_model=list[AccountResponse])
def list_customer_accounts(
    customer_id: int,
    service: AccountService = Depends(get_account_service),
) -> Union[list[AccountResponse], Response]:
    accounts = service.list_customer_accounts(customer_id)
    if not accounts:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return accounts

@router.get("/customer/{customer_id}/exists", response_model=CustomerAccountsStatus)
def customer_has_accounts(
    customer_id: int,
    service: AccountService = Depends(get_account_service),
) -> CustomerAccountsStatus:
    return CustomerAccountsStatus(
        customer_id=customer_id,
        has_accounts=service.customer_has_accounts(customer_id),
    )

@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    return service.get_account(account_id)

@router.put("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: int,
    payload: AccountUpdate,
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    return service.update_account(account_id, payload)

@router.put("/{account_id}/deposit", response_model=AccountResponse)
def deposit(
    account_id: int,
    amount: Decimal = Query(..., description="Amount to deposit"),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    return service.deposit(account_id, amount)

@router.put("/{account_id}/withdraw", response_model=AccountResponse)
def withdraw(
    account_id: int,
    amount: Decimal = Query(..., description="Amount to withdraw"),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    return service.withdraw(account_id, amount)

@router.delete("/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
) -> Response:
    service.delete_account(account_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

__all__ = ["router"]
