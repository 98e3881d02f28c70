from functools import lru_cache

import httpx
from fastapi import Depends
from sqlmodel import Session

from ..services import (
    AccountService,
    BankAccountRepository,
    CustomerValidator,
    HttpCustomerValidator,
)
from .config import get_settings
from .db import get_session


@lru_cache(maxsize=1)
def get_customer_client() -> httpx.Client:
    settings = get_settings()
    return httpx.Client(
        base_url=settings.customers_base_url,
        timeout=settings.customers_timeout_seconds,
    )


def close_customer_client() -> None:
    if get_customer_client.cache_info().currsize:
        get_customer_client().close()
        get_customer_client.cache_clear()


def get_customer_validator() -> CustomerValidator:
    return HttpCustomerValidator(get_customer_client())


def get_account_service(
    session: Session = Depends(get_session),
    customer_validator: CustomerValidator = Depends(get_customer_validator),
) -> AccountService:
    repository = BankAccountRepository(session)
    return AccountService(
        session,
        customer_validator,
        repository,
        account_number_attempts=get_settings().account_number_max_attempts,
    )
