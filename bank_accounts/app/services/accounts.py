from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlmodel import Session

from ..core.db import WRITE_TRANSACTION
from ..core.errors import (
    AccountNotFoundError,
    AccountNumberConflictError,
    InvalidArgumentError,
    RuleViolationError,
)
from ..core.money import MoneyLike, to_money
from ..models import (
    AccountCreate,
    AccountResponse,
    AccountUpdate,
    BankAccount,
)
from ..models.db import generate_account_number
from .customers import CustomerValidator
from .repository import BankAccountRepository
from .rules import DepositRule, withdrawal_rule_for


logger = logging.getLogger(__name__)

DEFAULT_ACCOUNT_NUMBER_ATTEMPTS = 5


class AccountService:
    def __init__(
        self,
        session: Session,
        customer_validator: CustomerValidator,
        repository: Optional[BankAccountRepository] = None,
        account_number_attempts: int = DEFAULT_ACCOUNT_NUMBER_ATTEMPTS,
    ) -> None:
        self.session = session
        self.customer_validator = customer_validator
        self.repository = repository or BankAccountRepository(session)
        self.account_number_attempts = account_number_attempts
        self.deposit_rule = DepositRule()

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    @contextmanager
    def _unit_of_work(self) -> Iterator[None]:
        # Start a fresh transaction so SQLite takes the write lock at BEGIN.
        if self.session.in_transaction():
            self.session.commit()
        self.session.connection(execution_options=WRITE_TRANSACTION)
        try:
            yield
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def _require_customer(self, customer_id: int) -> None:
        if not self.customer_validator.exists(customer_id):
            raise InvalidArgumentError(f"Customer {customer_id} does not exist.")

    def _get_account_for_update(self, account_id: int) -> BankAccount:
        account = self.repository.find_by_id_for_update(account_id)
        if account is None:
            raise AccountNotFoundError(f"Bank account {account_id} not found")
        return account

    def _assign_account_number(self, account: BankAccount) -> None:
        for _ in range(self.account_number_attempts):
            if not self.repository.exists_by_account_number(account.account_number):
                return
            logger.info(
                "account.number.collision",
                extra={"account_number": account.account_number},
            )
            account.account_number = generate_account_number()
        raise AccountNumberConflictError(
            f"Could not allocate a unique account number after "
            f"{self.account_number_attempts} attempts"
        )

    def _account_to_response(self, account: BankAccount) -> AccountResponse:
        return AccountResponse.model_validate(account)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def create_account(self, payload: AccountCreate) -> AccountResponse:
        self._require_customer(payload.customer_id)

        with self._unit_of_work():
            account = BankAccount.open(
                account_type=payload.account_type,
                customer_id=payload.customer_id,
                balance=payload.balance,
            )
            self._assign_account_number(account)
            account = self.repository.save(account)

        logger.info(
            "account.created",
            extra={
                "account_id": account.id,
                "account_number": account.account_number,
                "customer_id": account.customer_id,
                "account_type": account.account_type.value,
            },
        )
        return self._account_to_response(account)

    def update_account(self, account_id: int, payload: AccountUpdate) -> AccountResponse:
        self._require_customer(payload.customer_id)

        with self._unit_of_work():
            account = self._get_account_for_update(account_id)
            account.set_account_type(payload.account_type)
            account.set_balance(payload.balance)
            account.set_customer_id(payload.customer_id)
            account = self.repository.save(account)

        logger.info(
            "account.updated",
            extra={"account_id": account_id, "balance": str(account.balance)},
        )
        return self._account_to_response(account)

    def deposit(self, account_id: int, amount: MoneyLike) -> AccountResponse:
        amount = to_money(amount)

        with self._unit_of_work():
            account = self._get_account_for_update(account_id)
            self.deposit_rule.validate(account, amount)
            account.set_balance(account.balance + amount)
            account = self.repository.save(account)

        logger.info(
            "account.deposit",
            extra={
                "account_id": account_id,
                "amount": str(amount),
                "balance": str(account.balance),
            },
        )
        return self._account_to_response(account)

    def withdraw(self, account_id: int, amount: MoneyLike) -> AccountResponse:
        amount = to_money(amount)

        with self._unit_of_work():
            account = self._get_account_for_update(account_id)
            self.deposit_rule.validate(account, amount)
            rule = withdrawal_rule_for(account.account_type)
            try:
                rule.validate(account, amount)
            except RuleViolationError:
                logger.info(
                    "account.withdraw.rejected",
                    extra={
                        "account_id": account_id,
                        "amount": str(amount),
                        "balance": str(account.balance),
                    },
                )
                raise
            account.set_balance(account.balance - amount)
            account = self.repository.save(account)

        logger.info(
            "account.withdraw",
            extra={
                "account_id": account_id,
                "amount": str(amount),
                "balance": str(account.balance),
            },
        )
        return self._account_to_response(account)

    def delete_account(self, account_id: int) -> bool:
        with self._unit_of_work():
            account = self.repository.find_by_id_for_update(account_id)
            if account is None:
                return False
            self.repository.delete(account)

        logger.info("account.deleted", extra={"account_id": account_id})
        return True

    def get_account(self, account_id: int) -> AccountResponse:
        account = self.repository.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(f"Bank account {account_id} not found")
        return self._account_to_response(account)

    def list_accounts(self) -> list[AccountResponse]:
        return [self._account_to_response(account) for account in self.repository.find_all()]

    def list_customer_accounts(self, customer_id: int) -> list[AccountResponse]:
        self._require_customer(customer_id)
        return [
            self._account_to_response(account)
            for account in self.repository.find_by_customer_id(customer_id)
        ]

    def customer_has_accounts(self, customer_id: int) -> bool:
        return self.repository.exists_by_customer_id(customer_id)
