from __future__ import annotations

from typing import Optional

from sqlmodel import Session, select

from ..models import BankAccount


class BankAccountRepository:
    """Thin data access layer around the SQLModel session.

    Nothing here commits; the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    # Writes -------------------------------------------------------------
    def save(self, account: BankAccount) -> BankAccount:
        persisted = self.session.merge(account)
        self.session.flush()
        self.session.refresh(persisted)
        return persisted

    def delete(self, account: BankAccount) -> None:
        if account.id is None:
            return
        persisted = self.session.get(BankAccount, account.id)
        if persisted is None:
            return
        self.session.delete(persisted)
        self.session.flush()

    # Reads --------------------------------------------------------------
    def find_by_id(self, account_id: int) -> Optional[BankAccount]:
        return self.session.get(BankAccount, account_id)

    def find_by_id_for_update(self, account_id: int) -> Optional[BankAccount]:
        stmt = (
            select(BankAccount)
            .where(BankAccount.id == account_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return self.session.exec(stmt).first()

    def find_all(self) -> list[BankAccount]:
        stmt = select(BankAccount).order_by(BankAccount.id)
        return list(self.session.exec(stmt))

    def find_by_customer_id(self, customer_id: int) -> list[BankAccount]:
        stmt = (
            select(BankAccount)
            .where(BankAccount.customer_id == customer_id)
            .order_by(BankAccount.id)
        )
        return list(self.session.exec(stmt))

    def exists_by_customer_id(self, customer_id: int) -> bool:
        stmt = select(BankAccount.id).where(BankAccount.customer_id == customer_id).limit(1)
        return self.session.exec(stmt).first() is not None

    def exists_by_account_number(self, account_number: str) -> bool:
        stmt = (
            select(BankAccount.id)
            .where(BankAccount.account_number == account_number)
            .limit(1)
        )
        return self.session.exec(stmt).first() is not None
