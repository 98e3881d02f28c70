from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel

from ..core.db import create_engine_for_url, get_engine, get_session, set_engine
from ..core.dependencies import get_customer_validator
from ..main import app
from ..services import AccountService


class FakeCustomerValidator:
    """In-memory stand-in for the customer service."""

    def __init__(self, known_ids: set[int] | None = None) -> None:
        self.known_ids = set(known_ids or {1, 2, 3})
        self.calls: list[int] = []

    def exists(self, customer_id: int) -> bool:
        self.calls.append(customer_id)
        return customer_id in self.known_ids


@pytest.fixture
def engine(tmp_path) -> Generator[Engine, None, None]:
    test_db = tmp_path / "test.db"
    engine = create_engine_for_url(f"sqlite:///{test_db}")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def customers() -> FakeCustomerValidator:
    return FakeCustomerValidator()


@pytest.fixture
def service(session: Session, customers: FakeCustomerValidator) -> AccountService:
    return AccountService(session, customers)


@pytest.fixture
def client(engine: Engine, customers: FakeCustomerValidator) -> Generator[TestClient, None, None]:
    original_engine = get_engine()
    set_engine(engine)

    def _get_session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session_override
    app.dependency_overrides[get_customer_validator] = lambda: customers

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    set_engine(original_engine)
