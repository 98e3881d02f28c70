from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import Numeric, String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from ..core.money import MAX_INTEGER_DIGITS, to_money


class ExactDecimal(TypeDecorator):
    """NUMERIC(19, 2) that never passes through ``float``.

    SQLite has no decimal storage and SQLAlchemy's ``Numeric`` would bind a
    float there, so on SQLite the value is kept as its decimal string.
    """

    impl = Numeric(MAX_INTEGER_DIGITS + 2, 2, asdecimal=True)
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> Any:
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(MAX_INTEGER_DIGITS + 4))
        return dialect.type_descriptor(self.impl)

    def process_bind_param(self, value: Optional[Decimal], dialect: Dialect) -> Any:
        if value is None:
            return None
        amount = to_money(value)
        if dialect.name == "sqlite":
            return str(amount)
        return amount

    def process_result_value(self, value: Any, dialect: Dialect) -> Optional[Decimal]:
        if value is None:
            return None
        return to_money(value if isinstance(value, Decimal) else str(value))
