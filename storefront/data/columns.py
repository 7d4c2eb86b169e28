"""Column factories and value coercion shared by every model.

Each model declares its own identity and timestamp columns through these
factories instead of inheriting them, so a Column object is never shared
between two tables.
"""
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from sqlalchemy import Column, Integer, DateTime, Numeric

from storefront.domain.exceptions import ValidationError

MONEY = Numeric(12, 2)
ZERO = Decimal("0.00")
CENT = Decimal("0.01")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def id_column() -> Column:
    return Column(Integer, primary_key=True)


def created_at_column() -> Column:
    return Column(DateTime(timezone=True), nullable=False, default=lambda: utcnow())


def updated_at_column() -> Column:
    # refreshed by the before_flush hook in storefront.data.events
    return Column(DateTime(timezone=True), nullable=False, default=lambda: utcnow())


def money_column(**kwargs) -> Column:
    return Column(MONEY, nullable=False, **kwargs)


def to_money(value) -> Decimal:
    """Coerce int/float/str/Decimal into a finite Decimal rounded to cents."""
    if value is None:
        raise ValidationError("Amount is required")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise ValidationError(f"Not a valid amount: {value!r}") from e
    if not amount.is_finite():
        raise ValidationError(f"Amount must be finite, got {value!r}")
    # same scale as the column, so stored totals still match their items
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def require_text(key: str, value):
    if value is None or not str(value).strip():
        raise ValidationError(f"{key} must not be blank")
    return value
