from decimal import Decimal
import uuid

from sqlalchemy import Column, Integer, ForeignKey, String
from sqlalchemy.orm import relationship, validates

from storefront.data.database import Base
from storefront.data.columns import (
    id_column,
    created_at_column,
    updated_at_column,
    money_column,
    to_money,
    require_text,
    ZERO,
)


def new_order_reference() -> str:
    return f"ORD-{uuid.uuid4().hex[:12].upper()}"


class OrderModel(Base):
    __tablename__ = "orders"

    id = id_column()
    created_at = created_at_column()
    updated_at = updated_at_column()

    customer_id = Column(Integer, ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True)
    order_reference = Column(String(40), nullable=False, unique=True)
    total_price = money_column(default=ZERO)

    customer = relationship("CustomerModel", back_populates="orders")
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.id",
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("order_reference", new_order_reference())
        kwargs.setdefault("total_price", ZERO)
        super().__init__(**kwargs)

    @validates("order_reference")
    def _validate_reference(self, key, value):
        return require_text(key, value)

    @validates("total_price")
    def _validate_total(self, key, value):
        return to_money(value)

    def calculate_order_total(self) -> Decimal:
        # only the frozen purchase prices count, never the live catalogue price
        self.total_price = sum((i.unit_price_at_purchase * i.quantity for i in self.items), ZERO)
        return self.total_price
