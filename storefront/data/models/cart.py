# storefront/data/models/cart.py
from decimal import Decimal

from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship, validates

from storefront.data.database import Base
from storefront.data.columns import (
    id_column,
    created_at_column,
    updated_at_column,
    money_column,
    to_money,
    ZERO,
)


class CartModel(Base):
    __tablename__ = "carts"

    id = id_column()
    created_at = created_at_column()
    updated_at = updated_at_column()

    customer_id = Column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    total_amount = money_column(default=ZERO)

    customer = relationship("CustomerModel", back_populates="cart")
    items = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
        order_by="CartItemModel.id",
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("total_amount", ZERO)
        super().__init__(**kwargs)

    @validates("total_amount")
    def _validate_total(self, key, value):
        return to_money(value)

    def recalculate_total(self) -> Decimal:
        """
        Sums unit_price * quantity over the current items and stores it in
        total_amount. Nothing calls this automatically: whoever adds, removes
        or re-quantifies an item has to call it afterwards.
        """
        self.total_amount = sum((i.unit_price * i.quantity for i in self.items), ZERO)
        return self.total_amount
