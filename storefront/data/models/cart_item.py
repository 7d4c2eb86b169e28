from sqlalchemy import Column, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship, validates

from storefront.data.database import Base
from storefront.data.columns import (
    id_column,
    created_at_column,
    updated_at_column,
    money_column,
    to_money,
)
from storefront.domain.exceptions import ValidationError


class CartItemModel(Base):
    __tablename__ = "cart_items"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_cart_items_quantity_positive"),
    )

    id = id_column()
    created_at = created_at_column()
    updated_at = updated_at_column()

    cart_id = Column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="RESTRICT"), nullable=False, index=True)

    quantity = Column(Integer, nullable=False)
    # price at the time the item was added
    unit_price = money_column()

    cart = relationship("CartModel", back_populates="items")
    product = relationship("ProductModel")

    @validates("quantity")
    def _validate_quantity(self, key, value):
        if value is None or value <= 0:
            raise ValidationError(f"Quantity must be greater than 0, got {value!r}")
        return value

    @validates("unit_price")
    def _validate_price(self, key, value):
        return to_money(value)
