# storefront/data/models/product.py
from sqlalchemy import Column, Integer, String, Text, CheckConstraint
from sqlalchemy.orm import relationship, validates

from storefront.data.database import Base
from storefront.data.columns import (
    id_column,
    created_at_column,
    updated_at_column,
    money_column,
    to_money,
    require_text,
)
from storefront.domain.exceptions import ValidationError


class ProductModel(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("stock_quantity >= 0", name="ck_products_stock_non_negative"),
    )

    id = id_column()
    created_at = created_at_column()
    updated_at = updated_at_column()

    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    current_price = money_column()
    stock_quantity = Column(Integer, nullable=False, default=0)

    # price history, append-only
    price_records = relationship(
        "PriceRecordModel",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="PriceRecordModel.effective_date",
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("stock_quantity", 0)
        super().__init__(**kwargs)

    @validates("name")
    def _validate_name(self, key, value):
        return require_text(key, value)

    @validates("current_price")
    def _validate_price(self, key, value):
        return to_money(value)

    @validates("stock_quantity")
    def _validate_stock(self, key, value):
        if value is None or value < 0:
            raise ValidationError(f"Stock quantity must be >= 0, got {value!r}")
        return value

    def is_in_stock(self, requested_quantity: int) -> bool:
        """
        Read-only check, callers validate that the quantity is positive.
        """
        return self.stock_quantity >= requested_quantity
