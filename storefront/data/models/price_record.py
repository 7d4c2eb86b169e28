from sqlalchemy import Column, Integer, ForeignKey, DateTime
from sqlalchemy.orm import relationship, validates

from storefront.data.database import Base
from storefront.data.columns import (
    id_column,
    created_at_column,
    updated_at_column,
    money_column,
    to_money,
    utcnow,
)


class PriceRecordModel(Base):
    __tablename__ = "price_records"

    # append-only, see storefront.data.events
    _ledger_owner = "product"

    id = id_column()
    created_at = created_at_column()
    updated_at = updated_at_column()

    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    price = money_column()
    effective_date = Column(DateTime(timezone=True), nullable=False, default=lambda: utcnow())

    product = relationship("ProductModel", back_populates="price_records")

    @validates("price")
    def _validate_price(self, key, value):
        return to_money(value)
