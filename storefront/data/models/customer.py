# storefront/data/models/customer.py
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship, validates

from storefront.data.database import Base
from storefront.data.columns import id_column, created_at_column, updated_at_column, require_text


class CustomerModel(Base):
    __tablename__ = "customers"

    id = id_column()
    created_at = created_at_column()
    updated_at = updated_at_column()

    email = Column(String(255), nullable=False, unique=True)
    full_name = Column(String(200), nullable=False)

    cart = relationship(
        "CartModel",
        back_populates="customer",
        uselist=False,
        cascade="all, delete-orphan",
    )
    orders = relationship(
        "OrderModel",
        back_populates="customer",
        cascade="all, delete-orphan",
        order_by="OrderModel.id",
    )

    @validates("email", "full_name")
    def _validate_text(self, key, value):
        return require_text(key, value)
