# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime


class CustomerCreate(BaseModel):
    """Input for registering a customer."""

    model_config = ConfigDict(str_strip_whitespace=True)

    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    full_name: str = Field(..., min_length=1, max_length=200)


class CartItemRead(BaseModel):
    id: int
    product_id: int
    quantity: int
    unit_price: Decimal

    model_config = ConfigDict(from_attributes=True)


class CartRead(BaseModel):
    id: int
    total_amount: Decimal
    items: List[CartItemRead]

    model_config = ConfigDict(from_attributes=True)


class OrderItemRead(BaseModel):
    id: int
    product_id: int
    quantity: int
    unit_price_at_purchase: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrderRead(BaseModel):
    id: int
    order_reference: str
    total_price: Decimal
    items: List[OrderItemRead]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CustomerRead(BaseModel):
    """Customer with its cart and order history."""

    id: int
    email: str
    full_name: str
    cart: CartRead | None = None
    orders: List[OrderRead]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
