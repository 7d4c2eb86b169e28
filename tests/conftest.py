"""Shared fixtures: a fresh in-memory SQLite database per test."""

import os

# keep the module-level engine away from any real database
os.environ["DATABASE_URL"] = "sqlite://"

from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.data.database import init_db
from storefront.data.models import ProductModel, PriceRecordModel


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def make_product(db):
    """Persist a product together with its opening price record."""

    def _make(name: str = "Widget", price: str = "10.00", stock: int = 5) -> ProductModel:
        product = ProductModel(name=name, current_price=Decimal(price), stock_quantity=stock)
        product.price_records.append(PriceRecordModel(price=Decimal(price)))
        db.add(product)
        db.commit()
        return product

    return _make
