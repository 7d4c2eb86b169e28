# storefront/data/seed.py
from sqlalchemy.orm import sessionmaker

from storefront.data.database import SessionLocal, init_db
from storefront.data.models import ProductModel, PriceRecordModel
from storefront.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

DEMO_CATALOGUE = [
    {"name": "Keyboard", "description": "Mechanical keyboard", "price": "199.99", "stock": 25},
    {"name": "Mouse", "description": "Wireless mouse", "price": "49.50", "stock": 100},
    {"name": "Monitor", "description": "27 inch IPS monitor", "price": "899.00", "stock": 10},
]


def seed(session_factory: sessionmaker = SessionLocal) -> int:
    db = session_factory()
    try:
        # not forcing: only seed if empty
        if db.query(ProductModel).first():
            return 0

        for entry in DEMO_CATALOGUE:
            product = ProductModel(
                name=entry["name"],
                description=entry["description"],
                current_price=entry["price"],
                stock_quantity=entry["stock"],
            )
            # first ledger entry mirrors the starting price
            product.price_records.append(PriceRecordModel(price=entry["price"]))
            db.add(product)
        db.commit()

        logger.info(f"Seeded {len(DEMO_CATALOGUE)} products")
        return len(DEMO_CATALOGUE)
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging()
    init_db()
    seed()
