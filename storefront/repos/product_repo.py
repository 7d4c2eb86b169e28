# storefront/repos/product_repo.py
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.domain.exceptions import ProductInUseError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product: ProductModel) -> None:
        """
        Deletes the product and its price history.
        Cart and order items keep a RESTRICT foreign key, so a product that is
        still referenced stays where it is.
        """
        product_id = product.id
        self.db.delete(product)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Product {product_id} is still referenced, delete refused")
            raise ProductInUseError(
                f"Product {product_id} is referenced by cart or order items"
            ) from e
        logger.info(f"Product {product_id} deleted with its price history")
