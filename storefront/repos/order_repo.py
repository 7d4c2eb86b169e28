# storefront/repos/order_repo.py
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.domain.exceptions import ConstraintViolationError, DuplicateOrderReferenceError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        reference = order.order_reference
        self.db.add(order)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if self.get_order_by_reference(reference) is not None:
                logger.warning(f"Order reference {reference} already used")
                raise DuplicateOrderReferenceError(
                    f"Order with reference {reference} already exists"
                ) from e
            raise ConstraintViolationError(str(e.orig)) from e
        self.db.refresh(order)
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)

    def get_order_by_reference(self, reference: str) -> OrderModel | None:
        return self.db.execute(
            select(OrderModel).where(OrderModel.order_reference == reference)
        ).scalar_one_or_none()
