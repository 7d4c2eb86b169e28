# storefront/repos/customer_repo.py
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.customer import CustomerModel
from storefront.domain.exceptions import ConstraintViolationError, DuplicateEmailError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CustomerRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_customer(self, customer_id: int) -> CustomerModel | None:
        return self.db.get(CustomerModel, customer_id)

    def email_taken(self, email: str) -> bool:
        return self.db.execute(
            select(CustomerModel.id).where(CustomerModel.email == email)
        ).first() is not None

    def create_customer(self, customer: CustomerModel) -> CustomerModel:
        email = customer.email
        self.db.add(customer)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # the unique index decides, this lookup only names the failure
            if self.email_taken(email):
                logger.warning(f"Customer email {email} already registered")
                raise DuplicateEmailError(f"Customer with email {email} already exists") from e
            raise ConstraintViolationError(str(e.orig)) from e
        self.db.refresh(customer)
        return customer

    def delete_customer(self, customer: CustomerModel) -> None:
        self.db.delete(customer)
        self.db.commit()
