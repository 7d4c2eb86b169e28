# storefront/services/customer_service.py
from pydantic import ValidationError as SchemaError
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.customer import CustomerModel
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.schemas import CustomerCreate, CustomerRead
from storefront.repos.customer_repo import CustomerRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CustomerService:
    """
    Customer use cases. A customer is always created with its own empty cart.
    """

    def __init__(self, db: Session):
        self.repo = CustomerRepo(db)

    def create_customer(self, email: str, full_name: str) -> CustomerModel:
        """
        Builds the customer, attaches an empty cart and saves both in one commit.
        Email uniqueness is left to the database: a clash surfaces as
        DuplicateEmailError when the commit fails.
        """
        try:
            payload = CustomerCreate(email=email, full_name=full_name)
        except SchemaError as e:
            raise ValidationError(f"Invalid customer data: {e}") from e

        customer = CustomerModel(email=payload.email, full_name=payload.full_name)
        cart = CartModel(customer=customer)
        customer.cart = cart

        created = self.repo.create_customer(customer)

        logger.info(f"Created customer {created.id} with cart {created.cart.id}")
        return created

    def get_customer(self, customer_id: int) -> CustomerRead:
        customer = self.repo.get_customer(customer_id)
        if not customer:
            raise EntityNotFoundError(f"Customer {customer_id} not found")
        return CustomerRead.model_validate(customer)

    def delete_customer(self, customer_id: int) -> None:
        """
        Removes the customer together with the cart, cart items, orders and
        order items it owns.
        """
        customer = self.repo.get_customer(customer_id)
        if not customer:
            raise EntityNotFoundError(f"Customer {customer_id} not found")
        self.repo.delete_customer(customer)
        logger.info(f"Deleted customer {customer_id}")
