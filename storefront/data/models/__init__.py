#import every model so SQLAlchemy registers it in Base.metadata

from storefront.data.models.customer import CustomerModel
from storefront.data.models.product import ProductModel
from storefront.data.models.price_record import PriceRecordModel
from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.order import OrderModel, new_order_reference
from storefront.data.models.order_item import OrderItemModel

# registers the before_flush hook
import storefront.data.events  # noqa: F401,E402

__all__ = [
    "CustomerModel",
    "ProductModel",
    "PriceRecordModel",
    "CartModel",
    "CartItemModel",
    "OrderModel",
    "OrderItemModel",
    "new_order_reference",
]
