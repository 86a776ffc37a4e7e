"""
Order, the mutable aggregate.

An order owns an append-only list of OrderItems and two behaviour slots
(payment method, delivery method) that callers assign before processing.
The subtotal is derived from the items on every call and never cached.
"""

import logging
import uuid

from pydantic import ValidationError

from online_store.domain.models import OrderItem, Product
from online_store.domain.ports import DeliveryMethod, PaymentMethod
from online_store.errors import InvalidInputError

logger = logging.getLogger(__name__)


class Order:
    """Line items plus the payment and delivery behaviour chosen for them."""

    def __init__(
        self,
        payment_method: PaymentMethod | None = None,
        delivery_method: DeliveryMethod | None = None,
        order_id: str | None = None,
    ) -> None:
        self.order_id = order_id or uuid.uuid4().hex[:8]
        self.payment_method = payment_method
        self.delivery_method = delivery_method
        self._items: list[OrderItem] = []

    def __repr__(self) -> str:
        return f"Order(order_id={self.order_id!r}, items={len(self._items)})"

    @property
    def items(self) -> tuple[OrderItem, ...]:
        return tuple(self._items)

    def add_item(self, product: Product, quantity: int) -> OrderItem:
        """Append ``quantity`` units of ``product`` and return the new item.

        Raises InvalidInputError for a non-positive quantity or an invalid
        product; the order is left unchanged in that case.
        """
        if not isinstance(product, Product):
            raise InvalidInputError(f"Expected a Product, got {type(product).__name__}")
        if product.price < 0:
            # model_construct() skips validation, so re-check here
            raise InvalidInputError(f"Product {product.name!r} has a negative price: {product.price}")
        try:
            item = OrderItem(product=product, quantity=quantity)
        except ValidationError as exc:
            raise InvalidInputError(f"Invalid item for order {self.order_id}: {exc}") from exc
        self._items.append(item)
        logger.debug("Order %s: added %d x %s", self.order_id, item.quantity, item.product.name)
        return item

    def subtotal(self) -> float:
        return sum((item.line_total for item in self._items), 0.0)

    def missing_configuration(self) -> list[str]:
        """Names of the behaviour slots still unset, in processing order."""
        missing = []
        if self.payment_method is None:
            missing.append("payment_method")
        if self.delivery_method is None:
            missing.append("delivery_method")
        return missing
