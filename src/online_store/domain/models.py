"""
Domain models for the online-store order system.

Value objects use Pydantic v2 BaseModel for validation and serialization.
Product and OrderItem are frozen: once built they never change, so the same
Product can be shared by any number of items and orders.

The mutable aggregate (Order) lives in order.py; it holds behaviour objects
rather than plain data, so it is a regular class instead of a model.

Enums inherit from (str, Enum) so they serialize as plain strings in JSON
(e.g. "payment" instead of {"value": "payment"}).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ProcessingStep(str, Enum):
    """Side-effecting steps of OrderProcessor.process, in execution order."""

    PAYMENT = "payment"            # PaymentMethod.process_payment(total)
    DELIVERY = "delivery"          # DeliveryMethod.deliver_order(order)
    NOTIFICATION = "notification"  # Notification.send_notification(message)


# ── Catalog / line items ─────────────────────────────────────────────


class Product(BaseModel):
    """A catalog entry: a name and a unit price."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)  # Unit price, never negative


class OrderItem(BaseModel):
    """A Product paired with a quantity."""

    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int = Field(..., gt=0, strict=True)  # No coercion from bool, str or float

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity


# ── Processing output ────────────────────────────────────────────────


class ProcessingResult(BaseModel):
    """Snapshot returned by OrderProcessor.process once every step has run."""

    order_id: str
    subtotal: float
    total: float                          # Subtotal after discount, the amount charged
    completed_steps: list[ProcessingStep]
    message: str                          # Text sent through the notification


def format_amount(amount: float) -> str:
    """Render an amount the way the store narrates it.

    Whole amounts drop the fractional part (``990.0`` -> ``"990"``);
    anything else keeps Python's shortest round-trip repr (``12.5``).
    """
    if float(amount).is_integer():
        return str(int(amount))
    return repr(float(amount))
