"""
Demo scenarios.

Two ready-made orders showing the same OrderProcessor driving different
payment, delivery, discount and notification variants:

  - laptop:  Laptop $1000 x1 + Mouse $50 x2, PayPal, courier, 10 % off, e-mail
             (subtotal 1100, total 990)
  - tickets: Concert Ticket $200 x2, credit card, pickup point, $50 off, SMS
             (subtotal 400, total 350)

Variants are built through ServiceFactory so they share its collaborators.
"""

from dataclasses import dataclass

from online_store.domain.discounts import DiscountCalculator, FixedAmountDiscount, PercentageDiscount
from online_store.domain.models import Product, ProcessingResult
from online_store.domain.order import Order
from online_store.processor import OrderProcessor
from online_store.services.factory import ServiceFactory


@dataclass
class Scenario:
    """Everything needed for one `processor.process(order, calculator)` call."""

    title: str
    order: Order
    calculator: DiscountCalculator
    processor: OrderProcessor

    def run(self) -> ProcessingResult:
        return self.processor.process(self.order, self.calculator)


def laptop_scenario() -> Scenario:
    order = Order(order_id="laptop-demo")
    order.add_item(Product(name="Laptop", price=1000), 1)
    order.add_item(Product(name="Mouse", price=50), 2)
    order.payment_method = ServiceFactory.create_payment_method("paypal")
    order.delivery_method = ServiceFactory.create_delivery_method("courier")

    return Scenario(
        title="Online Store Order System (SOLID Demo)",
        order=order,
        calculator=DiscountCalculator(PercentageDiscount(0.1)),
        processor=OrderProcessor(ServiceFactory.create_notification("email")),
    )


def ticket_scenario() -> Scenario:
    order = Order(order_id="ticket-demo")
    order.add_item(Product(name="Concert Ticket", price=200), 2)
    order.payment_method = ServiceFactory.create_payment_method("credit-card")
    order.delivery_method = ServiceFactory.create_delivery_method("pickup-point")

    return Scenario(
        title="Another Example: SRP Ticket Purchase",
        order=order,
        calculator=DiscountCalculator(FixedAmountDiscount(50)),
        processor=OrderProcessor(ServiceFactory.create_notification("sms")),
    )


SCENARIOS = {
    "laptop": laptop_scenario,
    "tickets": ticket_scenario,
}
