"""
OrderProcessor: orchestrates payment, delivery and notification.

The processor depends only on abstractions: the order's PaymentMethod and
DeliveryMethod, a Notification bound at construction, and a
DiscountCalculator passed per call. Swapping any variant changes what a step
does, never the sequence:

    1. Check configuration  (fail fast, before any side effect)
    2. Compute subtotal → total via the discount calculator
    3. Payment              → order.payment_method.process_payment(total)
    4. Delivery             → order.delivery_method.deliver_order(order)
    5. Notification         → notification.send_notification(message)

A failing step aborts the remaining ones: if payment fails, nothing is
delivered and no one is notified.
"""

import logging
from typing import Callable

from online_store.domain.discounts import DiscountCalculator, NoDiscount
from online_store.domain.models import ProcessingResult, ProcessingStep, format_amount
from online_store.domain.order import Order
from online_store.domain.ports import Notification
from online_store.errors import (
    CollaboratorError,
    ConfigurationError,
    DeliveryError,
    NotificationError,
    PaymentError,
)

logger = logging.getLogger(__name__)

STEP_ERRORS: dict[ProcessingStep, type[CollaboratorError]] = {
    ProcessingStep.PAYMENT: PaymentError,
    ProcessingStep.DELIVERY: DeliveryError,
    ProcessingStep.NOTIFICATION: NotificationError,
}

CONFIRMATION_TEMPLATE = "Your order has been processed. Total = {total}"


class OrderProcessor:
    """Runs an order through payment, delivery and notification, in that order."""

    def __init__(self, notification: Notification) -> None:
        self._notification = notification

    # ── Helpers ──────────────────────────────────────────────────

    def _run_step(self, step: ProcessingStep, order: Order, action: Callable[[], None]) -> None:
        """Run one side-effecting step, translating failures to the step's error kind."""
        error_cls = STEP_ERRORS[step]
        try:
            action()
        except error_cls as exc:
            if exc.order_id is None:
                exc.order_id = order.order_id
            logger.error("Order %s: %s step failed: %s", order.order_id, step.value, exc)
            raise
        except Exception as exc:
            logger.exception("Order %s: %s step failed", order.order_id, step.value)
            raise error_cls(f"{step.value} step failed for order {order.order_id}: {exc}", order_id=order.order_id) from exc

    # ── Process ──────────────────────────────────────────────────

    def process(self, order: Order, discount_calculator: DiscountCalculator | None = None) -> ProcessingResult:
        """Charge, deliver and notify for ``order``.

        Raises:
            ConfigurationError: payment or delivery method unset; nothing ran.
            PaymentError / DeliveryError / NotificationError: that step failed
                and the steps after it were skipped.
        """
        missing = order.missing_configuration()
        if missing:
            logger.error("Order %s cannot be processed, missing: %s", order.order_id, ", ".join(missing))
            raise ConfigurationError(order.order_id, missing)

        if discount_calculator is None:
            discount_calculator = DiscountCalculator(NoDiscount())

        subtotal = order.subtotal()
        total = discount_calculator.calculate(subtotal)
        logger.info(
            "Processing order %s: %d items, subtotal %s, total %s",
            order.order_id,
            len(order.items),
            subtotal,
            total,
        )

        message = CONFIRMATION_TEMPLATE.format(total=format_amount(total))
        steps: list[tuple[ProcessingStep, Callable[[], None]]] = [
            (ProcessingStep.PAYMENT, lambda: order.payment_method.process_payment(total)),
            (ProcessingStep.DELIVERY, lambda: order.delivery_method.deliver_order(order)),
            (ProcessingStep.NOTIFICATION, lambda: self._notification.send_notification(message)),
        ]
        completed: list[ProcessingStep] = []
        for step, action in steps:
            self._run_step(step, order, action)
            completed.append(step)

        logger.info("Order %s processed successfully", order.order_id)
        return ProcessingResult(
            order_id=order.order_id,
            subtotal=subtotal,
            total=total,
            completed_steps=completed,
            message=message,
        )
