"""
Error taxonomy for order processing.

Every error is local to the single call that raised it: nothing is retried,
queued or recovered across calls.

    OrderProcessingError
    ├── ConfigurationError     order is missing a payment or delivery method
    ├── InvalidInputError      bad quantity, product, discount or variant name
    └── CollaboratorError      a payment/delivery/notification collaborator failed
        ├── PaymentError
        ├── DeliveryError
        └── NotificationError

Collaborators (gateways, logistics and messaging clients) may raise the
matching CollaboratorError subclass themselves; anything else they raise is
wrapped by the OrderProcessor into the subclass for the step that failed.

Product construction is the one place outside this hierarchy: Product is a
pydantic model, so `Product(price=-1)` raises pydantic.ValidationError (a
ValueError, like InvalidInputError). Order.add_item translates validation
failures of the items it builds into InvalidInputError.
"""

from online_store.domain.models import ProcessingStep


class OrderProcessingError(Exception):
    """Base class for all errors raised by the order-processing core."""


class ConfigurationError(OrderProcessingError):
    """Raised when an order is processed before its behaviour slots are set.

    Raised before any side effect runs, so a failed call leaves no trace.
    """

    def __init__(self, order_id: str, missing: list[str]) -> None:
        self.order_id = order_id
        self.missing = list(missing)
        super().__init__(f"Order {order_id} is missing configuration: {', '.join(self.missing)}")


class InvalidInputError(OrderProcessingError, ValueError):
    """Raised for input that would otherwise silently corrupt an order or a total."""


class CollaboratorError(OrderProcessingError):
    """An external collaborator failed; the remaining steps were not run."""

    step: ProcessingStep | None = None

    def __init__(
        self,
        message: str = "",
        *,
        step: ProcessingStep | None = None,
        order_id: str | None = None,
    ) -> None:
        if step is not None:
            self.step = step
        self.order_id = order_id
        if not message:
            name = self.step.value if self.step else "collaborator"
            message = f"{name} step failed for order {order_id}"
        super().__init__(message)


class PaymentError(CollaboratorError):
    """The payment gateway refused or failed to charge the order total."""

    step = ProcessingStep.PAYMENT


class DeliveryError(CollaboratorError):
    """The logistics collaborator could not dispatch the order."""

    step = ProcessingStep.DELIVERY


class NotificationError(CollaboratorError):
    """The messaging collaborator could not send the confirmation."""

    step = ProcessingStep.NOTIFICATION
