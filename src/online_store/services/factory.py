"""
Factory for collaborators and behaviour variants.

The **Factory pattern** centralises construction. The console driver asks
`ServiceFactory` for a payment method, delivery method, notification or
discount by name instead of importing concrete classes itself.

  - Collaborators (gateway, logistics client, messaging client) are created
    lazily and cached at class level, so every variant built here shares the
    same instances.
  - Tests swap implementations by assigning the class-level cache, or call
    `reset()` to start from scratch.
"""

from online_store.domain.discounts import (
    DiscountStrategy,
    FixedAmountDiscount,
    NoDiscount,
    PercentageDiscount,
)
from online_store.domain.ports import (
    DeliveryMethod,
    LogisticsClient,
    MessagingClient,
    Notification,
    PaymentGateway,
    PaymentMethod,
)
from online_store.errors import InvalidInputError
from online_store.services.console import (
    ConsoleLogisticsClient,
    ConsoleMessagingClient,
    ConsolePaymentGateway,
)
from online_store.services.delivery import CourierDelivery, PickUpPointDelivery, PostDelivery
from online_store.services.notify import EmailNotification, SmsNotification
from online_store.services.payment import BankTransferPayment, CreditCardPayment, PayPalPayment

PAYMENT_METHODS = {
    "credit-card": CreditCardPayment,
    "paypal": PayPalPayment,
    "bank-transfer": BankTransferPayment,
}
DELIVERY_METHODS = {
    "courier": CourierDelivery,
    "post": PostDelivery,
    "pickup-point": PickUpPointDelivery,
}
NOTIFICATIONS = {
    "email": EmailNotification,
    "sms": SmsNotification,
}
DISCOUNT_KINDS = ("none", "percent", "fixed")


def _lookup(registry: dict, kind: str, name: str):
    try:
        return registry[name]
    except KeyError:
        choices = ", ".join(sorted(registry))
        raise InvalidInputError(f"Unknown {kind} {name!r} (choose from: {choices})") from None


class ServiceFactory:
    """Lazily creates and caches collaborators (class-level singletons)."""

    _gateway: PaymentGateway | None = None
    _logistics: LogisticsClient | None = None
    _messaging: MessagingClient | None = None

    @classmethod
    def reset(cls) -> None:
        cls._gateway = None
        cls._logistics = None
        cls._messaging = None

    @classmethod
    def get_payment_gateway(cls) -> PaymentGateway:
        if cls._gateway is None:
            cls._gateway = ConsolePaymentGateway()
        return cls._gateway

    @classmethod
    def get_logistics_client(cls) -> LogisticsClient:
        if cls._logistics is None:
            cls._logistics = ConsoleLogisticsClient()
        return cls._logistics

    @classmethod
    def get_messaging_client(cls) -> MessagingClient:
        if cls._messaging is None:
            cls._messaging = ConsoleMessagingClient()
        return cls._messaging

    # ── Variants by name ─────────────────────────────────────────

    @classmethod
    def create_payment_method(cls, name: str) -> PaymentMethod:
        return _lookup(PAYMENT_METHODS, "payment method", name)(cls.get_payment_gateway())

    @classmethod
    def create_delivery_method(cls, name: str) -> DeliveryMethod:
        return _lookup(DELIVERY_METHODS, "delivery method", name)(cls.get_logistics_client())

    @classmethod
    def create_notification(cls, name: str) -> Notification:
        return _lookup(NOTIFICATIONS, "notification", name)(cls.get_messaging_client())

    @staticmethod
    def create_discount_strategy(text: str) -> DiscountStrategy:
        """Parse ``none``, ``percent:<fraction>`` or ``fixed:<amount>``.

        Examples: ``percent:0.1`` (10 % off), ``fixed:50`` ($50 off).
        """
        kind, _, value = text.strip().partition(":")
        kind = kind.lower()
        if kind not in DISCOUNT_KINDS:
            raise InvalidInputError(f"Unknown discount {text!r} (choose from: none, percent:<p>, fixed:<a>)")
        if kind == "none":
            if value:
                raise InvalidInputError(f"Discount 'none' takes no value, got {text!r}")
            return NoDiscount()
        try:
            number = float(value)
        except ValueError:
            raise InvalidInputError(f"Discount {kind!r} needs a numeric value, got {value!r}") from None
        if kind == "percent":
            return PercentageDiscount(number)
        return FixedAmountDiscount(number)
