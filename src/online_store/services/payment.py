"""
Payment methods.

Each variant satisfies the PaymentMethod protocol and forwards the total to a
PaymentGateway, adding only the wording for its channel. In a real system the
gateway would call Stripe, PayPal's API, a bank, etc.; here the default is
the console gateway.

Variants never swallow gateway failures: whatever the gateway raises
propagates to the OrderProcessor, which stops before delivery.
"""

import logging

from online_store.domain.ports import PaymentGateway
from online_store.services.console import ConsolePaymentGateway

logger = logging.getLogger(__name__)


class GatewayPayment:
    """Common behaviour of the payment variants; `channel` names the wording."""

    channel: str = ""

    def __init__(self, gateway: PaymentGateway | None = None) -> None:
        self._gateway = gateway if gateway is not None else ConsolePaymentGateway()

    def process_payment(self, amount: float) -> None:
        logger.info("Charging %s %s", amount, self.channel)
        self._gateway.charge(amount, self.channel)
        logger.info("Charge of %s %s accepted", amount, self.channel)


class CreditCardPayment(GatewayPayment):
    channel = "with Credit Card"


class PayPalPayment(GatewayPayment):
    channel = "via PayPal"


class BankTransferPayment(GatewayPayment):
    channel = "via Bank Transfer"
