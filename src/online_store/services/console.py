"""
Console-backed collaborators.

Stand-ins for a real payment gateway, logistics API and messaging service:
each one narrates what it would have done as a single line on a text stream
(stdout unless another stream is given). They satisfy the collaborator
protocols in domain/ports.py, so a real integration can replace any of them
without touching the payment, delivery or notification variants.
"""

from typing import TextIO

from online_store.domain.models import format_amount
from online_store.domain.order import Order


class ConsolePaymentGateway:
    """Prints e.g. "Paid 990 via PayPal." instead of charging anyone."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream  # None -> sys.stdout at call time

    def charge(self, amount: float, channel: str) -> None:
        print(f"Paid {format_amount(amount)} {channel}.", file=self._stream)


class ConsoleLogisticsClient:
    """Prints the delivery instructions for an order."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def dispatch(self, order: Order, instructions: str) -> None:
        print(f"Order {instructions}.", file=self._stream)


class ConsoleMessagingClient:
    """Prints e.g. "SMS notification: <message>"."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def send(self, channel: str, message: str) -> None:
        print(f"{channel} notification: {message}", file=self._stream)
