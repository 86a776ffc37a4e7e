"""
Behaviour and collaborator interfaces (Protocols).

Two layers of interfaces live here:

  - **Behaviour slots** the OrderProcessor composes: PaymentMethod,
    DeliveryMethod, Notification. The processor only ever talks to these.
  - **External collaborators** the behaviour variants delegate to:
    PaymentGateway, LogisticsClient, MessagingClient. These are the seams
    where a real payment provider, courier API or SMS/e-mail service would
    attach. The console implementations in services/console.py stand in
    for them.

All are structural (typing.Protocol): any object with the right method
satisfies them, no inheritance needed.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from online_store.domain.order import Order


# ── Behaviour slots ──────────────────────────────────────────────────


class PaymentMethod(Protocol):
    """Charges the discounted order total."""

    def process_payment(self, amount: float) -> None: ...


class DeliveryMethod(Protocol):
    """Arranges delivery; receives the whole order, not just its total."""

    def deliver_order(self, order: "Order") -> None: ...


class Notification(Protocol):
    """Sends a message to the customer. Fire-and-forget."""

    def send_notification(self, message: str) -> None: ...


# ── External collaborators ───────────────────────────────────────────


class PaymentGateway(Protocol):
    def charge(self, amount: float, channel: str) -> None: ...


class LogisticsClient(Protocol):
    def dispatch(self, order: "Order", instructions: str) -> None: ...


class MessagingClient(Protocol):
    def send(self, channel: str, message: str) -> None: ...
