from typing import Any

import pytest
from online_store.domain.models import Product
from online_store.domain.order import Order
from online_store.services.factory import ServiceFactory

# ----------------------------
# Recording collaborators
# ----------------------------


class CallLog(list):
    """Ordered record of (collaborator, payload) tuples shared by the fakes."""

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self]


class RecordingGateway:
    def __init__(self, log: CallLog, fail_with: Exception | None = None):
        self.log = log
        self.fail_with = fail_with

    def charge(self, amount: float, channel: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.log.append(("payment", (amount, channel)))


class RecordingLogistics:
    def __init__(self, log: CallLog, fail_with: Exception | None = None):
        self.log = log
        self.fail_with = fail_with

    def dispatch(self, order: Order, instructions: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.log.append(("delivery", (order, instructions)))


class RecordingMessaging:
    def __init__(self, log: CallLog, fail_with: Exception | None = None):
        self.log = log
        self.fail_with = fail_with

    def send(self, channel: str, message: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.log.append(("notification", (channel, message)))


class RecordingPaymentMethod:
    """Implements the PaymentMethod slot directly, without a gateway."""

    def __init__(self, log: CallLog):
        self.log = log

    def process_payment(self, amount: float) -> None:
        self.log.append(("payment", amount))


class RecordingDeliveryMethod:
    def __init__(self, log: CallLog):
        self.log = log

    def deliver_order(self, order: Any) -> None:
        self.log.append(("delivery", order))


class RecordingNotification:
    def __init__(self, log: CallLog):
        self.log = log

    def send_notification(self, message: str) -> None:
        self.log.append(("notification", message))


# ----------------------------
# Fixtures
# ----------------------------


@pytest.fixture(autouse=True)
def reset_service_factory():
    ServiceFactory.reset()
    yield
    ServiceFactory.reset()


@pytest.fixture
def call_log() -> CallLog:
    return CallLog()


@pytest.fixture
def laptop() -> Product:
    return Product(name="Laptop", price=1000)


@pytest.fixture
def mouse() -> Product:
    return Product(name="Mouse", price=50)


@pytest.fixture
def ticket() -> Product:
    return Product(name="Concert Ticket", price=200)
