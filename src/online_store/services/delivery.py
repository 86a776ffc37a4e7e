"""
Delivery methods.

Delivery receives the whole order, not just its total, so a variant may look
at the items (weight, count, ...) before choosing how to ship. The current
variants only hand their instructions to the LogisticsClient.
"""

import logging

from online_store.domain.order import Order
from online_store.domain.ports import LogisticsClient
from online_store.services.console import ConsoleLogisticsClient

logger = logging.getLogger(__name__)


class LogisticsDelivery:
    """Common behaviour of the delivery variants."""

    instructions: str = ""

    def __init__(self, client: LogisticsClient | None = None) -> None:
        self._client = client if client is not None else ConsoleLogisticsClient()

    def deliver_order(self, order: Order) -> None:
        logger.info("Dispatching order %s (%d items): %s", order.order_id, len(order.items), self.instructions)
        self._client.dispatch(order, self.instructions)


class CourierDelivery(LogisticsDelivery):
    instructions = "will be delivered by courier"


class PostDelivery(LogisticsDelivery):
    instructions = "will be delivered by postal service"


class PickUpPointDelivery(LogisticsDelivery):
    instructions = "can be picked up from collection point"
