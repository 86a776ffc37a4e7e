"""
Notification channels.

Sends the order confirmation through a MessagingClient. In production this
would integrate with SendGrid, Twilio, etc. Fire-and-forget: there is no
delivery receipt.
"""

import logging

from online_store.domain.ports import MessagingClient
from online_store.services.console import ConsoleMessagingClient

logger = logging.getLogger(__name__)


class MessagingNotification:
    channel: str = ""

    def __init__(self, client: MessagingClient | None = None) -> None:
        self._client = client if client is not None else ConsoleMessagingClient()

    def send_notification(self, message: str) -> None:
        logger.info("Sending %s notification", self.channel)
        self._client.send(self.channel, message)


class EmailNotification(MessagingNotification):
    channel = "Email"


class SmsNotification(MessagingNotification):
    channel = "SMS"
