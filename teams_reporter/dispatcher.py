"""Delivery of notification documents to a chat webhook."""

import json
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from teams_reporter.cards import build_envelope, render_card
from teams_reporter.config import ReporterConfig
from teams_reporter.models.notification import NotificationDocument
from teams_reporter.models.result import DeliveryResult

log = logging.getLogger(__name__)

# Body returned by Teams incoming webhooks on success
ACK_SENTINEL = "1"


@dataclass(frozen=True, kw_only=True)
class WebhookDispatcher:
    """Posts rendered Adaptive Cards to a webhook, once per document."""

    config: ReporterConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: ReporterConfig
    ) -> AsyncGenerator["WebhookDispatcher", None]:
        """Create dispatcher with managed session lifecycle."""
        async with aiohttp.ClientSession() as session:
            yield cls(config=config, session=session)

    def serialize(self, document: NotificationDocument) -> str:
        """Render ``document`` and wrap it in the message envelope."""
        return json.dumps(build_envelope(render_card(document)))

    async def send(
        self, document: NotificationDocument, webhook_url: str
    ) -> DeliveryResult:
        """POST the document and report how the webhook answered.

        Transport errors are logged and reported as ``send-failed``.
        """
        body = self.serialize(document)

        if self.config.debug:
            log.info("Sending the following message:")
            log.info("%s", body)

        try:
            async with self.session.post(
                webhook_url,
                data=body,
                headers={"Content-Type": "application/json"},
                proxy=self.config.proxy_url,
            ) as response:
                text = await response.text(errors="replace")
                status = response.status
        except (aiohttp.ClientError, TimeoutError) as exc:
            log.error("Failed to send message")
            log.error("%s", exc)
            return DeliveryResult(status="send-failed", body=str(exc))

        if not 200 <= status < 300:
            log.error("Failed to send message")
            log.error("%s", text)
            return DeliveryResult(status="send-failed", http_status=status, body=text)

        if not self.config.quiet:
            log.info("Message sent successfully")
            if text != ACK_SENTINEL:
                log.info("%s", text)

        return DeliveryResult(status="sent", http_status=status, body=text)
