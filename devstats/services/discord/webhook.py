"""Thin Discord webhook client.

Posts a Report through Discord's execute-webhook endpoint via httpx.
`wait=true` makes Discord answer with the created message (or an error body)
instead of an empty 204, so every delivery has a body to log.
"""

import logging
from dataclasses import dataclass

import httpx

from devstats.core.exceptions import DeliveryError
from devstats.services.discord.report import Report

logger = logging.getLogger(__name__)

WEBHOOK_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


@dataclass
class DeliveryResult:
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class DiscordWebhookNotifier:
    """Deliver reports to a Discord webhook."""

    def __init__(
        self,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self._transport = transport

    async def deliver(self, webhook_url: str, report: Report) -> DeliveryResult:
        """
        POST the report once and return Discord's raw answer.

        Non-2xx answers are logged with their body but not raised; only a
        request that could not be sent at all raises.

        Raises:
            DeliveryError: On connection errors, timeouts and invalid URLs
        """
        try:
            url = httpx.URL(webhook_url).copy_merge_params({"wait": "true"})
        except httpx.InvalidURL as e:
            raise DeliveryError(f"Invalid webhook URL: {e}") from e

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    url, json=report.to_payload(), headers=WEBHOOK_HEADERS,
                )
        except httpx.RequestError as e:
            logger.error(f"[discord] Request to {url.host} failed: {e}")
            raise DeliveryError(f"Webhook request failed: {e}", webhook_host=url.host) from e

        result = DeliveryResult(status_code=response.status_code, body=response.text)
        if result.ok:
            logger.info(f"[discord] response: {result.body}")
        else:
            logger.warning(f"[discord] HTTP {result.status_code} response: {result.body}")
        return result


discord_notifier = DiscordWebhookNotifier()


async def deliver(webhook_url: str, report: Report) -> DeliveryResult:
    """Deliver with the module-level notifier."""
    return await discord_notifier.deliver(webhook_url, report)
