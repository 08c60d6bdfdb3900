"""Posts notifications to a Slack incoming webhook."""

import httpx
import structlog

from release_signoff.github.exceptions import UpstreamCallError
from release_signoff.utils.constants import DEFAULT_WEBHOOK_TIMEOUT

from .models import NotificationPayload

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class SlackWebhookNotifier:
    """Sends notification payloads to a Slack incoming webhook."""

    def __init__(self, webhook_url: str, timeout: float = DEFAULT_WEBHOOK_TIMEOUT, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Initialize the notifier with the webhook URL, a request timeout and an optional HTTP transport."""
        self.webhook_url = webhook_url
        self.timeout = timeout
        self.transport = transport

    async def send(self, payload: NotificationPayload) -> None:
        """Posts the payload to the webhook.

        Raises:
            UpstreamCallError: If the request cannot be sent or Slack rejects it.
        """
        logger.info("Posting notification", header=payload.header)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.webhook_url, json=payload.to_slack_blocks())
        except httpx.HTTPError as exc:
            logger.error("Notification could not be sent", error=str(exc), error_type=type(exc).__name__)
            raise UpstreamCallError("post_notification", str(exc)) from exc

        if response.is_error:
            logger.error("Notification rejected by webhook", status_code=response.status_code, response=response.text)
            raise UpstreamCallError("post_notification", response.text or response.reason_phrase, status_code=response.status_code)
        logger.debug("Notification posted", status_code=response.status_code)
