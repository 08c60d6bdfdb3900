"""Contains unit tests for Slack notification payloads and the webhook notifier."""

import json

import httpx
import pytest

from release_signoff.github.exceptions import UpstreamCallError
from release_signoff.notifications.models import (
    NotificationPayload,
    build_approved_notification,
    build_cancelled_notification,
)
from release_signoff.notifications.slack import SlackWebhookNotifier

WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


def test_approved_notification_blocks() -> None:
    """Test that the approved notification renders a header, a section and a button."""
    payload = build_approved_notification("v20240115.1", "release/v20240115.1", "https://github.com/owner/repo/releases/tag/v20240115.1")
    blocks = payload.to_slack_blocks()["blocks"]

    assert blocks[0] == {"type": "header", "text": {"type": "plain_text", "text": "[v20240115.1] Release/Hotfix approved ✅"}}
    assert blocks[1]["type"] == "section"
    assert blocks[1]["text"]["type"] == "mrkdwn"
    assert "release/v20240115.1" in blocks[1]["text"]["text"]
    assert blocks[1]["accessory"] == {
        "type": "button",
        "text": {"type": "plain_text", "text": "Go"},
        "url": "https://github.com/owner/repo/releases/tag/v20240115.1",
        "action_id": "button-action",
    }


def test_cancelled_notification_blocks() -> None:
    """Test that the cancelled notification has no button."""
    payload = build_cancelled_notification("v20240115.1", "release/v20240115.1")
    message = payload.to_slack_blocks()

    assert message["text"] == "[v20240115.1] Release/Hotfix cancelled ❌"
    assert message["blocks"][0]["text"]["text"] == "[v20240115.1] Release/Hotfix cancelled ❌"
    assert "accessory" not in message["blocks"][1]
    assert "deleted" not in payload.body


def test_cancelled_notification_mentions_deleted_branch() -> None:
    """Test that the cancelled notification says when the branch was deleted."""
    payload = build_cancelled_notification("v20240115.1", "release/v20240115.1", branch_deleted=True)
    assert "deleted" in payload.body


@pytest.mark.asyncio
async def test_send_posts_blocks_to_webhook() -> None:
    """Test that send posts the rendered blocks as JSON."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, text="ok")

    notifier = SlackWebhookNotifier(WEBHOOK_URL, transport=httpx.MockTransport(handler))
    payload = NotificationPayload(header="[v20240115.1] Release/Hotfix cancelled ❌", body="cancelled")
    await notifier.send(payload)

    assert len(requests) == 1
    assert str(requests[0].url) == WEBHOOK_URL
    assert requests[0].method == "POST"
    assert json.loads(requests[0].content) == payload.to_slack_blocks()


@pytest.mark.asyncio
async def test_send_raises_on_rejected_payload() -> None:
    """Test that a non-2xx webhook response raises UpstreamCallError."""
    notifier = SlackWebhookNotifier(WEBHOOK_URL, transport=httpx.MockTransport(lambda request: httpx.Response(400, text="invalid_blocks")))
    with pytest.raises(UpstreamCallError) as exc_info:
        await notifier.send(NotificationPayload(header="h", body="b"))
    assert exc_info.value.status_code == 400
    assert "invalid_blocks" in str(exc_info.value)


@pytest.mark.asyncio
async def test_send_raises_on_transport_error() -> None:
    """Test that a connection failure raises UpstreamCallError."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    notifier = SlackWebhookNotifier(WEBHOOK_URL, transport=httpx.MockTransport(handler))
    with pytest.raises(UpstreamCallError, match="connection refused"):
        await notifier.send(NotificationPayload(header="h", body="b"))
