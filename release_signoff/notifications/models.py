"""Notification payloads sent to the messaging webhook."""

from typing import Any

from pydantic import BaseModel

from release_signoff.utils.constants import APPROVED_HEADER_TEMPLATE, CANCELLED_HEADER_TEMPLATE


class NotificationButton(BaseModel):
    """Button rendered next to the notification body."""

    text: str
    url: str
    action_id: str = "button-action"


class NotificationPayload(BaseModel):
    """Structured message with a header, a body and an optional button."""

    header: str
    body: str
    button: NotificationButton | None = None

    def to_slack_blocks(self) -> dict[str, Any]:
        """Renders the payload as a Slack Block Kit message."""
        section: dict[str, Any] = {
            "type": "section",
            "text": {"type": "mrkdwn", "text": self.body},
        }
        if self.button is not None:
            section["accessory"] = {
                "type": "button",
                "text": {"type": "plain_text", "text": self.button.text},
                "url": self.button.url,
                "action_id": self.button.action_id,
            }
        return {
            "text": self.header,
            "blocks": [
                {"type": "header", "text": {"type": "plain_text", "text": self.header}},
                section,
            ],
        }


def build_approved_notification(tag: str, branch: str, release_url: str) -> NotificationPayload:
    """Builds the notification sent when a release is published."""
    return NotificationPayload(
        header=APPROVED_HEADER_TEMPLATE.format(tag=tag),
        body=f"The Release Candidate from `{branch}` is approved and published.",
        button=NotificationButton(text="Go", url=release_url),
    )


def build_cancelled_notification(tag: str, branch: str, branch_deleted: bool = False) -> NotificationPayload:
    """Builds the notification sent when a release is cancelled."""
    body = f"The Release Candidate from `{branch}` was cancelled."
    if branch_deleted:
        body += " The branch has been deleted."
    return NotificationPayload(header=CANCELLED_HEADER_TEMPLATE.format(tag=tag), body=body)
