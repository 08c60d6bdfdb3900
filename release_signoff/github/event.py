"""Loads the triggering issue from a GitHub Actions event payload."""

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ValidationError

from .exceptions import InvalidEventError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class EventIssue(BaseModel):
    """The issue object carried by an ``issues`` event."""

    number: int
    title: str | None = None
    body: str | None = None
    html_url: str | None = None
    labels: list[dict[str, Any]] = []


class EventRepository(BaseModel):
    """The repository object carried by an event."""

    full_name: str


class IssueEvent(BaseModel):
    """Subset of an ``issues`` webhook event used by the sign-off."""

    action: str | None = None
    issue: EventIssue
    repository: EventRepository | None = None


def load_issue_event(event_path: Path) -> IssueEvent:
    """Reads and validates the event payload written by the Actions runner.

    Raises:
        InvalidEventError: If the file cannot be read or carries no issue.
    """
    try:
        raw = json.loads(event_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidEventError(f"Unable to read event payload at {event_path}: {exc}") from exc

    try:
        event = IssueEvent.model_validate(raw)
    except ValidationError as exc:
        raise InvalidEventError(f"Event payload at {event_path} does not describe an issue: {exc}") from exc

    logger.debug("Loaded event payload", event_path=str(event_path), action=event.action, issue_number=event.issue.number)
    return event
