"""Builds the issue snapshot a sign-off works on."""

import structlog

from release_signoff.github.abc import GitHubClientBase
from release_signoff.github.event import IssueEvent
from release_signoff.utils.github import label_names

from .models import IssueSnapshot

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def fetch_issue(github_adapter: GitHubClientBase, issue_number: int) -> IssueSnapshot:
    """Fetches an issue from GitHub and returns its snapshot."""
    issue = await github_adapter.get_issue(issue_number)
    snapshot = IssueSnapshot(
        number=issue.number,
        body=issue.body or "",
        labels=label_names(issue.labels),
        title=issue.title,
        html_url=issue.html_url,
    )
    logger.info("Fetched issue", issue_number=snapshot.number, labels=sorted(snapshot.labels))
    return snapshot


def issue_from_event(event: IssueEvent) -> IssueSnapshot:
    """Returns the snapshot of the issue carried by an event payload."""
    return IssueSnapshot(
        number=event.issue.number,
        body=event.issue.body or "",
        labels=label_names(event.issue.labels),
        title=event.issue.title,
        html_url=event.issue.html_url,
    )
