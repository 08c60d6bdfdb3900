"""Orchestrates the sign-off of a release issue."""

import time

import structlog

from release_signoff.configuration.models import SignOffConfig, SignOffPolicy
from release_signoff.github.abc import GitHubClientBase
from release_signoff.github.adapter import GitHubKitAdapter
from release_signoff.github.event import load_issue_event
from release_signoff.notifications.slack import SlackWebhookNotifier

from .dispatcher import handle_release_approved, handle_release_cancelled
from .eligibility import is_approved, validate_candidate
from .extraction import extract_release_fields
from .issues import fetch_issue, issue_from_event
from .models import IssueSnapshot, SignOffResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def process_signoff(
    issue: IssueSnapshot,
    github_adapter: GitHubClientBase,
    notifier: SlackWebhookNotifier | None,
    repository: str,
    policy: SignOffPolicy,
    dry_run: bool = False,
) -> SignOffResult:
    """Signs off a release issue.

    The candidate label is checked before anything else, so an issue that
    is not a Release Candidate never reaches GitHub or the webhook.
    """
    validate_candidate(issue, policy.candidate_label)
    fields = extract_release_fields(issue.body)

    if is_approved(issue, policy.approval_label, exact=policy.exact_approval_label):
        logger.info("Release approved", issue_number=issue.number, tag=fields.tag, branch=fields.branch)
        return await handle_release_approved(issue, fields, github_adapter, notifier, repository, dry_run=dry_run)

    logger.info("Release cancelled", issue_number=issue.number, tag=fields.tag, branch=fields.branch)
    return await handle_release_cancelled(
        fields,
        github_adapter,
        notifier,
        delete_branch=policy.delete_branch_on_cancel,
        dry_run=dry_run,
    )


async def run_signoff_workflow(config: SignOffConfig) -> SignOffResult:
    """Run the sign-off workflow: load the issue, then publish or cancel its release.

    The issue comes from the event payload when one is configured; an
    explicit issue number takes precedence and is fetched from GitHub.
    """
    start_time = time.time()
    github_adapter = await GitHubKitAdapter.create(
        repo=config.repo,
        github_token=config.github_token,
        github_api_url=config.github_api_url,
    )

    if config.issue_number is not None:
        issue = await fetch_issue(github_adapter, config.issue_number)
    elif config.event_path is not None:
        issue = issue_from_event(load_issue_event(config.event_path))
    else:
        raise ValueError("Either an issue number or an event payload path is required.")

    notifier = SlackWebhookNotifier(config.slack_webhook_url, timeout=config.webhook_timeout) if config.slack_webhook_url else None
    result = await process_signoff(
        issue,
        github_adapter,
        notifier,
        repository=github_adapter.full_name,
        policy=config.policy,
        dry_run=config.dry_run,
    )
    logger.info(
        "Processed sign-off",
        issue_number=issue.number,
        decision=result.decision.value,
        tag=result.tag,
        release_url=result.release_url,
        duration=round(time.time() - start_time, 2),
    )
    return result
