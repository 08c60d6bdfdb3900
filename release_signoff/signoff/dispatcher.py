"""Publishes or cancels a release once QA has signed it off."""

import structlog

from release_signoff.github.abc import GitHubClientBase
from release_signoff.notifications.models import (
    NotificationPayload,
    build_approved_notification,
    build_cancelled_notification,
)
from release_signoff.notifications.slack import SlackWebhookNotifier
from release_signoff.utils.constants import SIGN_OFF_METADATA_ASSET_NAME, SIGN_OFF_METADATA_CONTENT_TYPE

from .models import IssueSnapshot, ReleaseFields, SignOffDecision, SignOffMetadata, SignOffResult

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

DRY_RUN_RELEASE_URL = "https://github.com/dry-run"


async def _notify(notifier: SlackWebhookNotifier | None, payload: NotificationPayload, dry_run: bool) -> None:
    if dry_run or notifier is None:
        logger.info("Dry run - skipping notification", header=payload.header, body=payload.body)
        return
    await notifier.send(payload)


async def handle_release_approved(
    issue: IssueSnapshot,
    fields: ReleaseFields,
    github_adapter: GitHubClientBase,
    notifier: SlackWebhookNotifier | None,
    repository: str,
    dry_run: bool = False,
) -> SignOffResult:
    """Publishes the release, attaches the sign-off metadata and announces it.

    The steps are not transactional: if the asset upload or the notification
    fails, the published release is left in place.
    """
    if dry_run:
        logger.info("Dry run - skipping release creation and metadata upload", tag=fields.tag, branch=fields.branch)
        await _notify(notifier, build_approved_notification(fields.tag, fields.branch, DRY_RUN_RELEASE_URL), dry_run=True)
        return SignOffResult(decision=SignOffDecision.APPROVED, tag=fields.tag, branch=fields.branch, dry_run=True)

    release = await github_adapter.create_release(
        tag_name=fields.tag,
        name=fields.tag,
        target_commitish=fields.branch,
        draft=False,
    )

    metadata = SignOffMetadata(
        repository=repository,
        issue_number=issue.number,
        issue_title=issue.title,
        issue_url=issue.html_url,
        labels=sorted(issue.labels),
        tag=fields.tag,
        branch=fields.branch,
    )
    await github_adapter.upload_release_asset(
        release,
        name=SIGN_OFF_METADATA_ASSET_NAME,
        content=metadata.model_dump_json(indent=2).encode("utf-8"),
        content_type=SIGN_OFF_METADATA_CONTENT_TYPE,
    )

    await _notify(notifier, build_approved_notification(fields.tag, fields.branch, release.html_url), dry_run=False)
    return SignOffResult(
        decision=SignOffDecision.APPROVED,
        tag=fields.tag,
        branch=fields.branch,
        release_url=release.html_url,
        release_id=release.id,
    )


async def handle_release_cancelled(
    fields: ReleaseFields,
    github_adapter: GitHubClientBase,
    notifier: SlackWebhookNotifier | None,
    delete_branch: bool = False,
    dry_run: bool = False,
) -> SignOffResult:
    """Announces the cancellation, deleting the release branch first when asked to."""
    branch_deleted = False
    if delete_branch:
        if dry_run:
            logger.info("Dry run - skipping branch deletion", branch=fields.branch)
        else:
            await github_adapter.delete_branch(fields.branch)
            branch_deleted = True

    await _notify(notifier, build_cancelled_notification(fields.tag, fields.branch, branch_deleted=branch_deleted), dry_run=dry_run)
    return SignOffResult(
        decision=SignOffDecision.CANCELLED,
        tag=fields.tag,
        branch=fields.branch,
        branch_deleted=branch_deleted,
        dry_run=dry_run,
    )
