"""Models for configuration reconciled from CLI arguments, environment variables and action inputs."""

from dataclasses import dataclass
from pathlib import Path

from release_signoff.utils.constants import (
    DEFAULT_APPROVAL_LABEL,
    DEFAULT_CANDIDATE_LABEL,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_WEBHOOK_TIMEOUT,
)


@dataclass
class SignOffPolicy:
    """Label and branch handling rules applied to a sign-off."""

    candidate_label: str = DEFAULT_CANDIDATE_LABEL
    approval_label: str = DEFAULT_APPROVAL_LABEL
    exact_approval_label: bool = False
    delete_branch_on_cancel: bool = False


@dataclass
class SignOffConfig:
    """Configuration class for the run command."""

    repo: str
    github_token: str
    slack_webhook_url: str | None
    policy: SignOffPolicy
    github_api_url: str = DEFAULT_GITHUB_API_URL
    issue_number: int | None = None
    event_path: Path | None = None
    output_path: Path | None = None
    webhook_timeout: float = DEFAULT_WEBHOOK_TIMEOUT
    dry_run: bool = False
    debug: bool = False
