"""Reconciles configuration between CLI arguments, environment variables and action inputs."""

from pathlib import Path
from typing import Mapping

import structlog

from release_signoff.configuration.exceptions import MissingConfigurationError
from release_signoff.configuration.inputs import get_input, get_required_input
from release_signoff.configuration.models import SignOffConfig, SignOffPolicy
from release_signoff.utils.constants import DEFAULT_GITHUB_API_URL, DEFAULT_WEBHOOK_TIMEOUT

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

GITHUB_TOKEN_INPUT = "github-token"
SLACK_WEBHOOK_URL_INPUT = "slack-webhook-url"


def _require(value: str | None, name: str, cli_name: str, env_name: str, input_name: str, environ: Mapping[str, str] | None) -> str:
    """Returns the value from the CLI/environment, falling back to the action input."""
    if value and value.strip():
        return value.strip()
    try:
        return get_required_input(input_name, environ=environ)
    except MissingConfigurationError as exc:
        logger.error("Required configuration element missing", name=name, cli_name=cli_name, env_name=env_name)
        raise MissingConfigurationError(name, cli_name=cli_name, env_name=f"{env_name} or {exc.env_name}") from exc


def reconcile_signoff_configuration(
    repo: str | None,
    github_token: str | None,
    slack_webhook_url: str | None,
    policy: SignOffPolicy,
    github_api_url: str = DEFAULT_GITHUB_API_URL,
    issue_number: int | None = None,
    event_path: Path | None = None,
    output_path: Path | None = None,
    webhook_timeout: float = DEFAULT_WEBHOOK_TIMEOUT,
    dry_run: bool = False,
    debug: bool = False,
    environ: Mapping[str, str] | None = None,
) -> SignOffConfig:
    """Builds the configuration of a sign-off run.

    Args:
        repo: Repository in 'owner/repo' format.
        github_token: Token used for every GitHub call.
        slack_webhook_url: Incoming webhook URL used for notifications.
        policy: Label and branch handling rules.
        github_api_url: GitHub API URL (GHES installations override it).
        issue_number: Issue to fetch when no event payload is used.
        event_path: Path to the triggering event payload.
        output_path: Path to the GitHub Actions output file.
        webhook_timeout: Timeout in seconds for the webhook call.
        dry_run: Log intended writes without performing them.
        debug: Enable debug logging.
        environ: Environment used to look up action inputs (defaults to os.environ).

    Raises:
        MissingConfigurationError: If the token, repository or webhook URL is missing,
            or if neither an issue number nor an event payload is available.

    Returns:
        SignOffConfig: The reconciled configuration.
    """
    token = _require(github_token, "github-token", "--github-token", "GITHUB_TOKEN", GITHUB_TOKEN_INPUT, environ)

    if not repo or not repo.strip():
        raise MissingConfigurationError("repository", cli_name="--repo", env_name="GITHUB_REPOSITORY")

    # Dry runs never post, so the webhook is only required for real runs.
    webhook_url: str | None
    if dry_run:
        webhook_url = slack_webhook_url or get_input(SLACK_WEBHOOK_URL_INPUT, environ=environ)
    else:
        webhook_url = _require(slack_webhook_url, "slack-webhook-url", "--slack-webhook-url", "SLACK_WEBHOOK_URL", SLACK_WEBHOOK_URL_INPUT, environ)

    if issue_number is None and event_path is None:
        raise MissingConfigurationError("issue", cli_name="--issue-number", env_name="GITHUB_EVENT_PATH")

    return SignOffConfig(
        repo=repo.strip(),
        github_token=token,
        slack_webhook_url=webhook_url,
        policy=policy,
        github_api_url=github_api_url,
        issue_number=issue_number,
        event_path=event_path,
        output_path=output_path,
        webhook_timeout=webhook_timeout,
        dry_run=dry_run,
        debug=debug,
    )
