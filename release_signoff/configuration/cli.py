"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from release_signoff.configuration.env import Settings
from release_signoff.configuration.models import SignOffPolicy
from release_signoff.configuration.reconcile import reconcile_signoff_configuration
from release_signoff.signoff.driver import run_signoff_workflow
from release_signoff.utils.actions import format_error_command, write_action_outputs
from release_signoff.utils.constants import DEFAULT_APPROVAL_LABEL, DEFAULT_CANDIDATE_LABEL, DEFAULT_WEBHOOK_TIMEOUT
from release_signoff.utils.logging import configure_logging

load_dotenv()

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Publish or cancel a release when its sign-off issue is closed.")


@typer_app.callback()
def main() -> None:
    """Publish or cancel a release when its sign-off issue is closed."""


@typer_app.command(name="run")
def run_cli(
    repo: Annotated[str | None, Option(envvar="GITHUB_REPOSITORY", help="Repository name (owner/repo).")] = None,
    github_token: Annotated[str | None, Option(envvar="GITHUB_TOKEN", help="GitHub token used for every API call.")] = None,
    slack_webhook_url: Annotated[str | None, Option(envvar="SLACK_WEBHOOK_URL", help="Slack incoming webhook URL.")] = None,
    issue_number: Annotated[
        int | None, Option(envvar="ISSUE_NUMBER", help="Issue to sign off. Defaults to the issue in the triggering event payload.")
    ] = None,
    candidate_label: Annotated[str, Option(envvar="CANDIDATE_LABEL", help="Label marking an issue as a Release Candidate.")] = DEFAULT_CANDIDATE_LABEL,
    approval_label: Annotated[str, Option(envvar="APPROVAL_LABEL", help="Label (or label prefix) recording QA approval.")] = DEFAULT_APPROVAL_LABEL,
    exact_approval_label: Annotated[
        bool, Option(envvar="EXACT_APPROVAL_LABEL", help="Require the approval label to match exactly instead of by prefix.")
    ] = False,
    delete_branch_on_cancel: Annotated[
        bool, Option(envvar="DELETE_BRANCH_ON_CANCEL", help="Delete the release branch when the release is cancelled.")
    ] = False,
    webhook_timeout: Annotated[float, Option(envvar="WEBHOOK_TIMEOUT", help="Timeout in seconds for the webhook call.")] = DEFAULT_WEBHOOK_TIMEOUT,
    dry_run: Annotated[bool, Option(envvar="DRY_RUN", help="Log the intended release, branch and webhook writes without performing them.")] = False,
) -> None:
    """Signs off the release described by a closed Release Candidate issue."""
    configure_logging()

    try:
        settings = Settings()
        if settings.DEBUG:
            configure_logging(debug=True)
        config = reconcile_signoff_configuration(
            repo=repo,
            github_token=github_token,
            slack_webhook_url=slack_webhook_url,
            policy=SignOffPolicy(
                candidate_label=candidate_label,
                approval_label=approval_label,
                exact_approval_label=exact_approval_label,
                delete_branch_on_cancel=delete_branch_on_cancel,
            ),
            github_api_url=settings.GITHUB_API_URL,
            issue_number=issue_number,
            event_path=settings.GITHUB_EVENT_PATH,
            output_path=settings.GITHUB_OUTPUT,
            webhook_timeout=webhook_timeout,
            dry_run=dry_run,
            debug=settings.DEBUG,
        )
        result = asyncio.run(run_signoff_workflow(config))
    except Exception as exc:
        logger.error("Sign-off failed", error=str(exc), error_type=type(exc).__name__)
        typer.echo(format_error_command(str(exc)))
        raise typer.Exit(code=1) from exc

    if config.output_path is not None:
        write_action_outputs(
            config.output_path,
            {
                "decision": result.decision.value,
                "tag": result.tag,
                "branch": result.branch,
                "release-url": result.release_url,
            },
        )

    summary = f"[{result.tag}] Release/Hotfix {result.decision.value} (branch {result.branch})"
    if result.release_url:
        summary += f": {result.release_url}"
    if result.dry_run:
        summary += " [dry run]"
    typer.echo(summary)


if __name__ == "__main__":
    typer_app()
