"""GitHub client adapter for the githubkit library."""

from functools import wraps
from typing import Any, Awaitable, Callable, Self, TypeVar

import structlog
from githubkit import Response
from githubkit.exception import GitHubException, RequestFailed
from githubkit.versions.latest.models import Issue, Release, ReleaseAsset

from release_signoff.utils.github import split_repository_in_configuration

from .abc import GitHubClientBase
from .client import GitHubClient, get_github_client
from .exceptions import UpstreamCallError

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def handle_github_errors(func: F) -> F:
    """Decorator to log failed GitHub calls and raise them as UpstreamCallError with details."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except RequestFailed as exc:
            try:
                error_data = exc.response.json()
            except Exception:
                error_data = {}
            if not isinstance(error_data, dict):
                error_data = {}
            status_code = exc.response.status_code
            message = error_data.get("message", str(exc))
            errors = error_data.get("errors", [])
            logger.error(
                "GitHub request failed",
                function=func.__name__,
                message=message,
                errors=errors,
                url=str(getattr(exc.response, "url", None)),
                status_code=status_code,
            )
            if status_code == 422 and errors:
                message = f"{message} | errors: {errors}"
            raise UpstreamCallError(func.__name__, message, status_code=status_code) from exc
        except GitHubException as exc:
            logger.error("GitHub request could not be sent", function=func.__name__, error=str(exc), error_type=type(exc).__name__)
            raise UpstreamCallError(func.__name__, str(exc)) from exc

    return wrapper  # type: ignore


class GitHubKitAdapter(GitHubClientBase):
    """GitHub client adapter for the githubkit library."""

    def __init__(self, client: GitHubClient, owner: str, repo_name: str) -> None:
        """Initialize the GitHub client adapter with an already-initialized client."""
        self.client = client
        self.owner = owner
        self.repo_name = repo_name

    @property
    def full_name(self) -> str:
        """Repository in 'owner/repo' format."""
        return f"{self.owner}/{self.repo_name}"

    def _omit_null_parameters(self, **kwargs: Any) -> dict[str, Any]:
        """Omit parameters that are None."""
        return {k: v for k, v in kwargs.items() if v is not None}

    @classmethod
    async def create(cls, repo: str, github_token: str, github_api_url: str = "https://api.github.com") -> Self:
        """Create a new GitHub client adapter.

        Args:
            repo: Repository in 'owner/repo' format
            github_token: Token used to authenticate every call
            github_api_url: GitHub API URL (defaults to https://api.github.com)

        Returns:
            Configured GitHubKitAdapter instance

        Raises:
            ValueError: If the repository is not in 'owner/repo' format
        """
        owner, repo_name = await split_repository_in_configuration(repo=repo)
        logger.info(
            "Creating client for GitHub instance and repository",
            github_api_url=github_api_url,
            owner=owner,
            repo_name=repo_name,
        )
        client = await get_github_client(github_token=github_token, github_api_url=github_api_url)
        return cls(client, owner, repo_name)

    # Issue Operations
    @handle_github_errors
    async def get_issue(self, issue_number: int) -> Issue:
        """Get an issue for the repository by number."""
        logger.debug("Fetching issue", owner=self.owner, repo=self.repo_name, issue_number=issue_number)
        response: Response[Issue] = await self.client.rest.issues.async_get(
            owner=self.owner,
            repo=self.repo_name,
            issue_number=issue_number,
        )
        return response.parsed_data

    # Release Operations
    @handle_github_errors
    async def create_release(
        self,
        tag_name: str,
        target_commitish: str,
        name: str | None = None,
        body: str | None = None,
        draft: bool = False,
        prerelease: bool = False,
    ) -> Release:
        """Create a release for the repository."""
        params = self._omit_null_parameters(
            tag_name=tag_name,
            target_commitish=target_commitish,
            name=name,
            body=body,
            draft=draft,
            prerelease=prerelease,
        )
        response: Response[Release] = await self.client.rest.repos.async_create_release(
            owner=self.owner,
            repo=self.repo_name,
            **params,
        )
        release = response.parsed_data
        logger.info("Created release", tag_name=release.tag_name, release_id=release.id, draft=release.draft, html_url=release.html_url)
        return release

    @handle_github_errors
    async def upload_release_asset(self, release: Release, name: str, content: bytes, content_type: str) -> ReleaseAsset:
        """Upload an asset to an existing release.

        Assets are posted to the release's upload URL (uploads.github.com on
        github.com), not to the REST API base URL.
        """
        # upload_url is a URI template such as ".../assets{?name,label}"
        upload_url = release.upload_url.split("{", 1)[0]
        response: Response[ReleaseAsset] = await self.client.arequest(
            "POST",
            upload_url,
            params={"name": name},
            content=content,
            headers={"Content-Type": content_type},
            response_model=ReleaseAsset,
        )
        asset = response.parsed_data
        logger.info("Uploaded release asset", release_id=release.id, name=asset.name, size=asset.size)
        return asset

    # Branch Operations
    @handle_github_errors
    async def delete_branch(self, branch_name: str) -> None:
        """Delete a branch from the repository."""
        await self.client.rest.git.async_delete_ref(
            owner=self.owner,
            repo=self.repo_name,
            ref=f"heads/{branch_name}",
        )
        logger.info("Deleted branch", branch=branch_name)
