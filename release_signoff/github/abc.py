"""Base ABC for GitHub clients."""

from abc import ABC, abstractmethod
from typing import Any


class GitHubClientBase(ABC):
    """Base ABC for GitHub clients."""

    # Issue Operations
    @abstractmethod
    async def get_issue(self, issue_number: int) -> Any:
        """Get an issue for a repository."""
        pass

    # Release Operations
    @abstractmethod
    async def create_release(
        self,
        tag_name: str,
        target_commitish: str,
        name: str | None = None,
        body: str | None = None,
        draft: bool = False,
        prerelease: bool = False,
    ) -> Any:
        """Create a release for a repository."""
        pass

    @abstractmethod
    async def upload_release_asset(self, release: Any, name: str, content: bytes, content_type: str) -> Any:
        """Upload an asset to an existing release."""
        pass

    # Branch Operations
    @abstractmethod
    async def delete_branch(self, branch_name: str) -> None:
        """Delete a branch from the repository."""
        pass
