# This file is intended to hold the setup for the authenticated githubkit client.

"""Sets up the authenticated githubkit client."""

from typing import TypeAlias

from githubkit import GitHub
from githubkit.auth import TokenAuthStrategy

GitHubClient: TypeAlias = GitHub[TokenAuthStrategy]


async def get_github_client(github_token: str, github_api_url: str) -> GitHubClient:
    """Returns an authenticated GitHub client using a token.

    Supports custom base URL for GitHub Enterprise Server (GHES).
    Raises RuntimeError if no token is given.
    """
    if not github_token:
        raise RuntimeError("GitHub authentication requires github_token in config.")
    # Disable HTTP caching to always get fresh data
    return GitHub(auth=TokenAuthStrategy(github_token), base_url=github_api_url, http_cache=False)
