"""Fixtures for unit tests."""

from typing import Callable, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog

from release_signoff.signoff.models import IssueSnapshot

RELEASE_ISSUE_BODY = "- Release tag: v20240115.1\n- Branch: release/v20240115.1"


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_issue() -> Callable[..., IssueSnapshot]:
    """Factory building issue snapshots for tests."""

    def _make_issue(labels: list[str], body: str = RELEASE_ISSUE_BODY, number: int = 42) -> IssueSnapshot:
        return IssueSnapshot(
            number=number,
            body=body,
            labels=frozenset(labels),
            title="Release v20240115.1",
            html_url=f"https://github.com/owner/repo/issues/{number}",
        )

    return _make_issue


@pytest.fixture
def github_adapter() -> MagicMock:
    """A GitHub adapter whose write calls are recorded."""
    adapter = MagicMock()
    release = MagicMock()
    release.id = 1001
    release.html_url = "https://github.com/owner/repo/releases/tag/v20240115.1"
    release.upload_url = "https://uploads.github.com/repos/owner/repo/releases/1001/assets{?name,label}"
    adapter.create_release = AsyncMock(return_value=release)
    adapter.upload_release_asset = AsyncMock()
    adapter.delete_branch = AsyncMock()
    adapter.get_issue = AsyncMock()
    adapter.full_name = "owner/repo"
    return adapter


@pytest.fixture
def notifier() -> MagicMock:
    """A notifier whose sent payloads are recorded."""
    notifier = MagicMock()
    notifier.send = AsyncMock()
    return notifier
