"""Data models for release sign-off."""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SignOffDecision(str, Enum):
    """Outcome of a release sign-off."""

    APPROVED = "approved"
    CANCELLED = "cancelled"


class IssueSnapshot(BaseModel):
    """Read-only view of the issue that triggered the sign-off."""

    model_config = ConfigDict(frozen=True)

    number: int
    body: str = ""
    labels: frozenset[str] = frozenset()
    title: str | None = None
    html_url: str | None = None


class ReleaseFields(BaseModel):
    """Release tag and source branch extracted from a release issue body."""

    model_config = ConfigDict(frozen=True)

    tag: str
    branch: str


class SignOffMetadata(BaseModel):
    """Record attached to a published release as sign-off-metadata.json."""

    repository: str
    issue_number: int
    issue_title: str | None = None
    issue_url: str | None = None
    labels: list[str]
    tag: str
    branch: str
    decision: SignOffDecision = SignOffDecision.APPROVED
    signed_off_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class SignOffResult(BaseModel):
    """Result of a sign-off run."""

    decision: SignOffDecision
    tag: str
    branch: str
    release_url: str | None = None
    release_id: int | None = None
    branch_deleted: bool = False
    dry_run: bool = False
