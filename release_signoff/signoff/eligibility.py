"""Label checks deciding whether and how a release issue is signed off."""

import structlog

from release_signoff.utils.constants import DEFAULT_APPROVAL_LABEL, DEFAULT_CANDIDATE_LABEL

from .exceptions import NotAReleaseCandidateError
from .models import IssueSnapshot

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def has_label(issue: IssueSnapshot, name: str) -> bool:
    """Returns True if the issue carries a label named exactly ``name``."""
    return name in issue.labels


def has_label_with_prefix(issue: IssueSnapshot, prefix: str) -> bool:
    """Returns True if any label of the issue starts with ``prefix``.

    Allows variants such as "QA Approved - jdoe" to count as approval.
    """
    return any(label.startswith(prefix) for label in issue.labels)


def validate_candidate(issue: IssueSnapshot, candidate_label: str = DEFAULT_CANDIDATE_LABEL) -> None:
    """Ensures the issue is a Release Candidate.

    Raises:
        NotAReleaseCandidateError: If the candidate label is missing.
    """
    if not has_label(issue, candidate_label):
        logger.error("Issue is not a Release Candidate", issue_number=issue.number, labels=sorted(issue.labels), candidate_label=candidate_label)
        raise NotAReleaseCandidateError(candidate_label)


def is_approved(issue: IssueSnapshot, approval_label: str = DEFAULT_APPROVAL_LABEL, exact: bool = False) -> bool:
    """Returns True if QA signed the release off.

    Prefix matching is the default. ``exact=True`` only accepts a label
    named exactly ``approval_label``.
    """
    if exact:
        return has_label(issue, approval_label)
    return has_label_with_prefix(issue, approval_label)
