"""Contains unit tests for the signoff eligibility module."""

from typing import Callable

import pytest

from release_signoff.signoff.eligibility import has_label, has_label_with_prefix, is_approved, validate_candidate
from release_signoff.signoff.exceptions import NotAReleaseCandidateError
from release_signoff.signoff.models import IssueSnapshot

MakeIssue = Callable[..., IssueSnapshot]


def test_has_label_exact_match(make_issue: MakeIssue) -> None:
    """Test that has_label only matches a label with the exact name."""
    issue = make_issue(["RC", "QA Approved - alice"])
    assert has_label(issue, "RC") is True
    assert has_label(issue, "QA Approved") is False


def test_has_label_with_prefix(make_issue: MakeIssue) -> None:
    """Test that has_label_with_prefix matches suffixed labels."""
    issue = make_issue(["RC", "QA Approved - alice"])
    assert has_label_with_prefix(issue, "QA Approved") is True
    assert has_label_with_prefix(issue, "QA Rejected") is False


def test_validate_candidate_passes_with_marker(make_issue: MakeIssue) -> None:
    """Test that an issue carrying the RC label is accepted."""
    validate_candidate(make_issue(["RC"]))


@pytest.mark.parametrize(
    "labels",
    [
        pytest.param([], id="no labels"),
        pytest.param(["QA Approved"], id="approved but not a candidate"),
        pytest.param(["rc"], id="wrong case"),
        pytest.param(["RC-2"], id="prefixed marker"),
    ],
)
def test_validate_candidate_raises_without_marker(make_issue: MakeIssue, labels: list[str]) -> None:
    """Test that NotAReleaseCandidateError is raised when the RC label is absent."""
    with pytest.raises(NotAReleaseCandidateError, match='Issue does not have "RC" label'):
        validate_candidate(make_issue(labels))


def test_validate_candidate_custom_marker(make_issue: MakeIssue) -> None:
    """Test that a custom candidate label is honored."""
    validate_candidate(make_issue(["release-candidate"]), candidate_label="release-candidate")
    with pytest.raises(NotAReleaseCandidateError):
        validate_candidate(make_issue(["RC"]), candidate_label="release-candidate")


@pytest.mark.parametrize(
    "labels,exact,expected",
    [
        pytest.param(["RC", "QA Approved"], False, True, id="prefix mode exact label"),
        pytest.param(["RC", "QA Approved by bob"], False, True, id="prefix mode suffixed label"),
        pytest.param(["RC"], False, False, id="prefix mode no approval"),
        pytest.param(["RC", "QA Approved"], True, True, id="exact mode exact label"),
        pytest.param(["RC", "QA Approved by bob"], True, False, id="exact mode suffixed label"),
    ],
)
def test_is_approved(make_issue: MakeIssue, labels: list[str], exact: bool, expected: bool) -> None:
    """Test approval detection in prefix and exact matching modes."""
    assert is_approved(make_issue(labels), exact=exact) is expected
