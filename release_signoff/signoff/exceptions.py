"""Custom exceptions for the sign-off module."""

from release_signoff.exceptions import ReleaseSignOffError


class NotAReleaseCandidateError(ReleaseSignOffError):
    """Raised when the issue does not carry the Release Candidate marker label."""

    def __init__(self, label: str) -> None:
        super().__init__(f'Issue does not have "{label}" label')
        self.label = label


class MissingFieldError(ReleaseSignOffError):
    """Raised when a required field cannot be found in the issue body."""

    def __init__(self, field: str, body: str) -> None:
        super().__init__(f'No "{field}" found in issue body:\n{body}')
        self.field = field
        self.body = body
