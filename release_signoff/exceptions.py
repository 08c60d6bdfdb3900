"""Base exception for the release sign-off hook."""


class ReleaseSignOffError(Exception):
    """Base class for every error that aborts a sign-off run."""

    pass
