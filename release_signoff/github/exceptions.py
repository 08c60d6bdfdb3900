"""Contains exceptions raised when talking to GitHub and other upstream services."""

from release_signoff.exceptions import ReleaseSignOffError


class UpstreamCallError(ReleaseSignOffError):
    """Raised when a call to GitHub or the messaging webhook fails."""

    def __init__(self, operation: str, message: str, status_code: int | None = None) -> None:
        """Initializes the exception with the failed operation and upstream message."""
        detail = f"{operation} failed"
        if status_code is not None:
            detail += f" with status {status_code}"
        super().__init__(f"{detail}: {message}")
        self.operation = operation
        self.status_code = status_code


class InvalidEventError(ReleaseSignOffError):
    """Raised when the triggering event payload cannot be used."""

    pass
