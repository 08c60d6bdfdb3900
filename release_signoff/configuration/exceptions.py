"""Contains exceptions raised when reconciling application configuration."""

from release_signoff.exceptions import ReleaseSignOffError


class MissingConfigurationError(ReleaseSignOffError):
    """Raised when a required configuration element is missing."""

    def __init__(self, name: str, cli_name: str | None = None, env_name: str | None = None) -> None:
        """Initializes the exception with the name of the missing element."""
        sources: list[str] = []
        if cli_name:
            sources.append(f"command line option {cli_name}")
        if env_name:
            sources.append(f"environment variable {env_name}")
        message = f'Input "{name}" was not defined'
        if sources:
            message += f" ({', '.join(sources)})"
        super().__init__(message)
        self.name = name
        self.cli_name = cli_name
        self.env_name = env_name
