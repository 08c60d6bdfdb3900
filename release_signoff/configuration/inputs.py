"""Reads action inputs the way the GitHub Actions runtime exposes them."""

import os
from typing import Mapping

from release_signoff.configuration.exceptions import MissingConfigurationError


def input_environment_variable(name: str) -> str:
    """Returns the environment variable GitHub Actions uses for an input.

    The runner upper-cases the input name and replaces spaces with
    underscores; hyphens are kept, so ``github-token`` becomes
    ``INPUT_GITHUB-TOKEN``.
    """
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, default: str | None = None, environ: Mapping[str, str] | None = None) -> str | None:
    """Returns the value of an action input, or the default if it is unset or blank."""
    environ = os.environ if environ is None else environ
    value = environ.get(input_environment_variable(name), "").strip()
    return value or default


def get_required_input(name: str, environ: Mapping[str, str] | None = None) -> str:
    """Returns the value of a required action input.

    Raises:
        MissingConfigurationError: If the input is absent or empty.
    """
    value = get_input(name, environ=environ)
    if value is None:
        raise MissingConfigurationError(name, env_name=input_environment_variable(name))
    return value
