"""Helpers for reporting back to the GitHub Actions runner."""

from pathlib import Path
from typing import Mapping


def format_error_command(message: str) -> str:
    """Formats an ``::error::`` workflow command.

    Percent signs and newlines are escaped so multi-line messages stay in a
    single annotation.
    """
    escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    return f"::error::{escaped}"


def write_action_outputs(output_path: Path, outputs: Mapping[str, str | None]) -> None:
    """Appends outputs to the file named by ``GITHUB_OUTPUT``.

    Outputs whose value is None are written as empty strings.
    """
    with open(output_path, "a", encoding="utf-8") as f:
        for name, value in outputs.items():
            f.write(f"{name}={value or ''}\n")
