"""Contains unit tests for the utils.actions module."""

from pathlib import Path

from release_signoff.utils.actions import format_error_command, write_action_outputs


def test_format_error_command_escapes_newlines() -> None:
    """Test that multi-line messages stay on one workflow command line."""
    assert format_error_command('No "Branch" found in issue body:\n- Release tag: v1 100%') == (
        '::error::No "Branch" found in issue body:%0A- Release tag: v1 100%25'
    )


def test_write_action_outputs_appends(tmp_path: Path) -> None:
    """Test that outputs are appended as name=value lines."""
    output_path = tmp_path / "output"
    output_path.write_text("previous=1\n")
    write_action_outputs(output_path, {"decision": "approved", "release-url": None})
    assert output_path.read_text() == "previous=1\ndecision=approved\nrelease-url=\n"
