"""Extracts release fields from a release issue body."""

import re

import structlog

from release_signoff.utils.constants import BRANCH_PATTERN, RELEASE_TAG_PATTERN

from .exceptions import MissingFieldError
from .models import ReleaseFields

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def _search(pattern: re.Pattern[str], body: str, field: str) -> str:
    match = pattern.search(body)
    if match is None:
        logger.error("Field not found in issue body", field=field)
        raise MissingFieldError(field, body)
    return match.group(1)


def extract_release_fields(body: str | None) -> ReleaseFields:
    """Extracts the release tag and branch from an issue body.

    The body is written by the tool that opens release issues and is
    expected to contain lines such as::

        - Release tag: v20240115.1
        - Branch: release/v20240115.1

    Surrounding prose is ignored, but the values themselves must match the
    tag and branch formats exactly.

    Raises:
        MissingFieldError: If either line is missing or malformed.
    """
    body = body or ""
    tag = _search(RELEASE_TAG_PATTERN, body, "Release tag")
    branch = _search(BRANCH_PATTERN, body, "Branch")
    logger.info("Extracted release fields", tag=tag, branch=branch)
    return ReleaseFields(tag=tag, branch=branch)
