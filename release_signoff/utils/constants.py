"""Shared constants used across the application."""

import re

# Issue Body Patterns
# -------------------

RELEASE_TAG_PATTERN = re.compile(r"^\s*-\s*Release tag:\s*(v[0-9]{8}\.[0-9]+(?:-hotfix)?)\s*$", re.MULTILINE)
"""Pattern to match the release tag line of a release issue (e.g. '- Release tag: v20240115.1')."""

BRANCH_PATTERN = re.compile(r"^\s*-\s*Branch:\s*((?:release|hotfix)/v[0-9]{8}\.[0-9]+(?:-hotfix)?)\s*$", re.MULTILINE)
"""Pattern to match the branch line of a release issue (e.g. '- Branch: release/v20240115.1')."""

# Label Defaults
# --------------

DEFAULT_CANDIDATE_LABEL = "RC"
"""Label marking an issue as a Release Candidate."""

DEFAULT_APPROVAL_LABEL = "QA Approved"
"""Label (or label prefix) recording QA sign-off."""

# Release Asset Settings
# ----------------------

SIGN_OFF_METADATA_ASSET_NAME = "sign-off-metadata.json"
"""Name of the metadata asset attached to every published release."""

SIGN_OFF_METADATA_CONTENT_TYPE = "application/json"
"""Content type of the metadata asset."""

# Notification Settings
# ---------------------

APPROVED_HEADER_TEMPLATE = "[{tag}] Release/Hotfix approved ✅"
"""Header of the notification sent when a release is approved."""

CANCELLED_HEADER_TEMPLATE = "[{tag}] Release/Hotfix cancelled ❌"
"""Header of the notification sent when a release is cancelled."""

DEFAULT_WEBHOOK_TIMEOUT = 10.0
"""Default timeout in seconds for outbound webhook calls."""

DEFAULT_GITHUB_API_URL = "https://api.github.com"
