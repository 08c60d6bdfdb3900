"""Contains utility functions for GitHub interactions."""

from typing import Any, Iterable


async def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Splits the repository in the configuration into owner and repository."""
    if repo is None:
        raise ValueError("A repository is required in config.")
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError("Repository must be in the format 'owner/repo' with no leading/trailing slashes or extra parts.")
    owner, repository = parts
    return owner, repository


def label_names(labels: Iterable[Any] | None) -> frozenset[str]:
    """Normalizes GitHub label entries into a set of names.

    The issues API returns labels either as bare strings or as label objects;
    event payloads deliver them as dictionaries.
    """
    names: set[str] = set()
    for label in labels or []:
        if isinstance(label, str):
            name: object = label
        elif isinstance(label, dict):
            name = label.get("name")
        else:
            name = getattr(label, "name", None)
        if isinstance(name, str) and name:
            names.add(name)
    return frozenset(names)
