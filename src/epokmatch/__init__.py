"""Literary era matching exercise."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]


def _source_version() -> str | None:
    """Read ``[project].version`` when running from a source checkout."""
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if not pyproject.is_file():
        return None
    with pyproject.open("rb") as handle:
        project = tomllib.load(handle).get("project", {})
    if project.get("name") != "epokmatch":
        return None
    value = project.get("version")
    return value if isinstance(value, str) else None


_project_version = _source_version()
if _project_version is not None:
    __version__ = _project_version
else:
    try:
        __version__ = version("epokmatch")
    except PackageNotFoundError:
        __version__ = "0+unknown"
