"""
Application version: the installed distribution's version, else the repo root VERSION file.
"""

from __future__ import annotations

from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "netball-stats"
UNKNOWN_VERSION = "0.0.0"


def _version_file_path() -> Path:
    # backend/version.py -> repo root
    return Path(__file__).resolve().parent.parent / "VERSION"


def _read_version_file() -> str:
    path = _version_file_path()
    if not path.is_file():
        return UNKNOWN_VERSION
    try:
        raw = path.read_text(encoding="utf-8").strip()
    except OSError:
        return UNKNOWN_VERSION
    return raw.splitlines()[0].strip() if raw else UNKNOWN_VERSION


def get_version() -> str:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return _read_version_file()
