"""Data models for the eldeps dependency scanner."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

SOURCE_SUFFIX = ".el"
ARTIFACT_SUFFIX = ".elc"


class DirectoryScanError(Exception):
    """The target directory could not be listed."""


class ExtractionError(Exception):
    """A single module could not be read or decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class Feature:
    """A required feature, optionally resolved to a sibling module.

    Two features with the same name compare equal regardless of resolution.
    """
    name: str
    resolved_path: Path | None = field(default=None, compare=False)

    @property
    def is_local(self) -> bool:
        return self.resolved_path is not None

    @property
    def artifact_name(self) -> str:
        return artifact_name(self.name)


@dataclass
class ExtractionFailure:
    """A module skipped during the index build."""
    module_path: Path
    reason: str

    def __str__(self) -> str:
        return f"{self.module_path}: {self.reason}"


@dataclass
class ScanConfig:
    """Configuration for a dependency report."""
    target_dir: Path = field(default_factory=lambda: Path("."))
    local_only: bool = False
    toplevel_only: bool = False
    output_format: str = "columns"


def module_name(path: Path) -> str:
    return path.stem


def artifact_name(name: str) -> str:
    return f"{name}{ARTIFACT_SUFFIX}"
