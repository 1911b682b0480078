"""Data models for the dependency index."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from eldeps.models import ExtractionFailure, Feature


@dataclass(frozen=True)
class DependencyIndex:
    target_dir: Path
    forward: dict[str, tuple[Feature, ...]] = field(default_factory=dict)  # module -> [features]
    reverse: dict[str, tuple[str, ...]] = field(default_factory=dict)  # feature -> [modules]
    module_paths: dict[str, Path] = field(default_factory=dict)  # module -> source file
    failures: tuple[ExtractionFailure, ...] = ()

    @property
    def modules(self) -> list[str]:
        return list(self.forward)
