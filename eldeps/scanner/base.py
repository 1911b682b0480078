"""Abstract base scanner."""

from __future__ import annotations

import abc
from pathlib import Path

from eldeps.models import DirectoryScanError


class BaseScanner(abc.ABC):
    """Base class for language-specific requirement scanners."""

    extensions: tuple[str, ...]

    @abc.abstractmethod
    def extract_requires(self, file_path: Path) -> list[str]:
        """Return the requirement tokens declared in a single file, in order."""

    def list_modules(self, directory: Path) -> list[Path]:
        """List module files directly inside a directory (no recursion)."""
        try:
            entries = list(directory.iterdir())
        except OSError as e:
            raise DirectoryScanError(f"cannot read directory {directory}: {e}") from e

        modules: list[Path] = []
        for path in entries:
            if path.suffix not in self.extensions:
                continue
            if not path.is_file():
                continue
            modules.append(path)
        modules.sort(key=lambda p: p.name)
        return modules
