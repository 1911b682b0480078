"""Scanner registry and dispatcher."""

from __future__ import annotations

from pathlib import Path

from eldeps.scanner.base import BaseScanner
from eldeps.scanner.elisp_scanner import ElispScanner


def get_scanner() -> BaseScanner:
    return ElispScanner()


def scan_directory(directory: Path) -> list[Path]:
    """List the module files directly inside a directory, sorted by name.

    Raises DirectoryScanError if the directory cannot be listed.
    """
    return get_scanner().list_modules(directory)


__all__ = [
    "BaseScanner",
    "ElispScanner",
    "get_scanner",
    "scan_directory",
]
