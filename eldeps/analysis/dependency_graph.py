"""Dependency index builder — extracts requires, resolves them against sibling files, inverts local edges."""

from __future__ import annotations

import logging
from pathlib import Path

from eldeps.models import (
    ARTIFACT_SUFFIX,
    SOURCE_SUFFIX,
    ExtractionError,
    ExtractionFailure,
    Feature,
    module_name,
)
from eldeps.analysis.graph_models import DependencyIndex
from eldeps.analysis.queries import invert_local_edges
from eldeps.scanner import BaseScanner, get_scanner

logger = logging.getLogger(__name__)


class DependencyIndexBuilder:
    """Build a forward/reverse dependency index from scanned module files."""

    def __init__(self, scanner: BaseScanner | None = None):
        self.scanner = scanner or get_scanner()

    def build(self, target_dir: Path, module_files: list[Path]) -> DependencyIndex:
        forward: dict[str, tuple[Feature, ...]] = {}
        module_paths: dict[str, Path] = {}
        failures: list[ExtractionFailure] = []

        for path in module_files:
            name = module_name(path)
            try:
                tokens = self.scanner.extract_requires(path)
            except ExtractionError as e:
                logger.debug("skipping %s: %s", path, e.reason)
                failures.append(ExtractionFailure(module_path=path, reason=e.reason))
                continue

            features = tuple(
                self.resolve_requirement(token, path.parent) for token in tokens
            )
            forward[name] = features
            module_paths[name] = path

        reverse = invert_local_edges(forward)

        logger.info(
            "indexed %d module(s) in %s, %d local edge(s), %d failure(s)",
            len(forward), target_dir,
            sum(len(v) for v in reverse.values()), len(failures),
        )
        return DependencyIndex(
            target_dir=target_dir,
            forward=forward,
            reverse=reverse,
            module_paths=module_paths,
            failures=tuple(failures),
        )

    @staticmethod
    def resolve_requirement(token: str, module_dir: Path) -> Feature:
        """Resolve a require against the declaring module's directory.

        A sibling `<token>.el` makes the feature local; its path is reported
        with the byte-compiled suffix for downstream consumers.
        """
        sibling = module_dir / f"{token}{SOURCE_SUFFIX}"
        if sibling.is_file():
            return Feature(name=token, resolved_path=sibling.with_suffix(ARTIFACT_SUFFIX))
        return Feature(name=token)
