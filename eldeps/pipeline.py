"""Pipeline orchestrator: scan -> index -> query -> render."""

from __future__ import annotations

from pathlib import Path

from eldeps.analysis import DependencyIndex, DependencyIndexBuilder, dependencies_of, toplevel_modules
from eldeps.exporter import RENDERERS, render_toplevel
from eldeps.models import ScanConfig, artifact_name
from eldeps.scanner import scan_directory


def run_scan(config: ScanConfig) -> list[Path]:
    """Stage 1: List the module files in the target directory.

    Raises DirectoryScanError if the directory cannot be listed.
    """
    return scan_directory(config.target_dir)


def build_index(config: ScanConfig) -> DependencyIndex:
    """Stage 2: Scan the target directory and build its dependency index."""
    return DependencyIndexBuilder().build(config.target_dir, run_scan(config))


def render_report(index: DependencyIndex, config: ScanConfig) -> str:
    """Render the per-module or toplevel report for an index."""
    if config.toplevel_only:
        return render_toplevel([artifact_name(m) for m in toplevel_modules(index)])

    try:
        renderer = RENDERERS[config.output_format]
    except KeyError:
        raise ValueError(f"Unknown output format: {config.output_format!r}") from None

    rows = []
    for module in index.modules:
        deps = dependencies_of(index, module, local_only=config.local_only)
        rows.append((artifact_name(module), [d.artifact_name for d in deps]))
    return renderer(rows)


def run_report(config: ScanConfig) -> str:
    """Run the full scan and return the rendered report."""
    return render_report(build_index(config), config)
