"""Generate a JSON dependency manifest for byte-compiled artifacts."""

from __future__ import annotations

import json
from pathlib import Path

from eldeps.analysis import DependencyIndex, dependencies_of, toplevel_modules
from eldeps.models import artifact_name


def build_manifest(index: DependencyIndex, local_only: bool = False) -> dict:
    """Summarize an index as a JSON-serializable dict."""
    artifacts = {}
    for module in index.modules:
        deps = dependencies_of(index, module, local_only=local_only)
        artifacts[artifact_name(module)] = {
            "source_file": str(index.module_paths[module]),
            "requires": [d.artifact_name for d in deps],
            "local": [d.artifact_name for d in deps if d.is_local],
        }

    return {
        "version": "1.0",
        "source_directory": str(index.target_dir),
        "local_only": local_only,
        "total_modules": len(artifacts),
        "artifacts": artifacts,
        "toplevel": [artifact_name(m) for m in toplevel_modules(index)],
        "failures": [
            {"source_file": str(f.module_path), "reason": f.reason}
            for f in index.failures
        ],
    }


def generate_manifest(
    index: DependencyIndex,
    output_path: Path | None = None,
    local_only: bool = False,
) -> str:
    """Render the manifest as JSON, writing it to ``output_path`` when given."""
    text = json.dumps(build_manifest(index, local_only=local_only), indent=2) + "\n"
    if output_path is not None:
        output_path.write_text(text, encoding="utf-8")
    return text
