"""Queries over a built dependency index."""

from __future__ import annotations

from eldeps.models import SOURCE_SUFFIX, Feature
from eldeps.analysis.graph_models import DependencyIndex


def dependencies_of(
    index: DependencyIndex,
    module: str,
    local_only: bool = False,
) -> list[Feature]:
    """Return a module's requires in file order, excluding itself.

    With ``local_only``, a feature is kept only if it resolved at build time
    and its source file currently exists directly under the target directory.
    """
    deps: list[Feature] = []
    for feature in index.forward.get(module, ()):
        if feature.name == module:
            continue
        if local_only and not _exists_in_target(index, feature):
            continue
        deps.append(feature)
    return deps


def toplevel_modules(index: DependencyIndex) -> list[str]:
    """Modules that no other scanned module requires, in scan order."""
    return [
        name for name in index.forward
        if all(dependent == name for dependent in index.reverse.get(name, ()))
    ]


def invert_local_edges(forward: dict[str, tuple[Feature, ...]]) -> dict[str, tuple[str, ...]]:
    """Rebuild the reverse map from the locally resolved subset of a forward map."""
    reverse: dict[str, list[str]] = {}
    for module, features in forward.items():
        for feature in features:
            if feature.is_local:
                reverse.setdefault(feature.name, []).append(module)
    return {k: tuple(v) for k, v in reverse.items()}


def _exists_in_target(index: DependencyIndex, feature: Feature) -> bool:
    if feature.resolved_path is None:
        return False
    return (index.target_dir / f"{feature.name}{SOURCE_SUFFIX}").is_file()
