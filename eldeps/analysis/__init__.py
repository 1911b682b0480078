"""Dependency index construction and queries."""

from eldeps.analysis.dependency_graph import DependencyIndexBuilder
from eldeps.analysis.graph_models import DependencyIndex
from eldeps.analysis.queries import dependencies_of, invert_local_edges, toplevel_modules

__all__ = [
    "DependencyIndex",
    "DependencyIndexBuilder",
    "dependencies_of",
    "invert_local_edges",
    "toplevel_modules",
]
