"""Exporter layer."""

from eldeps.exporter.manifest_generator import build_manifest, generate_manifest
from eldeps.exporter.text_exporter import RENDERERS, render_columns, render_make, render_toplevel

__all__ = [
    "RENDERERS",
    "build_manifest",
    "generate_manifest",
    "render_columns",
    "render_make",
    "render_toplevel",
]
