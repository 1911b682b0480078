"""Plain-text renderers for dependency reports."""

from __future__ import annotations

import json

# (artifact name, [dependency artifact names])
Row = tuple[str, list[str]]


def render_columns(rows: list[Row]) -> str:
    """One line per module: `name.elc:` padded to a shared column, then a quoted list."""
    if not rows:
        return ""
    width = max(len(name) for name, _ in rows) + 1
    lines = []
    for name, deps in rows:
        label = f"{name}:"
        quoted = ", ".join(json.dumps(d) for d in deps)
        lines.append(f"{label:<{width}} [{quoted}]")
    return "\n".join(lines) + "\n"


def render_make(rows: list[Row]) -> str:
    """Make-style rules: `name.elc: dep.elc dep.elc`."""
    lines = [f"{name}: {' '.join(deps)}".rstrip() for name, deps in rows]
    return "".join(f"{line}\n" for line in lines)


def render_toplevel(names: list[str]) -> str:
    return "".join(f"{name}\n" for name in names)


RENDERERS = {
    "columns": render_columns,
    "make": render_make,
}
