"""Click CLI with deps and manifest subcommands."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from eldeps import __version__
from eldeps.exporter import RENDERERS, generate_manifest
from eldeps.models import DirectoryScanError, ScanConfig
from eldeps.pipeline import build_index, render_report

_FORMAT_CHOICES = sorted(RENDERERS)

_DIR_ARGUMENT = click.argument(
    "target_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """eldeps: Report dependencies between Emacs Lisp files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _scan(config: ScanConfig):
    try:
        index = build_index(config)
    except DirectoryScanError as e:
        raise click.ClickException(str(e))

    for failure in index.failures:
        click.echo(str(failure), err=True)
    return index


@cli.command()
@_DIR_ARGUMENT
@click.option("--local-only", "-l", is_flag=True, help="Only list dependencies present in TARGET_DIR")
@click.option("--toplevel-only", "-t", is_flag=True, help="Only list files nothing else requires")
@click.option("--format", "-f", "output_format", type=click.Choice(_FORMAT_CHOICES), default="columns",
              help="Output format for per-file listings")
def deps(target_dir: Path, local_only: bool, toplevel_only: bool, output_format: str):
    """List the byte-compiled dependencies of each file in TARGET_DIR."""
    config = ScanConfig(
        target_dir=target_dir,
        local_only=local_only,
        toplevel_only=toplevel_only,
        output_format=output_format,
    )
    index = _scan(config)
    click.echo(render_report(index, config), nl=False)


@cli.command()
@_DIR_ARGUMENT
@click.option("--local-only", "-l", is_flag=True, help="Only list dependencies present in TARGET_DIR")
@click.option("-o", "--output", "output_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Write the manifest to a file instead of stdout")
def manifest(target_dir: Path, local_only: bool, output_path: Path | None):
    """Write a JSON dependency manifest for TARGET_DIR."""
    index = _scan(ScanConfig(target_dir=target_dir, local_only=local_only))
    try:
        text = generate_manifest(index, output_path=output_path, local_only=local_only)
    except OSError as e:
        raise click.ClickException(f"cannot write {output_path}: {e}")
    if output_path is None:
        click.echo(text, nl=False)
    else:
        click.echo(f"Wrote {output_path}")


if __name__ == "__main__":
    cli()
