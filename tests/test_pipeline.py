"""Tests for the full scan-and-report pipeline."""

import pytest

from eldeps.models import DirectoryScanError, ScanConfig
from eldeps.pipeline import build_index, render_report, run_report, run_scan


@pytest.fixture
def project(tmp_path):
    (tmp_path / "a.el").write_text("(require 'b)\n")
    (tmp_path / "b.el").write_text(";;; b.el\n")
    (tmp_path / "c.el").write_text("(require 'nonexistent)\n")
    return tmp_path


def test_run_scan(project):
    files = run_scan(ScanConfig(target_dir=project))
    assert [f.name for f in files] == ["a.el", "b.el", "c.el"]


def test_build_index(project):
    index = build_index(ScanConfig(target_dir=project))
    assert list(index.forward) == ["a", "b", "c"]
    assert index.reverse == {"b": ("a",)}
    assert index.failures == ()


def test_run_report_columns(project):
    text = run_report(ScanConfig(target_dir=project))
    assert text == (
        'a.elc: ["b.elc"]\n'
        "b.elc: []\n"
        'c.elc: ["nonexistent.elc"]\n'
    )


def test_run_report_local_only(project):
    text = run_report(ScanConfig(target_dir=project, local_only=True))
    assert 'c.elc: []' in text.splitlines()


def test_run_report_toplevel(project):
    text = run_report(ScanConfig(target_dir=project, toplevel_only=True))
    assert text == "a.elc\nc.elc\n"


def test_run_report_make(project):
    text = run_report(ScanConfig(target_dir=project, output_format="make"))
    assert text.splitlines()[0] == "a.elc: b.elc"


def test_run_report_is_idempotent(project):
    config = ScanConfig(target_dir=project)
    assert run_report(config) == run_report(config)


def test_run_report_empty_directory(tmp_path):
    config = ScanConfig(target_dir=tmp_path)
    assert run_report(config) == ""
    assert build_index(config).forward == {}


def test_build_index_missing_directory(tmp_path):
    with pytest.raises(DirectoryScanError):
        build_index(ScanConfig(target_dir=tmp_path / "missing"))


def test_render_report_unknown_format(project):
    index = build_index(ScanConfig(target_dir=project))
    with pytest.raises(ValueError):
        render_report(index, ScanConfig(target_dir=project, output_format="xml"))
