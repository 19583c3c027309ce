"""Tests for the resolve, validate and schema CLI commands."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run(
    *args: str, stdin: str | None = None, env: dict[str, str] | None = None
) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        input=stdin,
        env={**os.environ, **(env or {})},
        timeout=60,
    )


@pytest.mark.integration
def test_resolve_prints_json(layout_file):
    """resolve prints every block as JSON."""
    result = _run("resolve", str(layout_file))
    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert set(data) == {
        "root",
        "title",
        "chart",
        "legend",
        "left",
        "center-wrapper",
        "right",
        "center",
    }
    assert data["center"]["left"] == 140
    assert data["center"]["height"] == 240


@pytest.mark.integration
def test_resolve_reads_stdin(layout_file):
    result = _run("resolve", "-", stdin=layout_file.read_text())
    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout)["legend"]["top"] == 330


@pytest.mark.integration
def test_resolve_tree_format(layout_file):
    result = _run("resolve", str(layout_file), "--format", "tree")
    assert result.returncode == 0, result.stderr
    assert result.stdout.splitlines()[0] == "root [column] 500x500 @ (0, 0)"


@pytest.mark.integration
def test_resolve_unknown_configured_format_falls_back(layout_file):
    """An unknown BOXLAYOUT_OUTPUT_FORMAT warns and prints JSON."""
    result = _run(
        "resolve", str(layout_file), env={"BOXLAYOUT_OUTPUT_FORMAT": "xml"}
    )
    assert result.returncode == 0, result.stderr
    assert "Unknown BOXLAYOUT_OUTPUT_FORMAT 'xml'" in result.stderr
    assert json.loads(result.stdout)["root"]["height"] == 500


@pytest.mark.integration
def test_resolve_configured_tree_format(layout_file):
    result = _run(
        "resolve", str(layout_file), env={"BOXLAYOUT_OUTPUT_FORMAT": "tree"}
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.startswith("root [column]")


@pytest.mark.integration
def test_resolve_writes_output_file(layout_file, tmp_path):
    output = tmp_path / "out.json"
    result = _run("resolve", str(layout_file), "-o", str(output), "--indent", "0")
    assert result.returncode == 0, result.stderr
    assert json.loads(output.read_text())["root"]["width"] == 500


@pytest.mark.integration
def test_resolve_overflow_fails(tmp_path):
    """Overflow is reported on stderr with a non-zero exit code."""
    path = tmp_path / "overflow.json"
    path.write_text(
        json.dumps(
            {
                "id": "root",
                "direction": "column",
                "width": 500,
                "height": 500,
                "children": [
                    {"id": "content-1", "height": 500},
                    {"id": "content-2", "height": 1},
                ],
            }
        )
    )
    result = _run("resolve", str(path))
    assert result.returncode == 1
    assert "Block heights are overflowing! 500+1 > 500" in result.stderr


@pytest.mark.integration
def test_resolve_strict_duplicate_ids(tmp_path):
    path = tmp_path / "dupes.json"
    path.write_text(
        json.dumps(
            {
                "id": "root",
                "direction": "row",
                "width": 100,
                "height": 100,
                "children": [{"id": "a"}, {"id": "a"}],
            }
        )
    )
    assert _run("resolve", str(path), "--no-strict").returncode == 0
    result = _run("resolve", str(path), "--strict")
    assert result.returncode == 1
    assert "Duplicate node IDs: 'a'" in result.stderr


@pytest.mark.integration
def test_resolve_missing_file(tmp_path):
    result = _run("resolve", str(tmp_path / "missing.json"))
    assert result.returncode == 1


@pytest.mark.integration
def test_validate_reports_issues(tmp_path):
    path = tmp_path / "invalid.json"
    path.write_text(
        json.dumps(
            {
                "id": "root",
                "width": 100,
                "height": 100,
                "children": [{"id": "a", "width": "50"}],
            }
        )
    )
    result = _run("validate", str(path))
    assert result.returncode == 1
    assert "[missing_direction]" in result.stdout
    assert "[invalid_dimension]" in result.stdout


@pytest.mark.integration
def test_validate_valid_layout(layout_file):
    result = _run("validate", str(layout_file))
    assert result.returncode == 0
    assert "Layout 'root' is valid" in result.stdout


@pytest.mark.integration
def test_schema_command():
    result = _run("schema")
    assert result.returncode == 0
    assert json.loads(result.stdout)["title"] == "LayoutNodeRoot"


@pytest.mark.integration
def test_unknown_command():
    result = _run("frobnicate")
    assert result.returncode == 1
    assert "Usage: python . {command} [args]" in result.stdout
