"""Run every example script and compare stdout with its inline ``# =>`` markers.

Each ``print(...)`` call in an example must carry ``# => <expected line>`` on
the line that closes the call.
"""

from __future__ import annotations

import ast
import difflib
import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
EXAMPLES_ROOT = REPO_ROOT / "examples"
SRC_ROOT = REPO_ROOT / "src"

_MARKER = "# =>"


def _example_paths() -> list[Path]:
    return sorted(EXAMPLES_ROOT.glob("ex_*/01_*.py"))


def _print_calls(module: ast.Module) -> list[ast.Call]:
    calls = [
        node
        for node in ast.walk(module)
        if isinstance(node, ast.Call)
        and isinstance(node.func, ast.Name)
        and node.func.id == "print"
    ]
    return sorted(calls, key=lambda node: (node.lineno, node.col_offset))


def _expected_lines(path: Path) -> list[str]:
    source = path.read_text(encoding="utf-8")
    source_lines = source.splitlines()

    expected: list[str] = []
    for call in _print_calls(ast.parse(source, filename=str(path))):
        closing_lineno = call.end_lineno or call.lineno
        closing_line = source_lines[closing_lineno - 1]
        if _MARKER not in closing_line:
            msg = f"{path}:{closing_lineno}: print() must end with '{_MARKER} <expected output>'."
            raise AssertionError(msg)
        expected.append(closing_line.split(_MARKER, maxsplit=1)[1].strip())
    return expected


def _run_example(path: Path) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(
        part for part in (str(SRC_ROOT), env.get("PYTHONPATH")) if part
    )
    return subprocess.run(  # noqa: S603
        [sys.executable, str(path)],
        cwd=path.parent,
        env=env,
        capture_output=True,
        text=True,
        check=False,
    )


def _mismatch_report(path: Path, expected: list[str], completed: subprocess.CompletedProcess[str]) -> str:
    actual = completed.stdout.splitlines()
    diff = "\n".join(
        difflib.unified_diff(expected, actual, fromfile="expected", tofile="actual", lineterm=""),
    )
    return (
        f"Example {path} did not produce its expected output\n"
        f"returncode={completed.returncode}\n"
        f"stderr:\n{completed.stderr or '<empty>'}\n"
        f"diff:\n{diff or '<no diff>'}"
    )


def test_examples_are_discovered() -> None:
    assert _example_paths(), f"no examples found under {EXAMPLES_ROOT}"


def test_unmarked_print_is_reported_at_its_line(tmp_path: Path) -> None:
    script = tmp_path / "01_unmarked.py"
    script.write_text('print("a")  # => a\nprint(\n    "b",\n)\n', encoding="utf-8")

    with pytest.raises(AssertionError, match=r"01_unmarked\.py:4: print\(\) must end with"):
        _expected_lines(script)


def test_marker_on_closing_line_of_multiline_print(tmp_path: Path) -> None:
    script = tmp_path / "01_multiline.py"
    script.write_text('print(\n    "b",\n)  # => b\n', encoding="utf-8")

    assert _expected_lines(script) == ["b"]


@pytest.mark.parametrize(
    "path",
    _example_paths(),
    ids=lambda path: str(path.relative_to(REPO_ROOT)),
)
def test_example_stdout_matches_inline_expectations(path: Path) -> None:
    expected = _expected_lines(path)
    assert expected, f"{path}: no print() calls with '{_MARKER}' expectations found"

    completed = _run_example(path)

    ok = (
        completed.returncode == 0
        and completed.stderr == ""
        and completed.stdout.splitlines() == expected
    )
    assert ok, _mismatch_report(path, expected, completed)
