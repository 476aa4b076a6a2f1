# tests/test_cli.py
"""
Tests for the crossgloss command-line interface (CLI).

Scope
-----
These tests verify the interaction layer provided by Typer:
1.  **Command Registration**: `generate`, `check` and `--help` work.
2.  **Prompts**: Missing paths are asked for interactively.
3.  **Pipeline Integration**: Arguments reach `generate` unchanged.
4.  **Error Handling**: Glossary errors exit with code 1 and a readable message.

We use `typer.testing.CliRunner` to invoke the app in-process.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from crossgloss.cli import app
from crossgloss.core.errors import WriteFailureError

SAMPLE = "cat\nA small domesticated feline.\n\ndog\nA loyal canine, often seen with a cat.\n"


@pytest.fixture  # type: ignore[misc]
def runner() -> CliRunner:
    """Create a fresh CliRunner for each test."""
    return CliRunner()


@pytest.fixture  # type: ignore[misc]
def glossary_file(tmp_path: Path) -> Path:
    """Write the two-term sample glossary."""
    src = tmp_path / "glossary.txt"
    src.write_text(SAMPLE, encoding="utf-8")
    return src


def test_cli_help_shows_usage(runner: CliRunner) -> None:
    """Invoking --help should print usage instructions and exit 0."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0, f"Help failed: {result.output}"
    assert "generate" in result.output
    assert "check" in result.output


def test_generate_happy_path(runner: CliRunner, glossary_file: Path, tmp_path: Path) -> None:
    """A full run writes the pages and confirms completion."""
    out = tmp_path / "site"
    out.mkdir()

    result = runner.invoke(app, ["generate", str(glossary_file), str(out)])

    assert result.exit_code == 0, f"CLI Failed with Output:\n{result.output}"
    assert "Complete!" in result.output
    assert "stored in the specified destination" in result.output
    assert sorted(p.name for p in out.iterdir()) == ["cat.html", "dog.html", "index.html"]


def test_generate_passes_link_base(runner: CliRunner, glossary_file: Path, tmp_path: Path) -> None:
    """`--link-base` is forwarded to the pipeline."""
    out = tmp_path / "site"
    out.mkdir()

    result = runner.invoke(app, ["generate", str(glossary_file), str(out), "--link-base", "."])

    assert result.exit_code == 0, result.output
    dog = (out / "dog.html").read_text(encoding="utf-8")
    assert '<a href="./cat.html">cat</a>' in dog


def test_generate_report_shows_bracketed_paths_verbatim(
    runner: CliRunner, glossary_file: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Square brackets in the destination are printed, not parsed as markup."""
    monkeypatch.chdir(tmp_path)
    out = Path("site [draft]")
    out.mkdir()

    result = runner.invoke(app, ["generate", str(glossary_file), str(out)])

    assert result.exit_code == 0, result.output
    assert "site [draft]/index.html" in result.output
    assert "Term pages: 2" in result.output


def test_generate_prompts_for_missing_paths(
    runner: CliRunner, glossary_file: Path, tmp_path: Path
) -> None:
    """Without arguments, both paths are read from the prompt."""
    out = tmp_path / "site"
    out.mkdir()

    result = runner.invoke(app, ["generate"], input=f"{glossary_file}\n{out}\n")

    assert result.exit_code == 0, result.output
    assert "Enter an input file" in result.output
    assert "Enter a destination folder" in result.output
    assert (out / "index.html").exists()


def test_generate_missing_input(runner: CliRunner, tmp_path: Path) -> None:
    """A missing input file is reported and exits with code 1."""
    result = runner.invoke(app, ["generate", str(tmp_path / "ghost.txt"), str(tmp_path)])

    assert result.exit_code == 1, result.output
    assert "Generation Error" in result.output
    assert "does not exist" in result.output


def test_generate_invalid_destination(
    runner: CliRunner, glossary_file: Path, tmp_path: Path
) -> None:
    """A destination that is not a directory is reported and exits with code 1."""
    result = runner.invoke(app, ["generate", str(glossary_file), str(glossary_file)])

    assert result.exit_code == 1, result.output
    assert "not a directory" in result.output


def test_generate_handles_write_failure(
    runner: CliRunner, glossary_file: Path, tmp_path: Path
) -> None:
    """Errors raised by the pipeline are caught and displayed."""
    with patch("crossgloss.cli.run_generate") as mock_run:
        mock_run.side_effect = WriteFailureError(tmp_path / "cat.html", "disk full")

        result = runner.invoke(app, ["generate", str(glossary_file), str(tmp_path)])

        assert result.exit_code == 1, result.output
        assert "disk full" in result.output
        mock_run.assert_called_once()
        args, kwargs = mock_run.call_args
        assert args == (glossary_file, tmp_path)
        assert kwargs == {"link_base": None}


def test_check_lists_terms(runner: CliRunner, glossary_file: Path) -> None:
    """`check` prints the sorted terms and writes nothing."""
    result = runner.invoke(app, ["check", str(glossary_file)])

    assert result.exit_code == 0, result.output
    assert "Glossary is valid" in result.output
    assert result.output.index("cat.html") < result.output.index("dog.html")
    assert sorted(p.name for p in glossary_file.parent.iterdir()) == ["glossary.txt"]


def test_check_reports_malformed_stanza(runner: CliRunner, tmp_path: Path) -> None:
    """A malformed glossary makes `check` exit with code 1."""
    src = tmp_path / "bad.txt"
    src.write_text("cat\nfeline\n\ndog\n", encoding="utf-8")

    result = runner.invoke(app, ["check", str(src)])

    assert result.exit_code == 1, result.output
    assert "Invalid Glossary" in result.output
    assert "dog" in result.output
