"""Term extractor: parse a stanza-formatted text file into a glossary.

Input format
------------
Each stanza is one term line, followed by one or more definition lines, and
terminated by a blank line or the end of input::

    cat
    A small domesticated feline.

    dog
    A loyal canine,
    often seen with a cat.

Definition lines are joined with single spaces. Blank lines where a term is
expected are skipped, so extra spacing between stanzas is harmless. A term
whose stanza ends before any definition line is a data error.

API
---
- `extract_terms(lines)`          : pure parsing over an iterable of lines.
- `read_lines(path, encoding)`    : scoped read of the input file.
- `load_glossary(path, encoding)` : both of the above.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from crossgloss.core.contracts.entry import Glossary
from crossgloss.core.errors import (
    InputNotFoundError,
    InputUnreadableError,
    MalformedStanzaError,
)
from crossgloss.core.settings import get_logger

logger = get_logger(__name__)


def _strip_eol(line: str) -> str:
    """Drop a trailing line terminator, if any (file objects keep them)."""
    return line.rstrip("\r\n")


def extract_terms(lines: Iterable[str]) -> Glossary:
    """Build a term -> definition mapping from stanza-formatted lines.

    Parameters
    ----------
    lines : Iterable[str]
        Lines of the input, with or without trailing newlines.

    Returns
    -------
    Glossary
        Mapping of every term to its definition. A repeated term keeps the
        last definition seen.

    Raises
    ------
    MalformedStanzaError
        If a term line is followed by a blank line or by the end of input.
    """
    glossary: Glossary = {}
    term: str | None = None
    term_line = 0
    parts: list[str] = []

    def _commit(term: str, line_no: int) -> None:
        if term in glossary:
            logger.warning(
                "Duplicate term %r on line %d replaces earlier definition", term, line_no
            )
        glossary[term] = " ".join(parts)

    for line_no, raw in enumerate(lines, start=1):
        line = _strip_eol(raw)
        if term is None:
            if line == "":
                continue
            term, term_line, parts = line, line_no, []
        elif line != "":
            parts.append(line)
        elif not parts:
            raise MalformedStanzaError(term, term_line)
        else:
            _commit(term, term_line)
            term = None

    if term is not None:
        if not parts:
            raise MalformedStanzaError(term, term_line)
        _commit(term, term_line)

    logger.debug("Extracted %d terms", len(glossary))
    return glossary


def read_lines(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read `path` and return its lines without line terminators.

    Raises
    ------
    InputNotFoundError
        If the path does not exist or is not a regular file.
    InputUnreadableError
        If the file cannot be opened or decoded with `encoding`.
    """
    p = Path(path).expanduser()
    if not p.is_file():
        raise InputNotFoundError(p)
    try:
        with p.open("r", encoding=encoding) as f:
            # Universal newlines: only \n, \r and \r\n end a line.
            return [_strip_eol(line) for line in f]
    except UnicodeDecodeError as exc:
        raise InputUnreadableError(p, f"not valid {encoding} text ({exc.reason})") from exc
    except LookupError as exc:
        raise InputUnreadableError(p, f"unknown encoding {encoding!r}") from exc
    except OSError as exc:
        raise InputUnreadableError(p, exc.strerror or str(exc)) from exc


def load_glossary(path: str | Path, encoding: str = "utf-8") -> Glossary:
    """Read and parse the glossary file at `path`."""
    return extract_terms(read_lines(path, encoding))


__all__ = ["extract_terms", "read_lines", "load_glossary"]
