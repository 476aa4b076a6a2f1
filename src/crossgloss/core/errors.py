"""Exception hierarchy for glossary generation.

Every failure that can stop a run derives from :class:`GlossaryError`, so the
CLI can catch one type and print a readable message. Each concrete error also
derives from the closest built-in exception, which keeps ``except OSError``
or ``except ValueError`` at call sites working as expected.

Kinds
-----
InputNotFoundError
    Input path is missing or is not a regular file.
InputUnreadableError
    Input exists but cannot be opened or decoded.
OutputDirectoryInvalidError
    Destination does not exist, is not a directory, or is not writable.
MalformedStanzaError
    A term line has no definition line after it.
InvalidTermNameError
    A term cannot be used verbatim as an output file name.
WriteFailureError
    An output page could not be written.
"""

from __future__ import annotations

from pathlib import Path


class GlossaryError(Exception):
    """Base class for all fatal glossary generation errors."""


class InputNotFoundError(GlossaryError, FileNotFoundError):
    """The input glossary file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Input file does not exist: {path}")


class InputUnreadableError(GlossaryError, OSError):
    """The input glossary file exists but cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read input file {path}: {reason}")


class OutputDirectoryInvalidError(GlossaryError, NotADirectoryError):
    """The destination is not an existing, writable directory."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid output directory {path}: {reason}")


class MalformedStanzaError(GlossaryError, ValueError):
    """A stanza ended before its definition line."""

    def __init__(self, term: str, line_no: int) -> None:
        self.term = term
        self.line_no = line_no
        super().__init__(f"Term {term!r} on line {line_no} has no definition")


class InvalidTermNameError(GlossaryError, ValueError):
    """A term cannot be turned into a page file name."""

    def __init__(self, term: str, reason: str) -> None:
        self.term = term
        self.reason = reason
        super().__init__(f"Term {term!r} cannot be used as a file name: {reason}")


class WriteFailureError(GlossaryError, OSError):
    """An output page could not be created or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")


__all__ = [
    "GlossaryError",
    "InputNotFoundError",
    "InputUnreadableError",
    "OutputDirectoryInvalidError",
    "MalformedStanzaError",
    "InvalidTermNameError",
    "WriteFailureError",
]
