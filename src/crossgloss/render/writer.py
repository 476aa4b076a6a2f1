"""Disk writer for rendered glossary pages.

Pages are written into one flat destination directory:

- Index:      ``index.html``
- Term page:  ``<term>.html``, the term used verbatim as the file stem

Because file names come straight from the glossary, terms are checked before
anything is written; a term that is not a safe, portable file stem raises
:class:`InvalidTermNameError` instead of being silently rewritten.

Usage
-----
>>> writer = PageWriter(Path("site"))
>>> path = writer.write(page_filename("cat"), "<html>...</html>")
"""

from __future__ import annotations

import os
from pathlib import Path

from crossgloss.core.errors import (
    InvalidTermNameError,
    OutputDirectoryInvalidError,
    WriteFailureError,
)
from crossgloss.render.pages import INDEX_PAGE

_FORBIDDEN_CHARS = frozenset('/\\:*?"<>|')
_RESERVED_STEMS = frozenset({".", "..", Path(INDEX_PAGE).stem})


def page_filename(term: str) -> str:
    """Return the file name of the page for `term`.

    Raises
    ------
    InvalidTermNameError
        If the term contains path separators, characters rejected by common
        filesystems, control characters, is blank, or collides with the index
        in any letter case.
    """
    if not term.strip():
        raise InvalidTermNameError(term, "blank term")
    bad = sorted({c for c in term if c in _FORBIDDEN_CHARS})
    if bad:
        raise InvalidTermNameError(term, f"contains {' '.join(bad)}")
    if any(ord(c) < 32 or ord(c) == 127 for c in term):
        raise InvalidTermNameError(term, "contains control characters")
    if term.casefold() in _RESERVED_STEMS:
        raise InvalidTermNameError(term, "reserved name")
    return f"{term}.html"


def ensure_output_dir(path: str | Path) -> Path:
    """Return `path` if it is an existing, writable directory.

    Raises
    ------
    OutputDirectoryInvalidError
        If the path is missing, not a directory, or not writable.
    """
    p = Path(path).expanduser()
    if not p.exists():
        raise OutputDirectoryInvalidError(p, "does not exist")
    if not p.is_dir():
        raise OutputDirectoryInvalidError(p, "not a directory")
    if not os.access(p, os.W_OK | os.X_OK):
        raise OutputDirectoryInvalidError(p, "not writable")
    return p


class PageWriter:
    """Write rendered HTML pages into a destination directory."""

    def __init__(self, base_dir: Path, encoding: str = "utf-8") -> None:
        self.base_dir: Path = base_dir
        self.encoding = encoding

    def write(self, filename: str, content: str) -> Path:
        """Write `content` to ``base_dir / filename`` and return the path.

        Existing files are overwritten. Line endings are written as ``\\n`` on
        every platform so repeated runs produce identical bytes.
        """
        path = self.base_dir / filename
        try:
            with path.open("w", encoding=self.encoding, newline="\n") as f:
                f.write(content)
        except (OSError, UnicodeError, LookupError) as exc:
            reason = getattr(exc, "strerror", None) or str(exc)
            raise WriteFailureError(path, reason) from exc
        return path


__all__ = ["PageWriter", "page_filename", "ensure_output_dir"]
