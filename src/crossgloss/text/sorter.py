"""Alphabetical ordering of glossary entries.

Ordering is plain code-point comparison of the term strings (``str.__lt__``),
not locale-aware collation, so uppercase letters sort before lowercase ones.
"""

from __future__ import annotations

from crossgloss.core.contracts.entry import Glossary, GlossaryEntry


def sort_terms(glossary: Glossary) -> list[GlossaryEntry]:
    """Return every entry of `glossary` as a new list sorted by term.

    The input mapping is left untouched and its iteration order is irrelevant.
    Terms are unique keys, so the result is strictly increasing.
    """
    return [
        GlossaryEntry(term=term, definition=definition)
        for term, definition in sorted(glossary.items(), key=lambda item: item[0])
    ]


__all__ = ["sort_terms"]
