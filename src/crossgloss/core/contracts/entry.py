"""Glossary data contracts.

- `GlossaryEntry` : one (term, definition) pair, immutable once built.
- `Glossary`      : the term -> definition mapping produced by the extractor.
- `TermSet`       : all known terms, used for cross-link lookups.

Terms are case-sensitive and kept exactly as written in the source file.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

Glossary = dict[str, str]
TermSet = frozenset[str]


class GlossaryEntry(BaseModel):
    """A single glossary headword with its (single-line) definition."""

    model_config = ConfigDict(frozen=True)

    term: str = Field(min_length=1, description="Headword, case-sensitive")
    definition: str = Field(min_length=1, description="Definition text, lines space-joined")


def term_set(glossary: Glossary) -> TermSet:
    """Return the read-only set of terms defined in `glossary`."""
    return frozenset(glossary)


__all__ = ["Glossary", "GlossaryEntry", "TermSet", "term_set"]
