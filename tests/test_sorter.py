"""Unit tests for alphabetical ordering of glossary entries."""

from __future__ import annotations

from crossgloss.core.contracts.entry import GlossaryEntry
from crossgloss.text.extractor import extract_terms
from crossgloss.text.sorter import sort_terms


def test_sorts_by_term() -> None:
    """Entries come out in ascending term order with definitions attached."""
    glossary = {"dog": "canine", "ant": "insect", "cat": "feline"}
    ordered = sort_terms(glossary)

    assert [e.term for e in ordered] == ["ant", "cat", "dog"]
    assert ordered[1] == GlossaryEntry(term="cat", definition="feline")


def test_code_point_order_not_locale() -> None:
    """Uppercase sorts before lowercase; prefixes sort first."""
    glossary = {"apple": "1", "Zebra": "2", "app": "3", "Äpfel": "4"}
    assert [e.term for e in sort_terms(glossary)] == ["Zebra", "app", "apple", "Äpfel"]


def test_input_mapping_is_untouched() -> None:
    """Sorting builds a new list and leaves the glossary as it was."""
    glossary = {"b": "2", "a": "1"}
    ordered = sort_terms(glossary)
    assert glossary == {"b": "2", "a": "1"}
    assert isinstance(ordered, list)


def test_empty_and_single() -> None:
    """Degenerate sizes need no special handling."""
    assert sort_terms({}) == []
    assert [e.term for e in sort_terms({"only": "one"})] == ["only"]


def test_extract_then_sort_is_strictly_increasing() -> None:
    """Extraction plus sorting yields unique, strictly increasing terms."""
    lines = [
        "pear", "fruit", "",
        "Apple", "company", "",
        "apple", "fruit", "",
        "pear", "again", "",
        "banana", "yellow",
    ]
    ordered = sort_terms(extract_terms(lines))
    terms = [e.term for e in ordered]

    assert terms == ["Apple", "apple", "banana", "pear"]
    assert all(a < b for a, b in zip(terms, terms[1:], strict=False))
    assert {e.term: e.definition for e in ordered}["pear"] == "again"
