"""HTML rendering for the index page and the per-term pages.

Every page is a small, self-contained HTML5 document built from f-strings.
All user-provided text (terms and definitions) is escaped with
:func:`html.escape`, and the term part of each href is percent-encoded.

Cross-linking
-------------
A definition is scanned with :func:`crossgloss.text.tokenizer.iter_tokens`.
Separator runs are copied through. A word is linked when some *other*
glossary term occurs inside it as a substring; ``"cats"`` links to ``cat``.

When several terms occur inside the same word, :func:`match_term` picks the
longest one and breaks ties by lexicographic order, so the result never
depends on set iteration order. For terms ``{"cat", "catalog"}`` the word
``"catalogue"`` links to ``catalog``.

Link targets are ``<destination_label>/<term>.html``; the label is whatever
prefix the caller wants in the hrefs (the output directory by default).
"""

from __future__ import annotations

import html
from collections.abc import Iterable, Sequence
from urllib.parse import quote

from crossgloss.core.contracts.entry import GlossaryEntry
from crossgloss.text.tokenizer import SEPARATORS, is_separator_token, iter_tokens

INDEX_PAGE = "index.html"
GLOSSARY_HEADING = "Glossary"
INDEX_TITLE = "Index"
TERM_HEADING_STYLE = "color:red;font-style:italic"


def _escape(text: str) -> str:
    return html.escape(text, quote=True)


def _href(destination_label: str, filename: str) -> str:
    """Join the label and a file name into an attribute-safe href."""
    prefix = destination_label.rstrip("/")
    target = f"{prefix}/{filename}" if destination_label else filename
    return _escape(target)


def term_href(destination_label: str, term: str) -> str:
    """Return the escaped href of the page for `term`."""
    return _href(destination_label, f"{quote(term, safe='')}.html")


def index_href(destination_label: str) -> str:
    """Return the escaped href of the index page."""
    return _href(destination_label, INDEX_PAGE)


def _document(title: str, body: Sequence[str]) -> str:
    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8" />',
        f"<title>{_escape(title)}</title>",
        "</head>",
        "<body>",
        *body,
        "</body>",
        "</html>",
    ]
    return "\n".join(lines) + "\n"


def match_term(word: str, terms: Iterable[str], exclude: str | None = None) -> str | None:
    """Return the term to link `word` to, or None.

    Candidates are the terms (other than `exclude`) that occur in `word` as a
    substring. The longest candidate wins; equal lengths resolve to the
    lexicographically smallest term.
    """
    best: str | None = None
    for term in terms:
        if term == exclude or term not in word:
            continue
        if best is None or (-len(term), term) < (-len(best), best):
            best = term
    return best


def render_definition(
    definition: str,
    destination_label: str,
    terms: Iterable[str],
    *,
    exclude: str | None = None,
) -> str:
    """Render `definition` as escaped HTML with cross-links to other terms.

    Parameters
    ----------
    definition : str
        Raw definition text.
    destination_label : str
        Prefix used for link targets.
    terms : Iterable[str]
        All glossary terms; iterated once per word.
    exclude : str | None
        Term never linked, normally the term whose page is being rendered.

    Returns
    -------
    str
        The definition with every linked word wrapped in ``<a href=...>``.
        Removing the tags and unescaping gives back `definition` unchanged.
    """
    known = tuple(terms)
    out: list[str] = []
    for token in iter_tokens(definition, SEPARATORS):
        if is_separator_token(token, SEPARATORS):
            out.append(_escape(token))
            continue
        target = match_term(token, known, exclude)
        if target is None:
            out.append(_escape(token))
        else:
            out.append(f'<a href="{term_href(destination_label, target)}">{_escape(token)}</a>')
    return "".join(out)


def render_index(ordered_terms: Sequence[GlossaryEntry], destination_label: str) -> str:
    """Render the index page listing `ordered_terms` in the given order."""
    body = [
        f"<h1>{GLOSSARY_HEADING}</h1>",
        "<hr />",
        f"<h2>{INDEX_TITLE}</h2>",
        "<ul>",
    ]
    for entry in ordered_terms:
        href = term_href(destination_label, entry.term)
        body.append(f'<li><a href="{href}">{_escape(entry.term)}</a></li>')
    body.append("</ul>")
    return _document(INDEX_TITLE, body)


def render_term_page(
    entry: GlossaryEntry,
    destination_label: str,
    terms: Iterable[str],
) -> str:
    """Render the page for one glossary entry.

    The page shows the term as a red italic heading, the cross-linked
    definition, a horizontal rule, and a link back to the index.
    """
    definition = render_definition(
        entry.definition, destination_label, terms, exclude=entry.term
    )
    body = [
        f'<h1 style="{TERM_HEADING_STYLE}">{_escape(entry.term)}</h1>',
        f"<p>{definition}</p>",
        "<hr />",
        f'<p>Return to <a href="{index_href(destination_label)}">index</a></p>',
    ]
    return _document(entry.term, body)


__all__ = [
    "INDEX_PAGE",
    "match_term",
    "render_definition",
    "render_index",
    "render_term_page",
    "term_href",
    "index_href",
]
