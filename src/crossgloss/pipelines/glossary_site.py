"""
Glossary site pipeline: from a stanza text file to cross-linked HTML pages.

Flow Overview
-------------
1. **Validate** the input file and the destination directory. Nothing is
   written if either check fails.
2. **Extract** the glossary once and derive the term set.
3. **Sort** the entries alphabetically and check that every term can be
   used as a page file name.
4. **Render & write** ``index.html`` followed by one ``<term>.html`` per entry.

Failures raise a :class:`~crossgloss.core.errors.GlossaryError` subclass and
stop the run at the first error. Pages written before a
:class:`~crossgloss.core.errors.WriteFailureError` stay on disk.

Re-running with the same arguments rewrites the same files with the same
bytes. Pages from older runs whose terms have since been removed are left in
place.
"""

from __future__ import annotations

from pathlib import Path
from typing import TypedDict

from crossgloss.core.contracts.entry import GlossaryEntry, TermSet, term_set
from crossgloss.core.settings import get_logger, load_settings
from crossgloss.render.pages import INDEX_PAGE, render_index, render_term_page
from crossgloss.render.writer import PageWriter, ensure_output_dir, page_filename
from crossgloss.text.extractor import load_glossary
from crossgloss.text.sorter import sort_terms

logger = get_logger(__name__)


class GlossaryPlan(TypedDict):
    """Parsed, sorted and validated glossary, ready to be rendered."""

    entries: list[GlossaryEntry]
    terms: TermSet


class GenerationReport(TypedDict):
    """Structured payload returned by :func:`generate`.

    Attributes
    ----------
    output_dir:
        Destination directory the pages were written to.
    index_path:
        Path of the written ``index.html``.
    page_paths:
        Paths of the term pages, in alphabetical order of their terms.
    term_count:
        Number of glossary entries.
    """

    output_dir: Path
    index_path: Path
    page_paths: list[Path]
    term_count: int


def plan_glossary(input_path: str | Path, *, encoding: str | None = None) -> GlossaryPlan:
    """Read, sort and validate the glossary at `input_path` without writing.

    Raises
    ------
    InputNotFoundError, InputUnreadableError
        If the input file cannot be read.
    MalformedStanzaError
        If a stanza has no definition.
    InvalidTermNameError
        If a term cannot be used as a page file name.

    Terms that differ only by case are accepted but logged, since their pages
    overwrite each other on case-insensitive filesystems.
    """
    enc = encoding or load_settings().encoding
    glossary = load_glossary(input_path, enc)
    terms = term_set(glossary)
    entries = sort_terms(glossary)
    seen: dict[str, str] = {}
    for entry in entries:
        page_filename(entry.term)
        folded = entry.term.casefold()
        if folded in seen:
            logger.warning(
                "Terms %r and %r differ only by case; their pages collide on "
                "case-insensitive filesystems",
                seen[folded],
                entry.term,
            )
        else:
            seen[folded] = entry.term
    logger.info("Loaded %d terms from %s", len(entries), input_path)
    return {"entries": entries, "terms": terms}


def generate(
    input_path: str | Path,
    output_dir: str | Path,
    *,
    link_base: str | None = None,
    encoding: str | None = None,
) -> GenerationReport:
    """Generate the index page and one page per term.

    Parameters
    ----------
    input_path:
        Stanza-formatted glossary file.
    output_dir:
        Existing, writable directory that receives the pages.
    link_base:
        Prefix used in every href. Falls back to ``CROSSGLOSS_LINK_BASE`` and
        then to `output_dir` exactly as passed in.
    encoding:
        Encoding of the input glossary; defaults to the configured
        ``CROSSGLOSS_ENCODING``. Pages are always written as UTF-8, matching
        their ``<meta charset>``.

    Returns
    -------
    GenerationReport
        Where the pages went and how many were written.
    """
    cfg = load_settings()
    enc = encoding or cfg.encoding

    # Validate both ends before any page is written.
    destination = ensure_output_dir(output_dir)
    plan = plan_glossary(input_path, encoding=enc)

    if link_base is not None:
        label = link_base
    elif cfg.link_base is not None:
        label = cfg.link_base
    else:
        label = str(output_dir)

    writer = PageWriter(destination)
    index_path = writer.write(INDEX_PAGE, render_index(plan["entries"], label))
    logger.debug("Wrote %s", index_path)

    page_paths: list[Path] = []
    for entry in plan["entries"]:
        page = render_term_page(entry, label, plan["terms"])
        path = writer.write(page_filename(entry.term), page)
        logger.debug("Wrote %s", path)
        page_paths.append(path)

    logger.info("Wrote index and %d term pages to %s", len(page_paths), destination)
    return {
        "output_dir": destination,
        "index_path": index_path,
        "page_paths": page_paths,
        "term_count": len(plan["entries"]),
    }


__all__ = ["generate", "plan_glossary", "GenerationReport", "GlossaryPlan"]
