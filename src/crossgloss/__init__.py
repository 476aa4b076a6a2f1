"""crossgloss: turn a plain-text glossary into cross-linked HTML pages.

The package is organised leaves-first:

- :mod:`crossgloss.text`      : tokenizer, term extractor, alphabetical sorter.
- :mod:`crossgloss.render`    : HTML rendering and page writing.
- :mod:`crossgloss.pipelines` : the ``generate`` orchestrator.
- :mod:`crossgloss.cli`       : the Typer command line interface.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
