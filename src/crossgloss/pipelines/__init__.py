"""Pipeline entry points for crossgloss.

Currently exposed:

- :func:`generate`: glossary file to cross-linked HTML pages,
  implemented in ``glossary_site.py``.
- :func:`plan_glossary`: the read/sort/validate half of ``generate``,
  used by ``crossgloss check``.
"""

from __future__ import annotations

from .glossary_site import GenerationReport, GlossaryPlan, generate, plan_glossary

__all__ = ["generate", "plan_glossary", "GenerationReport", "GlossaryPlan"]
