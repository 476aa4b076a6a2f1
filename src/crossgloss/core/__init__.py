"""Core package initializer for crossgloss.

Holds the shared plumbing used by every stage:
    from crossgloss.core.settings import load_settings, Settings, get_logger
    from crossgloss.core.errors import GlossaryError
"""

from __future__ import annotations

__all__ = ["__doc__"]
