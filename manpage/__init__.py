"""
manpage — model strony podręcznika POD.

Użycie:
  from manpage import Page, load_page

Moduły:
  page — Page (ścieżka + surowy tekst, sekcje wyliczane na żądanie),
         load_page, name_tokens
"""

from .page import (
    DEFAULT_MANUAL_SECTION,
    GENERIC_MARKER,
    MULTIPLE_INCLUDES_MARKER,
    POD_SUFFIX,
    Page,
    load_page,
    name_tokens,
)

__all__ = [
    "DEFAULT_MANUAL_SECTION",
    "GENERIC_MARKER",
    "MULTIPLE_INCLUDES_MARKER",
    "POD_SUFFIX",
    "Page",
    "load_page",
    "name_tokens",
]
