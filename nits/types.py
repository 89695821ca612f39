"""
nits/types.py — kody diagnostyk, struktury raportu i wyjątki.

Diagnostic — pojedyncze znalezisko: miejsce, kod i komunikat.
CheckReport — diagnostyki jednej strony w kolejności emisji.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class DiagnosticCode(StrEnum):
    """Stałe kody diagnostyk (grupowanie w podsumowaniu i testach)."""

    # NAME ↔ SYNOPSIS
    FILENAME_NOT_IN_NAME     = "N_FILENAME_NOT_IN_NAME"
    OTHER_POD_FILES          = "N_OTHER_POD_FILES"
    MISSING_FROM_NAME        = "N_MISSING_FROM_NAME"
    MISSING_FROM_SYNOPSIS    = "N_MISSING_FROM_SYNOPSIS"
    COMMA_SPACING            = "N_COMMA_SPACING"

    # struktura strony
    NO_POD_START             = "S_NO_POD_START"
    NO_CUT_END               = "S_NO_CUT_END"
    MULTIPLE_CUT             = "S_MULTIPLE_CUT"
    MISSING_COPYRIGHT        = "S_MISSING_COPYRIGHT"
    COPYRIGHT_NOT_LAST       = "S_COPYRIGHT_NOT_LAST"
    HEAD2_UPPERCASE          = "S_HEAD2_UPPERCASE"
    EXTRA_SPACE_AFTER_HEAD   = "S_EXTRA_SPACE_AFTER_HEAD"
    PERIOD_IN_NAME           = "S_PERIOD_IN_NAME"
    MARKUP_IN_NAME           = "S_MARKUP_IN_NAME"
    MULTIPLE_INCLUDES        = "S_MULTIPLE_INCLUDES"

    # tryb ścisły
    MISSING_SECTION          = "X_MISSING_SECTION"
    EXTERNAL_CHECKER         = "X_EXTERNAL_CHECKER"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """
    Pojedyncze znalezisko.

    - location: identyfikator miejsca, np. "doc/man3/SSL_new.pod:1:"
    - code:     stały identyfikator klasy znaleziska (DiagnosticCode)
    - message:  komunikat w formacie wyjścia narzędzia
    """

    location: str
    code: DiagnosticCode
    message: str

    def render(self) -> str:
        # Wyjście zewnętrznego walidatora nie ma własnej lokalizacji.
        if not self.location:
            return self.message
        return f"{self.location} {self.message}"


@dataclass(slots=True)
class CheckReport:
    """Diagnostyki jednej strony (kolejność emisji, bez deduplikacji)."""

    path: str
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def extend(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics.extend(diagnostics)


class ParseError(Exception):
    """Manifestu eksportów nie da się otworzyć lub odczytać."""


class ExternalCheckerError(RuntimeError):
    """Zewnętrzny walidator struktury nie mógł zostać uruchomiony."""
