"""
nits/name_synopsis.py — porównanie sekcji NAME z deklaracjami w SYNOPSIS.

Kroki:
  1. nazwy z NAME (manpage.name_tokens)
  2. nazwa pliku strony musi być wśród nazw
  3. nazwy, które są jednocześnie innymi stronami w katalogu → jedna notka
  4. symbol z SYNOPSIS bez wpisu w NAME  / nazwa z NAME bez deklaracji
     (nazwy z kroku 3 nie są zgłaszane jako brakujące w SYNOPSIS)
"""

from __future__ import annotations

import re

from manpage import Page, name_tokens

from .context import CheckContext
from .synopsis import comma_spacing, scan_lines
from .types import Diagnostic, DiagnosticCode

# Sekcje 1, 5 i 7 opisują komendy, formaty i przeglądy — bez prototypów.
_NO_PROTOTYPES_RE = re.compile(r"man[157]/")


def applies_to(page: Page) -> bool:
    """Czy strona podlega porównaniu NAME ↔ SYNOPSIS."""
    if page.is_generic:
        return False
    return _NO_PROTOTYPES_RE.search(page.path.as_posix()) is None


class NameSynopsisChecker:
    """
    Porównuje nazwy z NAME z symbolami zadeklarowanymi w SYNOPSIS.

    Użycie:
        checker     = NameSynopsisChecker(ctx)
        diagnostics = checker.check(page)
    """

    def __init__(self, ctx: CheckContext) -> None:
        self._ctx = ctx

    def check(self, page: Page) -> list[Diagnostic]:
        if not applies_to(page):
            return []

        name_text = page.name_span()
        if name_text is None:
            return []

        out: list[Diagnostic] = []
        loc = page.location

        def emit(code: DiagnosticCode, message: str) -> None:
            out.append(Diagnostic(location=loc, code=code, message=message))

        names = name_tokens(name_text)

        # --- nazwa pliku i inne strony ------------------------------------
        stems    = self._ctx.page_stems(page.path.parent)
        siblings = sorted(n for n in names if n != page.stem and n in stems)
        if siblings:
            emit(
                DiagnosticCode.OTHER_POD_FILES,
                "the following exist as other .pod files: " + " ".join(siblings),
            )
        if page.stem not in names:
            emit(
                DiagnosticCode.FILENAME_NOT_IN_NAME,
                f"{page.stem} (filename) missing from NAME section",
            )

        # --- symbole z SYNOPSIS -------------------------------------------
        synopsis_text = page.synopsis_span()
        if synopsis_text is None:
            return out

        declared = set(names)
        matched: set[str] = set()

        # Dla każdej linii: brak w NAME, potem spacje po przecinkach.
        for line, sym in scan_lines(synopsis_text):
            if sym is not None:
                if sym not in declared:
                    emit(DiagnosticCode.MISSING_FROM_NAME, f"{sym} missing from NAME section")
                matched.add(sym)
            comma = comma_spacing(line, loc)
            if comma is not None:
                out.append(comma)

        exempt = set(siblings)
        for n in names:
            if n in matched or n in exempt:
                continue
            emit(DiagnosticCode.MISSING_FROM_SYNOPSIS, f"{n} missing from SYNOPSIS")

        return out
