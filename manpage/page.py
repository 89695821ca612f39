"""
manpage/page.py — model jednej strony podręcznika POD.

Page trzyma ścieżkę i surowy tekst strony. Sekcje (=head1 NAME, SYNOPSIS,
DESCRIPTION, COPYRIGHT …) nie są przechowywane osobno — są wyliczane
na żądanie z raw_text.

Kluczowe funkcje publiczne:
  load_page(path) -> Page
  name_tokens(text) -> list[str]
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

# ---------------------------------------------------------------------------
# Stałe
# ---------------------------------------------------------------------------

POD_SUFFIX = ".pod"

# Numer sekcji podręcznika, gdy katalog nie zawiera wskazówki "manN".
DEFAULT_MANUAL_SECTION = 3

# Znaczniki osadzone w stronie jako komentarze POD.
GENERIC_MARKER            = "=for comment generic"
MULTIPLE_INCLUDES_MARKER  = "=for comment multiple includes"

_HEAD1_RE       = re.compile(r"^=head1\s+(.*?)\s*$", re.MULTILINE)
_MAN_SECTION_RE = re.compile(r"man([1-9])")


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Page:
    """
    Jedna strona podręcznika.

    - path:     ścieżka pliku (tożsamość strony)
    - raw_text: pełna treść pliku
    """

    path: Path
    raw_text: str

    @property
    def stem(self) -> str:
        """Nazwa pliku bez rozszerzenia .pod, np. "SSL_new"."""
        return self.path.name.removesuffix(POD_SUFFIX)

    @property
    def location(self) -> str:
        # Zawsze linia 1 — format oczekiwany przez narzędzia czytające wyjście.
        return f"{self.path}:1:"

    @cached_property
    def manual_section(self) -> int:
        m = _MAN_SECTION_RE.search(self.path.parent.name)
        return int(m.group(1)) if m else DEFAULT_MANUAL_SECTION

    @property
    def is_generic(self) -> bool:
        return GENERIC_MARKER in self.raw_text

    @property
    def allows_multiple_includes(self) -> bool:
        return MULTIPLE_INCLUDES_MARKER in self.raw_text

    # ------------------------------------------------------------------
    # Sekcje
    # ------------------------------------------------------------------

    def headings(self) -> list[str]:
        """Nagłówki =head1 w kolejności dokumentu."""
        return _HEAD1_RE.findall(self.raw_text)

    def section(self, name: str) -> str:
        """
        Treść sekcji między "=head1 <name>" a następnym "=head1"
        (lub końcem dokumentu). Pusty string, gdy sekcji brak.
        """
        m = re.search(
            rf"^=head1[ \t]+{re.escape(name)}[ \t]*\n(.*?)(?=^=head1|\Z)",
            self.raw_text,
            re.MULTILINE | re.DOTALL,
        )
        return m.group(1) if m else ""

    def span(self, start: str, end: str) -> str | None:
        """
        Tekst między "=head1 <start>" a OSTATNIM "=head1 <end>".

        Dopasowanie zachłanne: gdy znacznik końcowy występuje kilka razy,
        zakres sięga do ostatniego wystąpienia. None, gdy para nie występuje.
        """
        m = re.search(
            rf"=head1 {re.escape(start)}(.*)=head1 {re.escape(end)}",
            self.raw_text,
            re.DOTALL,
        )
        return m.group(1) if m else None

    def name_span(self) -> str | None:
        return self.span("NAME", "SYNOPSIS")

    def synopsis_span(self) -> str | None:
        return self.span("SYNOPSIS", "DESCRIPTION")

    def copyright_is_last(self) -> bool:
        """Czy po "head1 COPYRIGHT" nie ma już żadnego znacznika =head."""
        return re.search(r"head1 COPYRIGHT.*=head", self.raw_text, re.DOTALL) is None

    def names(self) -> list[str]:
        """Symbole zadeklarowane w sekcji NAME (pusta lista, gdy brak sekcji).

        Sekcja kończy się na następnym =head1, więc strona bez SYNOPSIS
        też dokumentuje swoje nazwy.
        """
        return name_tokens(self.section("NAME"))


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def load_page(path: str | Path) -> Page:
    """
    Wczytuje stronę z dysku.

    Raises:
        OSError: gdy pliku nie da się otworzyć lub odczytać.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8", errors="replace")
    return Page(path=path, raw_text=text)


def name_tokens(text: str) -> list[str]:
    """
    Rozbija treść sekcji NAME na listę nazw (bez duplikatów, w kolejności).

    Wszystko od pierwszego '-' (separator opisu) jest odrzucane,
    przecinki są usuwane, podział po białych znakach.
    """
    text = text.replace("\n", " ")
    text = text.split("-", 1)[0]
    text = text.replace(",", "")
    return list(dict.fromkeys(text.split()))
