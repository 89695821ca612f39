"""
nits/synopsis.py — ekstrakcja symboli z sekcji SYNOPSIS.

Architektura:
  tekst SYNOPSIS → niepuste linie → normalize_line() → RULES (pierwsza
  pasująca) → SymbolDeclaration
  + niezależnie dla każdej linii: kontrola spacji po przecinkach

Kluczowe funkcje publiczne:
  normalize_line(line) -> str
  classify_line(line)  -> str | None
  scan_lines(text)     -> Iterator[(linia, symbol | None)]
  comma_spacing(line, location) -> Diagnostic | None
  extract_symbols(text, location) -> SynopsisResult
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from .synopsis_patterns import NORMALIZERS, RULES
from .types import Diagnostic, DiagnosticCode

# Przecinek bez spacji po identyfikatorze/liczbie, np. "int a,int b".
_COMMA_SPACING_RE = re.compile(r"[a-z0-9],[^ ]")


@dataclass(frozen=True, slots=True)
class SymbolDeclaration:
    name: str
    origin_line: str  # linia po normalizacji


@dataclass(slots=True)
class SynopsisResult:
    declarations: list[SymbolDeclaration] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def symbols(self) -> list[str]:
        return [d.name for d in self.declarations]


def normalize_line(line: str) -> str:
    for normalizer in NORMALIZERS:
        line = normalizer.apply(line)
    return line


def classify_line(line: str) -> str | None:
    """Zwraca nazwę symbolu z (już znormalizowanej) linii albo None."""
    for rule in RULES:
        sym = rule.match(line)
        if sym is not None:
            return sym
    return None


def scan_lines(text: str) -> Iterator[tuple[str, str | None]]:
    """Niepuste linie SYNOPSIS po normalizacji, każda z symbolem albo None."""
    for raw in text.split("\n"):
        if not raw:
            continue
        line = normalize_line(raw)
        yield line, classify_line(line)


def comma_spacing(line: str, location: str) -> Diagnostic | None:
    """Diagnostyka brakującej spacji po przecinku (None, gdy linia poprawna)."""
    if _COMMA_SPACING_RE.search(line) is None:
        return None
    return Diagnostic(
        location=location,
        code=DiagnosticCode.COMMA_SPACING,
        message=f"prototype missing spaces around commas: {line}",
    )


def extract_symbols(text: str, location: str) -> SynopsisResult:
    """
    Przetwarza treść SYNOPSIS linia po linii.

    Args:
        text:     tekst między =head1 SYNOPSIS a =head1 DESCRIPTION
        location: identyfikator miejsca dla diagnostyk, np. "doc/man3/x.pod:1:"
    """
    result = SynopsisResult()

    for line, sym in scan_lines(text):
        if sym is not None:
            result.declarations.append(SymbolDeclaration(name=sym, origin_line=line))
        d = comma_spacing(line, location)
        if d is not None:
            result.diagnostics.append(d)

    return result
