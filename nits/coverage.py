"""
nits/coverage.py — pokrycie manifestu eksportów dokumentacją.

Publiczne API:
  build_documented_index(directory, ctx)  -> int (liczba stron)
  find_undocumented(library, index, ctx, exempt_prefixes) -> CoverageReport
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from manpage import POD_SUFFIX, load_page

from .context import CheckContext
from .export_index import ExportIndex

# Prefiksy symboli pomijanych przy sprawdzaniu pokrycia (narzędzia ASN.1).
DEFAULT_EXEMPT_PREFIXES: tuple[str, ...] = ("ASN1_",)


@dataclass(frozen=True, slots=True)
class UndocumentedSymbol:
    library: str
    name: str

    def render(self) -> str:
        return f"{self.library}:{self.name}"


@dataclass(slots=True)
class CoverageReport:
    """
    - library:      logiczna nazwa biblioteki, np. "crypto"
    - manifest:     ścieżka manifestu
    - undocumented: symbole bez dokumentacji (kolejność manifestu)
    """

    library: str
    manifest: Path
    undocumented: list[UndocumentedSymbol] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.undocumented)

    def summary(self) -> str:
        return f"# Found {self.count} missing from {self.manifest}"


def build_documented_index(directory: str | Path, ctx: CheckContext) -> int:
    """
    Rejestruje w kontekście wszystkie nazwy z sekcji NAME stron *.pod katalogu.

    Strony są przetwarzane w kolejności alfabetycznej ścieżek.

    Raises:
        OSError: gdy strony nie da się odczytać.
    """
    pages = sorted(Path(directory).glob(f"*{POD_SUFFIX}"))
    for path in pages:
        page = load_page(path)
        for name in page.names():
            ctx.register(name, str(page.path))
    return len(pages)


def find_undocumented(
    library: str,
    index: ExportIndex,
    ctx: CheckContext,
    exempt_prefixes: tuple[str, ...] = DEFAULT_EXEMPT_PREFIXES,
) -> CoverageReport:
    report = CoverageReport(library=library, manifest=index.path)
    for sym in index:
        if ctx.is_documented(sym.name):
            continue
        if exempt_prefixes and sym.name.startswith(exempt_prefixes):
            continue
        report.undocumented.append(UndocumentedSymbol(library=library, name=sym.name))
    return report
