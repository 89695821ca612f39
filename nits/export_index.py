"""
nits/export_index.py — indeks manifestu eksportów biblioteki (*.num).

Format pliku: jeden symbol na linię, nazwa w pierwszej kolumnie, np.

    SSL_CTX_new                             1	1_1_0	EXIST::FUNCTION:
    SSL_get_finished                        2	1_1_0	NOEXIST::FUNCTION:

Linie z markerem NOEXIST (symbol nie istnieje w tej konfiguracji) lub
EXPORT_VAR_AS_FUNC (zmienna eksportowana jako alias funkcji) są pomijane.
"""

from __future__ import annotations

import pathlib
import re
from dataclasses import dataclass

from .types import ParseError

# Markery pomijanych linii (jako całe słowa).
SKIP_MARKERS: tuple[str, ...] = ("NOEXIST", "EXPORT_VAR_AS_FUNC")

_SKIP_RE = re.compile(r"\b(?:" + "|".join(SKIP_MARKERS) + r")\b")


@dataclass(frozen=True, slots=True)
class ExportSymbol:
    name: str


class ExportIndex:
    """
    Posortowana leksykograficznie lista eksportowanych symboli.

    Atrybuty publiczne:
      path    — ścieżka manifestu
      symbols — list[ExportSymbol] w kolejności leksykograficznej
    """

    def __init__(self, path: pathlib.Path, names: list[str]) -> None:
        self.path = path
        self.symbols: list[ExportSymbol] = [ExportSymbol(n) for n in sorted(names)]

    @property
    def count(self) -> int:
        return len(self.symbols)

    @property
    def names(self) -> list[str]:
        return [s.name for s in self.symbols]

    def __iter__(self):
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    # ------------------------------------------------------------------
    # Konstruktory fabryczne
    # ------------------------------------------------------------------

    @classmethod
    def from_file(cls, path: str | pathlib.Path) -> "ExportIndex":
        """
        Wczytuje manifest z pliku.

        Raises:
            ParseError: gdy pliku nie da się otworzyć.
        """
        path = pathlib.Path(path)
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise ParseError(f"Can't open {path}, {exc.strerror or exc}") from exc
        return cls(path, parse_manifest(text))

    @classmethod
    def from_text(cls, text: str, path: str | pathlib.Path = "<text>") -> "ExportIndex":
        return cls(pathlib.Path(path), parse_manifest(text))


def parse_manifest(text: str) -> list[str]:
    """Zwraca nazwy symboli w kolejności pliku (bez sortowania)."""
    names: list[str] = []
    for line in text.splitlines():
        if _SKIP_RE.search(line):
            continue
        fields = line.split()
        if fields:
            names.append(fields[0])
    return names
