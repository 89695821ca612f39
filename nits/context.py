"""
nits/context.py — stan jednego przebiegu sprawdzania.

CheckContext trzyma:
  documented — indeks: nazwa symbolu -> ścieżka strony, która go opisuje
  _seen      — mapa do wykrywania duplikatów (nazwa -> ostatnia strona)
  notices    — komunikaty "# ..." w kolejności emisji
  _stems     — cache nazw stron (.pod) w odwiedzonych katalogach

Kontekst tworzony jest od zera dla każdego przebiegu i przekazywany jawnie
do NameSynopsisChecker i do sprawdzania pokrycia.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from manpage import POD_SUFFIX


@dataclass(slots=True)
class CheckContext:
    documented: dict[str, str] = field(default_factory=dict)
    notices: list[str] = field(default_factory=list)
    _seen: dict[str, str] = field(default_factory=dict)
    _stems: dict[Path, frozenset[str]] = field(default_factory=dict)

    # ------------------------------------------------------------------
    # Indeks udokumentowanych symboli
    # ------------------------------------------------------------------

    def register(self, name: str, page_path: str) -> str | None:
        """
        Rejestruje symbol opisany na stronie page_path.

        Ostatnia strona wygrywa przy wyszukiwaniu; duplikat z innej strony
        jest zgłaszany jako notka i zwracany (ścieżka poprzedniej strony).
        """
        self.documented[name] = page_path

        previous = self._seen.get(name)
        self._seen[name] = page_path
        if previous is not None and previous != page_path:
            self.notices.append(f"# Duplicate {name} in {page_path} and {previous}")
            return previous
        return None

    def is_documented(self, name: str) -> bool:
        return name in self.documented

    def documented_by(self, name: str) -> str | None:
        return self.documented.get(name)

    # ------------------------------------------------------------------
    # Strony w katalogu
    # ------------------------------------------------------------------

    def page_stems(self, directory: Path) -> frozenset[str]:
        """Nazwy (bez .pod) plików stron w katalogu; wynik jest cache'owany."""
        stems = self._stems.get(directory)
        if stems is None:
            stems = frozenset(
                p.name.removesuffix(POD_SUFFIX)
                for p in directory.glob(f"*{POD_SUFFIX}")
                if p.is_file()
            )
            self._stems[directory] = stems
        return stems

    # ------------------------------------------------------------------
    # Notki
    # ------------------------------------------------------------------

    def drain_notices(self) -> list[str]:
        """Zwraca zebrane notki i czyści listę."""
        out, self.notices = self.notices, []
        return out
