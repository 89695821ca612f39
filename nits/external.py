"""
nits/external.py — zewnętrzny walidator struktury stron (podchecker).

ExternalChecker — protokół: check(path) -> list[str] (linie wyjścia).
PodChecker      — uruchamia program podchecker; wyjście trafia do pliku
                  tymczasowego, który jest czytany w całości i usuwany
                  przy każdym wyjściu z bloku (także po wyjątku).
"""

from __future__ import annotations

import re
import subprocess
import tempfile
from pathlib import Path
from typing import Protocol

from .types import ExternalCheckerError

DEFAULT_PODCHECKER = "podchecker"

# Ostrzeżenia akceptowane — nie są raportowane.
ACCEPTABLE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"\(section\) in.*deprecated"),
    # Podsumowanie programu; funkcja podchecker() go nie wypisuje.
    re.compile(r"pod syntax OK\.$"),
]


class ExternalChecker(Protocol):
    def check(self, path: Path) -> list[str]: ...


def filter_external_output(lines: list[str]) -> list[str]:
    """Usuwa linie pasujące do ACCEPTABLE_PATTERNS (i puste końcówki linii)."""
    out: list[str] = []
    for line in lines:
        line = line.rstrip("\n")
        if any(p.search(line) for p in ACCEPTABLE_PATTERNS):
            continue
        out.append(line)
    return out


class PodChecker:
    """
    Uruchamia `podchecker <plik>` i zwraca jego połączone stdout/stderr.

    Kod wyjścia programu jest ignorowany — liczą się tylko komunikaty.
    """

    def __init__(self, program: str = DEFAULT_PODCHECKER) -> None:
        self._program = program

    def check(self, path: Path) -> list[str]:
        with tempfile.TemporaryFile(mode="w+", encoding="utf-8", errors="replace") as tmp:
            try:
                subprocess.run(
                    [self._program, str(path)],
                    stdout=tmp,
                    stderr=subprocess.STDOUT,
                    check=False,
                )
            except FileNotFoundError as exc:
                raise ExternalCheckerError(
                    f"Nie można uruchomić walidatora '{self._program}': {exc}"
                ) from exc
            tmp.seek(0)
            return tmp.readlines()
