"""
docnits/report.py — wypisywanie diagnostyk i podsumowania.

Diagnostyki idą na stdout bez stylów (jedna linia na znalezisko),
podsumowanie (--show) to tabela rich na stderr.
"""

from __future__ import annotations

import sys
from collections import Counter
from typing import TextIO

from rich import box
from rich.console import Console
from rich.table import Table

from nits import Diagnostic


class Reporter:
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self.counts: Counter[str] = Counter()
        self.pages_with_findings: set[str] = set()

    def line(self, text: str = "") -> None:
        self._stream.write(text + "\n")

    def diagnostics(self, items: list[Diagnostic]) -> None:
        for d in items:
            self.line(d.render())
            self.counts[str(d.code)] += 1
            if d.location:
                self.pages_with_findings.add(d.location)

    def undocumented(self, library: str, count: int) -> None:
        self.counts[f"U_{library}"] += count

    def show_summary(self, console: Console) -> None:
        if not self.counts:
            console.print("[green]Brak znalezisk.[/green]")
            return

        table = Table(box=box.SIMPLE_HEAD, show_header=True, header_style="bold white")
        table.add_column("KOD",   no_wrap=True, style="yellow")
        table.add_column("LICZBA", justify="right", no_wrap=True)

        for code, n in sorted(self.counts.items()):
            table.add_row(code, str(n))

        console.print()
        console.print(table)
        console.print(
            f"  [dim]{sum(self.counts.values())} znalezisk, "
            f"{len(self.pages_with_findings)} stron[/dim]\n"
        )
