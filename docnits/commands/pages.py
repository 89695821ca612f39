"""Komenda: docnits -n / -s — usterki na stronach POD."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from docnits._config import Settings
from docnits.report import Reporter
from manpage import POD_SUFFIX, load_page
from nits import (
    CheckContext,
    ExternalCheckerError,
    NameSynopsisChecker,
    PodChecker,
    StructuralValidator,
    StructureOptions,
    check_page,
)

console = Console(stderr=True)


def enumerate_pages(args: argparse.Namespace, settings: Settings) -> list[Path]:
    """Jawna lista stron z wiersza poleceń albo <doc-root>/*/*.pod (posortowane)."""
    if args.pages:
        return [Path(p) for p in args.pages]
    return sorted(settings.doc_root.glob(f"*/*{POD_SUFFIX}"))


def run(
    args: argparse.Namespace,
    settings: Settings,
    ctx: CheckContext,
    reporter: Reporter,
) -> None:
    strict  = bool(args.sections)
    options = StructureOptions(
        project_authors=settings.project_authors,
        header_namespace=settings.header_namespace,
        strict=strict,
    )
    external     = PodChecker(settings.podchecker) if strict else None
    name_checker = NameSynopsisChecker(ctx)
    structure    = StructuralValidator(options, external)

    for path in enumerate_pages(args, settings):
        try:
            page = load_page(path)
        except OSError as e:
            console.print(f"[red]Nie można otworzyć strony:[/red] {path} ({e})")
            raise SystemExit(1)

        try:
            report = check_page(page, name_checker, structure)
        except ExternalCheckerError as e:
            console.print(f"[red]Błąd walidatora zewnętrznego:[/red] {e}")
            raise SystemExit(1)

        reporter.diagnostics(report.diagnostics)


def add_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-n", "--nits",
        action="store_true",
        help="Wypisz usterki na stronach POD.",
    )
    parser.add_argument(
        "-s", "--sections",
        action="store_true",
        help="Sprawdzaj też obowiązkowe sekcje i uruchom podchecker (implikuje -n).",
    )
    parser.add_argument(
        "--doc-root",
        metavar="KATALOG",
        default=None,
        help="Katalog drzewa podręcznika (domyślnie: $DOCNITS_DOC_ROOT lub doc).",
    )
    parser.add_argument(
        "pages",
        nargs="*",
        metavar="STRONA.pod",
        help="Strony do sprawdzenia (domyślnie: <doc-root>/*/*.pod).",
    )
