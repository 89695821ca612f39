"""Komenda: docnits -u — symbole z manifestów eksportów bez dokumentacji."""

from __future__ import annotations

import argparse

from rich.console import Console

from docnits._config import Settings, parse_manifests
from docnits.report import Reporter
from nits import (
    CheckContext,
    ExportIndex,
    ParseError,
    build_documented_index,
    find_undocumented,
)

console = Console(stderr=True)


def run(
    args: argparse.Namespace,
    settings: Settings,
    ctx: CheckContext,
    reporter: Reporter,
) -> None:
    # --- Indeks udokumentowanych symboli ----------------------------------
    try:
        build_documented_index(settings.doc_dir, ctx)
    except OSError as e:
        console.print(f"[red]Nie można odczytać strony:[/red] {e}")
        raise SystemExit(1)

    for notice in ctx.drain_notices():
        reporter.line(notice)

    # --- Manifesty --------------------------------------------------------
    for library, manifest in settings.manifests:
        try:
            index = ExportIndex.from_file(manifest)
        except ParseError as e:
            console.print(f"[red]Brak manifestu eksportów:[/red] {e}")
            raise SystemExit(1)

        reporter.line(f"# Found {index.count} in {index.path}")

        report = find_undocumented(library, index, ctx, settings.exempt_prefixes)
        for sym in report.undocumented:
            reporter.line(sym.render())
        reporter.undocumented(library, report.count)

        reporter.line(report.summary())
        reporter.line()


def _manifest_arg(value: str) -> tuple[str, str]:
    try:
        [(lib, path)] = parse_manifests(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))
    return lib, str(path)


def add_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-u", "--undocumented",
        action="store_true",
        help="Wypisz eksportowane symbole bez dokumentacji.",
    )
    parser.add_argument(
        "--doc-dir",
        metavar="KATALOG",
        default=None,
        help="Katalog stron indeksowanych dla -u (domyślnie: $DOCNITS_DOC_DIR lub doc/man3).",
    )
    parser.add_argument(
        "--manifest", "-m",
        action="append",
        type=_manifest_arg,
        default=None,
        metavar="LIB=PLIK",
        help=(
            "Manifest eksportów biblioteki; można podać wielokrotnie "
            "(domyślnie: crypto=util/libcrypto.num i ssl=util/libssl.num)."
        ),
    )
