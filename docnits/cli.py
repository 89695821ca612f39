"""
docnits — wyszukiwanie drobnych usterek w dokumentacji POD.

Użycie:
  docnits [-n] [-s] [-u] [--show] [STRONA.pod ...]

Opcje:
  -n  Usterki na stronach POD (NAME ↔ SYNOPSIS, struktura strony).
  -s  Dodatkowo obowiązkowe sekcje i podchecker (implikuje -n).
  -u  Eksportowane symbole bez dokumentacji.
  -h  Pomoc.

Zmienne środowiskowe (wartości domyślne opcji):
  DOCNITS_DOC_ROOT, DOCNITS_DOC_DIR, DOCNITS_MANIFESTS,
  DOCNITS_EXEMPT_PREFIXES, DOCNITS_PODCHECKER,
  DOCNITS_PROJECT_AUTHORS, DOCNITS_HEADER_NAMESPACE
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console

from docnits._config import Settings, get_settings
from docnits.commands import pages as cmd_pages
from docnits.commands import undocumented as cmd_undocumented
from docnits.report import Reporter
from nits import CheckContext

console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docnits",
        description="Wyszukuje drobne usterki (nits) w dokumentacji POD.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Przykłady:
  docnits -n
  docnits -s doc/man3/SSL_new.pod
  docnits -u --manifest crypto=util/libcrypto.num
  docnits -n -u --show
        """,
    )
    parser.add_argument(
        "--version", action="version", version="docnits 0.1.0"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Po sprawdzeniu wyświetl tabelę liczby znalezisk wg kodu (stderr).",
    )

    cmd_pages.add_arguments(parser)
    cmd_undocumented.add_arguments(parser)

    return parser


def _apply_overrides(args: argparse.Namespace, settings: Settings) -> Settings:
    if args.doc_root is not None:
        settings.doc_root = Path(args.doc_root)
    if args.doc_dir is not None:
        settings.doc_dir = Path(args.doc_dir)
    if args.manifest:
        settings.manifests = [(lib, Path(path)) for lib, path in args.manifest]
    return settings


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args   = parser.parse_args(argv)

    try:
        settings = _apply_overrides(args, get_settings())
    except ValueError as e:
        console.print(f"[red]Błąd konfiguracji:[/red] {e}")
        raise SystemExit(1)

    ctx      = CheckContext()
    reporter = Reporter(sys.stdout)

    if args.nits or args.sections:
        cmd_pages.run(args, settings, ctx, reporter)
    if args.undocumented:
        cmd_undocumented.run(args, settings, ctx, reporter)

    if args.show:
        reporter.show_summary(console)


if __name__ == "__main__":
    main()
