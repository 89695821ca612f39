"""
nits — wyszukiwanie usterek w dokumentacji POD biblioteki C.

Interfejs publiczny:
    CheckContext          — stan przebiegu (indeks udokumentowanych symboli)
    NameSynopsisChecker   — NAME ↔ SYNOPSIS
    StructuralValidator   — reguły strukturalne (+ tryb ścisły)
    ExportIndex           — manifest eksportów biblioteki
    find_undocumented     — pokrycie manifestu dokumentacją
    Diagnostic, DiagnosticCode, CheckReport — typy raportu

Typowe użycie:
    from manpage import load_page
    from nits import CheckContext, NameSynopsisChecker, StructuralValidator, check_page

    ctx    = CheckContext()
    page   = load_page("doc/man3/SSL_new.pod")
    report = check_page(page, NameSynopsisChecker(ctx), StructuralValidator())
    for d in report.diagnostics:
        print(d.render())
"""

from .types import (
    CheckReport,
    Diagnostic,
    DiagnosticCode,
    ExternalCheckerError,
    ParseError,
)
from .context import CheckContext
from .synopsis_patterns import NORMALIZERS, RULES, SymbolRule
from .synopsis import (
    SymbolDeclaration,
    SynopsisResult,
    classify_line,
    comma_spacing,
    extract_symbols,
    normalize_line,
    scan_lines,
)
from .name_synopsis import NameSynopsisChecker
from .external import ExternalChecker, PodChecker, filter_external_output
from .structure import (
    MANDATORY_SECTIONS,
    StructuralValidator,
    StructureOptions,
    mandatory_sections,
)
from .export_index import ExportIndex, ExportSymbol, parse_manifest
from .coverage import (
    DEFAULT_EXEMPT_PREFIXES,
    CoverageReport,
    UndocumentedSymbol,
    build_documented_index,
    find_undocumented,
)
from .checker import check_page


__all__ = [
    "CheckReport",
    "Diagnostic",
    "DiagnosticCode",
    "ExternalCheckerError",
    "ParseError",
    "CheckContext",
    "NORMALIZERS",
    "RULES",
    "SymbolRule",
    "SymbolDeclaration",
    "SynopsisResult",
    "classify_line",
    "comma_spacing",
    "extract_symbols",
    "normalize_line",
    "scan_lines",
    "NameSynopsisChecker",
    "ExternalChecker",
    "PodChecker",
    "filter_external_output",
    "MANDATORY_SECTIONS",
    "StructuralValidator",
    "StructureOptions",
    "mandatory_sections",
    "ExportIndex",
    "ExportSymbol",
    "parse_manifest",
    "DEFAULT_EXEMPT_PREFIXES",
    "CoverageReport",
    "UndocumentedSymbol",
    "build_documented_index",
    "find_undocumented",
    "check_page",
]
