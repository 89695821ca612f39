"""
nits/structure.py — reguły strukturalne strony POD.

StructuralValidator.validate(page) -> list[Diagnostic]

Reguły (każda niezależna, najwyżej jedna diagnostyka na regułę):
  - =pod na początku, =cut na końcu, tylko jedno =cut
  - nota copyright projektu obecna i ostatnia
  - =head2 nie wielkimi literami, jedna spacja po =headN
  - NAME bez kropek i znaczników POD
  - SYNOPSIS bez kolejnych #include <ns/...>
  - (tryb ścisły) obowiązkowe sekcje wg numeru sekcji podręcznika
    + zewnętrzny walidator (podchecker) z odfiltrowanymi ostrzeżeniami
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from manpage import Page

from .external import ExternalChecker, filter_external_output
from .types import Diagnostic, DiagnosticCode

DEFAULT_PROJECT_AUTHORS  = "The OpenSSL Project Authors"
DEFAULT_HEADER_NAMESPACE = "openssl"

# Obowiązkowe sekcje =head1 (wzorce regex); "*" dotyczy każdej strony.
MANDATORY_SECTIONS: dict[str | int, list[str]] = {
    "*": ["NAME", "DESCRIPTION", "COPYRIGHT"],
    1:   ["SYNOPSIS", r"(COMMAND\s+)?OPTIONS"],
    3:   ["SYNOPSIS", r"RETURN\s+VALUES"],
    5:   [],
    7:   [],
}


def mandatory_sections(section: int) -> list[str]:
    return MANDATORY_SECTIONS["*"] + MANDATORY_SECTIONS.get(section, [])


@dataclass(frozen=True, slots=True)
class StructureOptions:
    """
    - project_authors:  właściciel noty copyright
    - header_namespace: katalog nagłówków biblioteki w #include <ns/...>
    - strict:           sprawdzaj obowiązkowe sekcje i uruchamiaj walidator zewnętrzny
    """

    project_authors: str = DEFAULT_PROJECT_AUTHORS
    header_namespace: str = DEFAULT_HEADER_NAMESPACE
    strict: bool = False


class StructuralValidator:
    """
    Bezstanowy zestaw reguł strukturalnych.

    Użycie:
        validator   = StructuralValidator(StructureOptions(strict=True), PodChecker())
        diagnostics = validator.validate(page)
    """

    def __init__(
        self,
        options: StructureOptions | None = None,
        external: ExternalChecker | None = None,
    ) -> None:
        self._options  = options or StructureOptions()
        self._external = external

        self._copyright_re = re.compile(
            rf"Copyright .* {re.escape(self._options.project_authors)}"
        )
        self._include_re = re.compile(
            rf"include <{re.escape(self._options.header_namespace)}/"
        )

    # ------------------------------------------------------------------
    # Publiczny interfejs
    # ------------------------------------------------------------------

    def validate(self, page: Page) -> list[Diagnostic]:
        out: list[Diagnostic] = []

        def emit(code: DiagnosticCode, message: str) -> None:
            out.append(Diagnostic(location=page.location, code=code, message=message))

        self._rules_markers(page.raw_text, emit)
        self._rules_copyright(page, emit)
        self._rules_headings(page.raw_text, emit)
        self._rules_name(page.raw_text, emit)
        self._rule_includes(page, emit)

        if self._options.strict:
            self._rule_mandatory_sections(page, emit)
            out.extend(self._run_external(page))

        return out

    # ------------------------------------------------------------------
    # Znaczniki =pod / =cut
    # ------------------------------------------------------------------

    def _rules_markers(self, text: str, emit) -> None:
        if not text.startswith("=pod"):
            emit(DiagnosticCode.NO_POD_START, "doesn't start with =pod")
        # "$" dopuszcza jeden końcowy znak nowej linii po "=cut\n".
        if re.search(r"=cut\n$", text) is None:
            emit(DiagnosticCode.NO_CUT_END, "doesn't end with =cut")
        if re.search(r"=cut.*=cut", text, re.DOTALL):
            emit(DiagnosticCode.MULTIPLE_CUT, "more than one cut line.")

    # ------------------------------------------------------------------
    # Copyright
    # ------------------------------------------------------------------

    def _rules_copyright(self, page: Page, emit) -> None:
        if self._copyright_re.search(page.raw_text) is None:
            emit(DiagnosticCode.MISSING_COPYRIGHT, "missing copyright")
        if not page.copyright_is_last():
            emit(DiagnosticCode.COPYRIGHT_NOT_LAST, "copyright not last")

    # ------------------------------------------------------------------
    # Nagłówki
    # ------------------------------------------------------------------

    def _rules_headings(self, text: str, emit) -> None:
        if re.search(r"head2\s+[A-Z ]+\n", text):
            emit(DiagnosticCode.HEAD2_UPPERCASE, "head2 in All uppercase")
        if re.search(r"=head\d\s\s+", text):
            emit(DiagnosticCode.EXTRA_SPACE_AFTER_HEAD, "extra space after head")

    # ------------------------------------------------------------------
    # Sekcja NAME
    # ------------------------------------------------------------------

    def _rules_name(self, text: str, emit) -> None:
        if re.search(r"=head1 NAME.*\.\n.*=head1 SYNOPSIS", text, re.DOTALL):
            emit(DiagnosticCode.PERIOD_IN_NAME, "period in NAME section")
        if re.search(r"=head1 NAME.*[<>].*=head1 SYNOPSIS", text, re.DOTALL):
            emit(DiagnosticCode.MARKUP_IN_NAME, "POD markup in NAME section")

    # ------------------------------------------------------------------
    # Wielokrotne #include w SYNOPSIS
    # ------------------------------------------------------------------

    def _rule_includes(self, page: Page, emit) -> None:
        if page.allows_multiple_includes:
            return
        synopsis = page.synopsis_span()
        if synopsis is None:
            return

        count = 0
        for line in synopsis.split("\n"):
            if not line:
                continue
            if self._include_re.search(line):
                count += 1
                if count == 2:
                    emit(DiagnosticCode.MULTIPLE_INCLUDES, "has multiple includes")
            else:
                count = 0

    # ------------------------------------------------------------------
    # Tryb ścisły
    # ------------------------------------------------------------------

    def _rule_mandatory_sections(self, page: Page, emit) -> None:
        for pattern in mandatory_sections(page.manual_section):
            if re.search(rf"^=head1\s+{pattern}\s*$", page.raw_text, re.MULTILINE) is None:
                emit(
                    DiagnosticCode.MISSING_SECTION,
                    f"doesn't have a head1 section matching {pattern}",
                )

    def _run_external(self, page: Page) -> list[Diagnostic]:
        if self._external is None:
            return []
        lines = filter_external_output(self._external.check(page.path))
        return [
            Diagnostic(location="", code=DiagnosticCode.EXTERNAL_CHECKER, message=line)
            for line in lines
        ]
