"""nits/checker.py — pełne sprawdzenie jednej strony."""

from __future__ import annotations

from manpage import Page

from .name_synopsis import NameSynopsisChecker
from .structure import StructuralValidator
from .types import CheckReport


def check_page(
    page: Page,
    name_checker: NameSynopsisChecker,
    structure: StructuralValidator,
) -> CheckReport:
    """NAME ↔ SYNOPSIS, potem reguły strukturalne — w tej kolejności."""
    report = CheckReport(path=str(page.path))
    report.extend(name_checker.check(page))
    report.extend(structure.validate(page))
    return report
