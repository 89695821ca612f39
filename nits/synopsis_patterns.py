"""
nits/synopsis_patterns.py — wzorce rozpoznawania deklaracji w SYNOPSIS.

Każdy SymbolRule zawiera:
  - name   : nazwa reguły ("typedef", "define", "function")
  - regex  : skompilowany wzorzec (wyszukiwanie w dowolnym miejscu linii)
  - extract: funkcja wyciągająca nazwę symbolu z Match

Reguły są testowane w kolejności; pierwsza pasująca wygrywa.
Normalizacja linii (NORMALIZERS) jest stosowana przed klasyfikacją.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class SymbolRule:
    name: str
    regex: re.Pattern[str]
    extract: Callable[[re.Match[str]], str]

    def match(self, line: str) -> str | None:
        m = self.regex.search(line)
        return self.extract(m) if m else None


@dataclass(frozen=True, slots=True)
class Normalizer:
    regex: re.Pattern[str]
    replacement: str
    count: int = 0  # 0 = wszystkie wystąpienia

    def apply(self, line: str) -> str:
        return self.regex.sub(self.replacement, line, count=self.count)


# Zastępczy typ skalarny dla makr-kontenerów.
PLACEHOLDER_TYPE = "int"


NORMALIZERS: list[Normalizer] = [
    # STACK_OF(X509) → int
    Normalizer(regex=re.compile(r"STACK_OF\([^)]+\)"), replacement=PLACEHOLDER_TYPE),
    # __declspec(dllexport) → usunięte (tylko pierwsze wystąpienie)
    Normalizer(regex=re.compile(r"__declspec\([^)]+\)"), replacement="", count=1),
]


RULES: list[SymbolRule] = [
    # -------------------------------------------------------------------------
    # typedef struct foo_st FOO;  → FOO
    # -------------------------------------------------------------------------
    SymbolRule(
        name="typedef",
        regex=re.compile(r"typedef.* (\S+);"),
        extract=lambda m: m.group(1),
    ),

    # -------------------------------------------------------------------------
    # #define FOO_MAX 10  → FOO_MAX
    # -------------------------------------------------------------------------
    SymbolRule(
        name="define",
        regex=re.compile(r"#define ([A-Za-z0-9_]+)"),
        extract=lambda m: m.group(1),
    ),

    # -------------------------------------------------------------------------
    # int FOO_bar(int x);  → FOO_bar (pierwsze wystąpienie w linii)
    # -------------------------------------------------------------------------
    SymbolRule(
        name="function",
        regex=re.compile(r"([A-Za-z0-9_]+)\("),
        extract=lambda m: m.group(1),
    ),
]

_RULES_BY_NAME: dict[str, SymbolRule] = {r.name: r for r in RULES}


def classify_typedef(line: str) -> str | None:
    return _RULES_BY_NAME["typedef"].match(line)


def classify_define(line: str) -> str | None:
    return _RULES_BY_NAME["define"].match(line)


def classify_function(line: str) -> str | None:
    return _RULES_BY_NAME["function"].match(line)
