"""Konfiguracja narzędzia — wartości domyślne ze zmiennych środowiskowych."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from nits.coverage import DEFAULT_EXEMPT_PREFIXES
from nits.external import DEFAULT_PODCHECKER
from nits.structure import DEFAULT_HEADER_NAMESPACE, DEFAULT_PROJECT_AUTHORS

DEFAULT_MANIFESTS = "crypto=util/libcrypto.num,ssl=util/libssl.num"


@dataclass(slots=True)
class Settings:
    doc_root: Path
    doc_dir: Path
    manifests: list[tuple[str, Path]]
    exempt_prefixes: tuple[str, ...]
    podchecker: str
    project_authors: str
    header_namespace: str


def parse_manifests(spec: str) -> list[tuple[str, Path]]:
    """
    "crypto=util/libcrypto.num,ssl=util/libssl.num" → [(crypto, …), (ssl, …)].

    Raises:
        ValueError: gdy wpis nie ma postaci BIBLIOTEKA=ŚCIEŻKA.
    """
    out: list[tuple[str, Path]] = []
    for item in spec.split(","):
        item = item.strip()
        if not item:
            continue
        lib, sep, path = item.partition("=")
        if not sep or not lib.strip() or not path.strip():
            raise ValueError(f"Nieprawidłowy wpis manifestu: '{item}' (oczekiwano LIB=ŚCIEŻKA)")
        out.append((lib.strip(), Path(path.strip())))
    return out


def _split_prefixes(value: str) -> tuple[str, ...]:
    return tuple(p.strip() for p in value.split(",") if p.strip())


def get_settings() -> Settings:
    return Settings(
        doc_root         = Path(os.getenv("DOCNITS_DOC_ROOT", "doc")),
        doc_dir          = Path(os.getenv("DOCNITS_DOC_DIR", "doc/man3")),
        manifests        = parse_manifests(os.getenv("DOCNITS_MANIFESTS", DEFAULT_MANIFESTS)),
        exempt_prefixes  = _split_prefixes(
            os.getenv("DOCNITS_EXEMPT_PREFIXES", ",".join(DEFAULT_EXEMPT_PREFIXES))
        ),
        podchecker       = os.getenv("DOCNITS_PODCHECKER", DEFAULT_PODCHECKER),
        project_authors  = os.getenv("DOCNITS_PROJECT_AUTHORS", DEFAULT_PROJECT_AUTHORS),
        header_namespace = os.getenv("DOCNITS_HEADER_NAMESPACE", DEFAULT_HEADER_NAMESPACE),
    )
