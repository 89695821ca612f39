"""Wspólne fixtures: wzorcowa strona POD i budowanie drzewa doc/manN."""

from __future__ import annotations

from pathlib import Path

import pytest

from manpage import Page, load_page

GOOD_PAGE = """=pod

=head1 NAME

FOO_bar - does a thing

=head1 SYNOPSIS

 #include <openssl/foo.h>

 int FOO_bar(int x);

=head1 DESCRIPTION

FOO_bar() does a thing.

=head1 RETURN VALUES

FOO_bar() returns 1 on success.

=head1 COPYRIGHT

Copyright 2016 The OpenSSL Project Authors. All Rights Reserved.

=cut
"""


def make_page(
    name: str = "FOO_bar",
    symbols: str = "FOO_bar",
    synopsis: str = " #include <openssl/foo.h>\n\n int FOO_bar(int x);",
) -> str:
    """Składa stronę o strukturze GOOD_PAGE z podanym NAME i SYNOPSIS."""
    return (
        "=pod\n\n"
        "=head1 NAME\n\n"
        f"{symbols} - does a thing\n\n"
        "=head1 SYNOPSIS\n\n"
        f"{synopsis}\n\n"
        "=head1 DESCRIPTION\n\n"
        f"{name}() does a thing.\n\n"
        "=head1 RETURN VALUES\n\n"
        "Returns 1 on success.\n\n"
        "=head1 COPYRIGHT\n\n"
        "Copyright 2016 The OpenSSL Project Authors. All Rights Reserved.\n\n"
        "=cut\n"
    )


@pytest.fixture
def doc_root(tmp_path: Path) -> Path:
    root = tmp_path / "doc"
    (root / "man3").mkdir(parents=True)
    return root


@pytest.fixture
def write_page(doc_root: Path):
    """write_page(stem, text, section="man3") -> Page"""

    def _write(stem: str, text: str, section: str = "man3") -> Page:
        directory = doc_root / section
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{stem}.pod"
        path.write_text(text, encoding="utf-8")
        return load_page(path)

    return _write
