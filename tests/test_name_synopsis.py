"""Testy nits.name_synopsis — porównanie NAME ↔ SYNOPSIS."""

from nits import CheckContext, DiagnosticCode, NameSynopsisChecker

from conftest import GOOD_PAGE, make_page


def _messages(diagnostics):
    return [d.message for d in diagnostics]


class TestConsistentPage:
    def test_matching_name_and_synopsis_is_clean(self, write_page):
        page = write_page("FOO_bar", GOOD_PAGE)
        assert NameSynopsisChecker(CheckContext()).check(page) == []

    def test_several_symbols(self, write_page):
        text = make_page(
            symbols="FOO_bar, FOO_new,\nFOO_free",
            synopsis=" FOO *FOO_new(void);\n void FOO_free(FOO *f);\n int FOO_bar(FOO *f);",
        )
        page = write_page("FOO_bar", text)
        assert NameSynopsisChecker(CheckContext()).check(page) == []


class TestMismatch:
    def test_renamed_prototype_reported_both_ways(self, write_page):
        text = make_page(synopsis=" int FOO_baz(int x);")
        page = write_page("FOO_bar", text)

        out = NameSynopsisChecker(CheckContext()).check(page)

        assert _messages(out) == [
            "FOO_baz missing from NAME section",
            "FOO_bar missing from SYNOPSIS",
        ]
        assert [d.code for d in out] == [
            DiagnosticCode.MISSING_FROM_NAME,
            DiagnosticCode.MISSING_FROM_SYNOPSIS,
        ]
        assert all(d.location == f"{page.path}:1:" for d in out)

    def test_filename_missing_from_name(self, write_page):
        text = make_page(symbols="FOO_other", synopsis=" int FOO_other(void);")
        page = write_page("FOO_bar", text)

        out = NameSynopsisChecker(CheckContext()).check(page)

        assert _messages(out) == ["FOO_bar (filename) missing from NAME section"]

    def test_missing_from_synopsis_in_name_order(self, write_page):
        text = make_page(symbols="FOO_bar, FOO_z, FOO_a", synopsis=" int FOO_bar(void);")
        page = write_page("FOO_bar", text)

        out = NameSynopsisChecker(CheckContext()).check(page)

        assert _messages(out) == [
            "FOO_z missing from SYNOPSIS",
            "FOO_a missing from SYNOPSIS",
        ]

    def test_comma_spacing_reported_through_checker(self, write_page):
        text = make_page(synopsis=" int FOO_bar(int a,int b);")
        page = write_page("FOO_bar", text)

        out = NameSynopsisChecker(CheckContext()).check(page)

        assert [d.code for d in out] == [DiagnosticCode.COMMA_SPACING]

    def test_findings_follow_synopsis_line_order(self, write_page):
        text = make_page(synopsis=" int FOO_bar(int a,int b);\n int FOO_y(void);")
        page = write_page("FOO_bar", text)

        out = NameSynopsisChecker(CheckContext()).check(page)

        assert [d.code for d in out] == [
            DiagnosticCode.COMMA_SPACING,
            DiagnosticCode.MISSING_FROM_NAME,
        ]
        assert out[1].message == "FOO_y missing from NAME section"


class TestSiblingPages:
    def test_other_pages_listed_and_exempt(self, write_page):
        write_page("FOO_new", make_page(name="FOO_new", symbols="FOO_new",
                                        synopsis=" FOO *FOO_new(void);"))
        write_page("FOO_free", make_page(name="FOO_free", symbols="FOO_free",
                                         synopsis=" void FOO_free(FOO *f);"))
        text = make_page(symbols="FOO_bar, FOO_new, FOO_free")
        page = write_page("FOO_bar", text)

        out = NameSynopsisChecker(CheckContext()).check(page)

        assert _messages(out) == [
            "the following exist as other .pod files: FOO_free FOO_new",
        ]
        assert out[0].code == DiagnosticCode.OTHER_POD_FILES


class TestSkippedPages:
    def test_generic_page_skipped(self, write_page):
        text = make_page(synopsis=" int FOO_baz(int x);").replace(
            "=pod\n", "=pod\n\n=for comment generic\n", 1
        )
        page = write_page("FOO_bar", text)
        assert NameSynopsisChecker(CheckContext()).check(page) == []

    def test_command_section_skipped(self, write_page):
        page = write_page("FOO_bar", make_page(synopsis=" int FOO_baz(int x);"), section="man1")
        assert NameSynopsisChecker(CheckContext()).check(page) == []

    def test_overview_sections_skipped(self, write_page):
        for section in ("man5", "man7"):
            page = write_page("FOO_bar", make_page(symbols="other"), section=section)
            assert NameSynopsisChecker(CheckContext()).check(page) == []

    def test_no_name_section(self, write_page):
        page = write_page("FOO_bar", "=pod\n\n=head1 DESCRIPTION\n\nx\n\n=cut\n")
        assert NameSynopsisChecker(CheckContext()).check(page) == []


class TestNoSynopsis:
    def test_only_filename_checks_run(self, write_page):
        text = "=pod\n\n=head1 NAME\n\nFOO_x - y\n\n=head1 SYNOPSIS\n\n int FOO_x(void);\n\n=cut\n"
        page = write_page("FOO_bar", text)

        out = NameSynopsisChecker(CheckContext()).check(page)

        assert _messages(out) == ["FOO_bar (filename) missing from NAME section"]


class TestIdempotence:
    def test_same_output_twice(self, write_page):
        page = write_page("FOO_bar", make_page(symbols="FOO_bar, FOO_q",
                                               synopsis=" int FOO_baz(int a,int b);"))
        first  = NameSynopsisChecker(CheckContext()).check(page)
        second = NameSynopsisChecker(CheckContext()).check(page)
        assert [d.render() for d in first] == [d.render() for d in second]
