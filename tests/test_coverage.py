"""Testy nits.coverage i nits.context — indeks symboli i pokrycie manifestu."""

from nits import CheckContext, ExportIndex, build_documented_index, find_undocumented

from conftest import make_page


class TestCheckContext:
    def test_last_page_wins_and_duplicate_noticed(self):
        ctx = CheckContext()
        assert ctx.register("FOO_new", "a.pod") is None
        assert ctx.register("FOO_new", "b.pod") == "a.pod"

        assert ctx.documented_by("FOO_new") == "b.pod"
        assert ctx.drain_notices() == ["# Duplicate FOO_new in b.pod and a.pod"]
        assert ctx.notices == []

    def test_same_page_twice_is_not_duplicate(self):
        ctx = CheckContext()
        ctx.register("FOO_new", "a.pod")
        ctx.register("FOO_new", "a.pod")
        assert ctx.notices == []

    def test_fresh_context_per_run(self):
        first = CheckContext()
        first.register("X", "a.pod")
        assert not CheckContext().is_documented("X")


class TestBuildDocumentedIndex:
    def test_names_from_all_pages(self, doc_root, write_page):
        write_page("FOO_new", make_page(symbols="FOO_new, FOO_free"))
        write_page("BAR_new", make_page(symbols="BAR_new"))
        ctx = CheckContext()

        count = build_documented_index(doc_root / "man3", ctx)

        assert count == 2
        assert sorted(ctx.documented) == ["BAR_new", "FOO_free", "FOO_new"]
        assert ctx.documented_by("FOO_free").endswith("FOO_new.pod")

    def test_page_without_synopsis_documents_its_names(self, doc_root, write_page):
        write_page("FOO_overview", (
            "=pod\n\n=head1 NAME\n\nFOO_init, FOO_cleanup - library setup\n\n"
            "=head1 DESCRIPTION\n\nSetup and teardown.\n\n"
            "=head1 COPYRIGHT\n\nCopyright 2016 The OpenSSL Project Authors.\n\n=cut\n"
        ))
        ctx   = CheckContext()
        index = ExportIndex.from_text("FOO_init 1\nFOO_cleanup 2\n", "util/libcrypto.num")

        build_documented_index(doc_root / "man3", ctx)
        report = find_undocumented("crypto", index, ctx)

        assert sorted(ctx.documented) == ["FOO_cleanup", "FOO_init"]
        assert report.undocumented == []

    def test_duplicate_across_pages(self, doc_root, write_page):
        a = write_page("A_page", make_page(symbols="FOO_dup, A_page"))
        b = write_page("B_page", make_page(symbols="FOO_dup, B_page"))
        ctx = CheckContext()

        build_documented_index(doc_root / "man3", ctx)

        assert ctx.notices == [f"# Duplicate FOO_dup in {b.path} and {a.path}"]
        assert ctx.documented_by("FOO_dup") == str(b.path)


class TestFindUndocumented:
    def test_reports_exactly_missing(self):
        ctx = CheckContext()
        ctx.register("A", "a.pod")
        index = ExportIndex.from_text("A 1\nB 2\nC 3\n", "util/libfoo.num")

        report = find_undocumented("foo", index, ctx, exempt_prefixes=())

        assert [s.render() for s in report.undocumented] == ["foo:B", "foo:C"]
        assert report.summary() == "# Found 2 missing from util/libfoo.num"

    def test_exempt_prefix_skipped(self):
        index = ExportIndex.from_text("ASN1_item_new 1\nFOO_x 2\n")

        report = find_undocumented("crypto", index, CheckContext())

        assert [s.name for s in report.undocumented] == ["FOO_x"]

    def test_custom_exempt_prefixes(self):
        index = ExportIndex.from_text("ASN1_item_new 1\nOSSL_x 2\nFOO_x 3\n")

        report = find_undocumented("crypto", index, CheckContext(), ("OSSL_", "FOO_"))

        assert [s.name for s in report.undocumented] == ["ASN1_item_new"]
