"""Testy nits.external — uruchamianie podchecker i plik tymczasowy."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from nits import ExternalCheckerError, PodChecker, filter_external_output


class TestFilterExternalOutput:
    def test_deprecated_section_warning_dropped(self):
        lines = [
            "*** WARNING: (section) in 'BIO_f_ssl(3)' deprecated at line 30 in file x.pod\n",
            "*** ERROR: =over without closing =back at line 40 in file x.pod\n",
        ]
        assert filter_external_output(lines) == [
            "*** ERROR: =over without closing =back at line 40 in file x.pod",
        ]

    def test_syntax_ok_summary_dropped(self):
        assert filter_external_output(["doc/man3/x.pod pod syntax OK.\n"]) == []


class TestPodChecker:
    def test_output_read_back_and_file_released(self):
        seen = {}

        def fake_run(cmd, stdout, stderr, check):
            seen["cmd"] = cmd
            seen["file"] = stdout
            assert stderr == subprocess.STDOUT
            stdout.write("*** WARNING: empty section in NAME at line 3 in file x.pod\n")
            stdout.write("x.pod pod syntax OK.\n")
            return subprocess.CompletedProcess(cmd, 0)

        with patch("nits.external.subprocess.run", side_effect=fake_run):
            lines = PodChecker("mypodchecker").check(Path("doc/man3/x.pod"))

        assert seen["cmd"] == ["mypodchecker", "doc/man3/x.pod"]
        assert lines == [
            "*** WARNING: empty section in NAME at line 3 in file x.pod\n",
            "x.pod pod syntax OK.\n",
        ]
        assert seen["file"].closed

    def test_missing_program(self):
        seen = {}

        def fake_run(cmd, stdout, stderr, check):
            seen["file"] = stdout
            raise FileNotFoundError(2, "No such file or directory", cmd[0])

        with patch("nits.external.subprocess.run", side_effect=fake_run):
            with pytest.raises(ExternalCheckerError, match="podchecker"):
                PodChecker().check(Path("x.pod"))

        assert seen["file"].closed

    def test_unexpected_failure_still_releases_file(self):
        seen = {}

        def fake_run(cmd, stdout, stderr, check):
            seen["file"] = stdout
            stdout.write("partial\n")
            raise RuntimeError("interrupted")

        with patch("nits.external.subprocess.run", side_effect=fake_run):
            with pytest.raises(RuntimeError, match="interrupted"):
                PodChecker().check(Path("x.pod"))

        assert seen["file"].closed
