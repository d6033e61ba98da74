"""Tests for sdt_analysis.output — user-facing message helpers."""

import pytest

from sdt_analysis.lib.log_lib import init_output
from sdt_analysis.output import print_error, print_ok, print_warn


def test_print_ok_format(capsys):
    print_ok("it works")
    assert "[OK] it works" in capsys.readouterr().out


def test_print_warn_format(capsys):
    print_warn("careful")
    assert "[WARN] careful" in capsys.readouterr().out


def test_print_error_goes_to_stderr(capsys):
    init_output(verbosity=0)
    print_error("broken")
    captured = capsys.readouterr()
    assert "ERROR: broken" in captured.err
    assert captured.out == ""


class TestQuietAxisSuppression:
    """print_*() helpers respect the THAC0 quiet axis."""

    @pytest.mark.parametrize("verbosity", [-2, -1, 0, 2])
    def test_status_lines_shown(self, capsys, verbosity):
        init_output(verbosity=verbosity)
        print_ok("shown")
        assert "shown" in capsys.readouterr().out

    @pytest.mark.parametrize("verbosity", [-3, -4])
    def test_status_lines_suppressed(self, capsys, verbosity):
        init_output(verbosity=verbosity)
        print_ok("hidden")
        print_warn("hidden")
        assert capsys.readouterr().out == ""

    def test_errors_survive_errors_only(self, capsys):
        init_output(verbosity=-3)
        print_error("still here")
        assert "still here" in capsys.readouterr().err

    def test_errors_silenced_at_hard_wall(self, capsys):
        init_output(verbosity=-4)
        print_error("gone")
        assert capsys.readouterr().err == ""
