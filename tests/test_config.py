"""Tests for sdt_analysis.config — discovery, loading and verbosity resolution."""

import io
import json
from argparse import Namespace

from sdt_analysis.config import (
    find_project_config,
    get_global_config_path,
    load_global_config,
    load_json,
    load_project_config,
    resolve_verbosity,
)
from sdt_analysis.lib.log_lib import init_output


def _args(verbose=0, quiet=0, config=None):
    return Namespace(verbose=verbose, quiet=quiet, config=config)


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLocations:

    def test_global_path_under_home(self, tmp_config_home):
        assert get_global_config_path() == (
            tmp_config_home / ".sdt-analysis" / "config.json"
        )

    def test_find_project_config_walks_up(self, tmp_project):
        cfg = _write(tmp_project / ".sdt-analysis.json", {})
        assert find_project_config(tmp_project / "src") == cfg.resolve()

    def test_find_project_config_none(self, tmp_project):
        assert find_project_config(tmp_project / "src") is None


class TestLoading:

    def test_load_json_missing(self, tmp_path):
        assert load_json(tmp_path / "nope.json") == {}

    def test_load_json_malformed(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        assert load_json(bad) == {}

    def test_load_json_directory(self, tmp_path):
        assert load_json(tmp_path) == {}

    def test_load_json_not_utf8(self, tmp_path):
        bad = tmp_path / "latin1.json"
        bad.write_bytes(b'{"verbosity": "\xff"}')
        assert load_json(bad) == {}

    def test_load_json_non_object(self, tmp_path):
        assert load_json(_write(tmp_path / "list.json", [1, 2])) == {}

    def test_load_global_config(self, tmp_config_home):
        _write(get_global_config_path(), {"verbosity": 1})
        assert load_global_config() == {"verbosity": 1}

    def test_load_global_config_explicit_path(self, tmp_path):
        path = _write(tmp_path / "custom.json", {"verbosity": -2})
        assert load_global_config(path) == {"verbosity": -2}

    def test_load_project_config_returns_path(self, tmp_project):
        cfg = _write(tmp_project / ".sdt-analysis.json", {"verbosity": 2})
        assert load_project_config(tmp_project) == ({"verbosity": 2}, cfg.resolve())

    def test_load_project_config_absent(self, tmp_project):
        assert load_project_config(tmp_project) == ({}, None)


class TestResolveVerbosity:
    """CLI > project > global precedence."""

    def test_default_is_zero(self, tmp_project):
        assert resolve_verbosity(_args()) == 0

    def test_cli_wins(self, tmp_project):
        _write(tmp_project / ".sdt-analysis.json", {"verbosity": 3})
        assert resolve_verbosity(_args(verbose=1)) == 1
        assert resolve_verbosity(_args(quiet=2)) == -2

    def test_cli_flags_cancelling_out_still_count(self, tmp_project):
        _write(tmp_project / ".sdt-analysis.json", {"verbosity": 3})
        assert resolve_verbosity(_args(verbose=1, quiet=1)) == 0

    def test_project_beats_global(self, tmp_project):
        _write(get_global_config_path(), {"verbosity": 1})
        _write(tmp_project / ".sdt-analysis.json", {"verbosity": 2})
        assert resolve_verbosity(_args()) == 2

    def test_global_used_without_project(self, tmp_project):
        _write(get_global_config_path(), {"verbosity": -1})
        assert resolve_verbosity(_args()) == -1

    def test_config_flag_replaces_global_path(self, tmp_project, tmp_path):
        _write(get_global_config_path(), {"verbosity": 1})
        custom = _write(tmp_path / "custom.json", {"verbosity": 2})
        assert resolve_verbosity(_args(config=str(custom))) == 2

    def test_non_integer_values_skipped(self, tmp_project):
        _write(tmp_project / ".sdt-analysis.json", {"verbosity": "loud"})
        _write(get_global_config_path(), {"verbosity": True})
        assert resolve_verbosity(_args()) == 0

    def test_invalid_project_value_falls_through_to_global(self, tmp_project):
        _write(tmp_project / ".sdt-analysis.json", {"verbosity": 1.5})
        _write(get_global_config_path(), {"verbosity": 1})
        assert resolve_verbosity(_args()) == 1

    def test_source_reported_on_config_channel(self, tmp_project):
        cfg = _write(tmp_project / ".sdt-analysis.json", {"verbosity": 1})
        buf = io.StringIO()
        init_output(verbosity=0, channels=['config:2'], file=buf)
        resolve_verbosity(_args(), start_dir=tmp_project)
        assert f"[config] verbosity=1 from {cfg.resolve()}" in buf.getvalue()
