"""Shared test fixtures for the sdt-analysis test suite."""

import os
from unittest.mock import patch

import pytest

from sdt_analysis import dispatch as _dispatch_mod
from sdt_analysis.lib.log_lib import channels as _channels_mod
from sdt_analysis.lib.log_lib import manager as _manager_mod


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: runs the installed entry point in a subprocess",
    )


# ---------------------------------------------------------------------------
# Global state isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _isolate_globals():
    """Restore the OutputManager singleton, channel registry and handlers."""
    saved_manager = _manager_mod._manager
    saved_channels = (
        _channels_mod.KNOWN_CHANNELS,
        _channels_mod.CHANNEL_DESCRIPTIONS,
        _channels_mod.OPT_IN_CHANNELS,
    )
    saved_handlers = dict(_dispatch_mod._HANDLERS)
    _manager_mod._manager = None
    yield
    _manager_mod._manager = saved_manager
    (_channels_mod.KNOWN_CHANNELS,
     _channels_mod.CHANNEL_DESCRIPTIONS,
     _channels_mod.OPT_IN_CHANNELS) = saved_channels
    _dispatch_mod._HANDLERS.clear()
    _dispatch_mod._HANDLERS.update(saved_handlers)


# ---------------------------------------------------------------------------
# Temporary directory fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.sdt-analysis/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path, tmp_config_home, monkeypatch):
    """A project directory (with a nested src/) used as the working directory."""
    project = tmp_path / "project"
    (project / "src").mkdir(parents=True)
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def recorded_handlers():
    """Register a recording handler for every command.

    Returns the list the handlers append their Options to.
    """
    from sdt_analysis.dispatch import register_handler
    from sdt_analysis.options import Command

    calls = []

    def _record(options):
        calls.append(options)
        return 0

    for command in Command:
        register_handler(command, _record)
    return calls
