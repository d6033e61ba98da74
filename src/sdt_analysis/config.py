"""Configuration management for sdt-analysis.

Three-layer resolution (highest priority wins):
  1. CLI flags — -v / -Q on the command line
  2. Project config — .sdt-analysis.json, nearest one walking upward
  3. Global config — ~/.sdt-analysis/config.json (or --config PATH)

Only ``verbosity`` is read today::

    {"verbosity": 1}
"""

import json
import os
from pathlib import Path

from sdt_analysis.lib.log_lib import get_output


PROJECT_CONFIG_NAME = ".sdt-analysis.json"


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.sdt-analysis/)."""
    return Path.home() / ".sdt-analysis"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .sdt-analysis.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from path, returning {} if unreadable or malformed."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config(path=None):
    """Load the global config file, or the one named by --config."""
    return load_json(path or get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .sdt-analysis.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------
def _config_verbosity(cfg):
    value = cfg.get("verbosity")
    # bool is an int subclass; true/false is not a level
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def resolve_verbosity(global_args, start_dir=None):
    """Resolve the THAC0 verbosity level using three-layer precedence.

    ``global_args`` is the namespace from the global flag pass; it
    carries ``verbose``, ``quiet`` and ``config``.
    """
    out = get_output()
    verbose = getattr(global_args, "verbose", 0) or 0
    quiet = getattr(global_args, "quiet", 0) or 0

    # Layer 1: CLI
    if verbose or quiet:
        return verbose - quiet

    # Layer 2: Project config
    project_cfg, project_path = load_project_config(start_dir)
    value = _config_verbosity(project_cfg)
    if value is not None:
        out.emit(2, "  [config] verbosity={v} from {p}",
                 channel='config', v=value, p=project_path)
        return value

    # Layer 3: Global config
    global_path = getattr(global_args, "config", None) or get_global_config_path()
    value = _config_verbosity(load_global_config(global_path))
    if value is not None:
        out.emit(2, "  [config] verbosity={v} from {p}",
                 channel='config', v=value, p=global_path)
        return value

    return 0
