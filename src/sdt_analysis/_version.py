"""
Version information for sdt-analysis.

Single source of truth for the version. ``setup.py`` reads
PIP_VERSION from here; the CLI shows BASE_VERSION and VERSION.

Format: MAJOR.MINOR.PATCH[-PHASE]_BRANCH_BUILD-YYYYMMDD-COMMITHASH
Example: 0.1.0-alpha_main_2-20261012-4f1c9e2a
"""

# Version components - edit these for version bumps
MAJOR = 0
MINOR = 1
PATCH = 0
PHASE = "alpha"  # None, "alpha", "beta", "rc1", ...

# Stamped at release time
__version__ = "0.1.0-alpha_main_2-20261012-4f1c9e2"
__app_name__ = "sdt-analysis"


def get_version():
    """Return the full version string including branch and build info."""
    return __version__


def get_base_version():
    """Return MAJOR.MINOR.PATCH[-PHASE]."""
    if "_" in __version__:
        return __version__.split("_")[0]
    base = f"{MAJOR}.{MINOR}.{PATCH}"
    if PHASE:
        base = f"{base}-{PHASE}"
    return base


def get_pip_version():
    """
    Return a PEP 440 version for setuptools.

    - main branch: 0.1.0-alpha_main_2-20261012-hash -> 0.1.0a0
    - other branches: 0.1.0-alpha_dev_7-20261012-hash -> 0.1.0a0.dev7
    """
    base = f"{MAJOR}.{MINOR}.{PATCH}"

    phase_map = {"alpha": "a0", "beta": "b0"}
    if PHASE:
        base += phase_map.get(PHASE, PHASE)

    if "_" not in __version__:
        return base

    parts = __version__.split("_")
    branch = parts[1] if len(parts) > 1 else "unknown"
    if branch == "main":
        return base

    build_info = "_".join(parts[2:]) if len(parts) > 2 else ""
    build_num = build_info.split("-")[0] if "-" in build_info else "0"
    return f"{base}.dev{build_num}"


VERSION = get_version()
BASE_VERSION = get_base_version()
PIP_VERSION = get_pip_version()
