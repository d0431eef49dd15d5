# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Version information for emojiguard, as shown by ``emojiguard --version``.

The version comes from the installed distribution metadata (see
``emojiguard.__version__``).  When the package was installed from a VCS URL
(``pip install git+https://...``), pip records PEP 610 metadata in
``direct_url.json`` and the requested revision is shown alongside.
"""

import json
from importlib import metadata


def get_version_info() -> tuple[str, str | None]:
    """Return ``(version, revision)``; revision is None for normal installs."""
    try:
        from emojiguard import __version__

        version = __version__
    except (ImportError, AttributeError):
        version = "unknown"
    return version, _get_pep610_revision()


def _get_pep610_revision(dist_name: str = "emojiguard") -> str | None:
    """Return VCS revision from PEP 610 metadata, if available."""
    try:
        direct_url = metadata.distribution(dist_name).read_text("direct_url.json")
    except (metadata.PackageNotFoundError, OSError, UnicodeDecodeError):
        return None
    if not direct_url:
        return None

    try:
        data = json.loads(direct_url)
    except json.JSONDecodeError:
        return None

    vcs_info = data.get("vcs_info") if isinstance(data, dict) else None
    if not isinstance(vcs_info, dict):
        return None

    for key in ("requested_revision", "commit_id"):
        value = vcs_info.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def format_version_string(version: str, revision: str | None) -> str:
    """Format like ``"0.2.0"`` or ``"0.2.0 [main]"`` plus the license line."""
    base_version = f"{version} [{revision}]" if revision else version
    return f"{base_version}\nLicense: Apache-2.0"
