# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Platform-aware path resolution for config and state directories."""

import getpass
import os
from pathlib import Path

from platformdirs import user_config_dir, user_data_dir

APP_NAME = "emojiguard"


def _is_root() -> bool:
    """Return True if the current process is running as root."""
    try:
        return os.geteuid() == 0  # type: ignore[attr-defined]
    except AttributeError:
        return getpass.getuser() == "root"


def config_root() -> Path:
    """
    Base directory for configuration (config.yml, glyph configs).

    Priority:
      1. EMOJIGUARD_CONFIG_DIR
      2. if root   → /etc/emojiguard
         else      → platformdirs user config dir (~/.config/emojiguard)
    """
    env = os.getenv("EMOJIGUARD_CONFIG_DIR")
    if env:
        return Path(env).expanduser()

    if _is_root():
        return Path("/etc") / APP_NAME

    return Path(user_config_dir(APP_NAME))


def state_root() -> Path:
    """
    Writable state (debug log).

    Priority:
      1. EMOJIGUARD_STATE_DIR
      2. if root   → /var/lib/emojiguard
         else      → platformdirs user data dir (~/.local/share/emojiguard)
    """
    env = os.getenv("EMOJIGUARD_STATE_DIR")
    if env:
        return Path(env).expanduser()

    if _is_root():
        return Path("/var/lib") / APP_NAME

    return Path(user_data_dir(APP_NAME))
