from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from ..core.constants import APP_DATA_DIR_NAME, DATA_FILE_NAME, DEV_DATA_DIR_NAME


def user_data_dir(env: Mapping[str, str] = os.environ) -> Path:
    """Per-user application data directory for the current platform."""

    if sys.platform.startswith("win"):
        base = env.get("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        return Path(base)
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    return Path(env.get("XDG_DATA_HOME") or Path.home() / ".local" / "share")


def resolve_data_path(
    *,
    data_file: Optional[str] = None,
    dev_mode: bool = False,
    cwd: Optional[Path] = None,
    env: Mapping[str, str] = os.environ,
) -> Path:
    """Where the document lives.

    An explicit `data_file` wins. Development keeps data under the working
    tree; production uses the OS user-data directory.
    """

    if data_file:
        return Path(data_file).expanduser()
    if dev_mode:
        return (cwd or Path.cwd()) / DEV_DATA_DIR_NAME / DATA_FILE_NAME
    return user_data_dir(env) / APP_DATA_DIR_NAME / DATA_FILE_NAME
