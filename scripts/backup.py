"""Write a backup copy of the data file.

Note: Backups are plain exports named doggy-daycare-backup-<timestamp>.json,
written to the configured cloud directory if one is set, else ./backups.
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "doggy_daycare"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from doggy_daycare.core.constants import BACKUP_FILE_PREFIX, BACKUP_FILE_SUFFIX
from doggy_daycare.storage.paths import resolve_data_path
from doggy_daycare.storage.store import DocumentStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = DocumentStore(resolve_data_path(data_file=settings.DATA_FILE, dev_mode=settings.DEV_MODE))

    cloud = store.read(lambda document: document.settings.cloud_backup)
    if cloud is not None and cloud.enabled and cloud.cloud_directory:
        out_dir = Path(cloud.cloud_directory)
        if not out_dir.is_dir():
            raise SystemExit(f"Cloud directory does not exist: {out_dir}")
    else:
        out_dir = REPO_ROOT / "backups"
        out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{BACKUP_FILE_PREFIX}{ts}{BACKUP_FILE_SUFFIX}"
    out_file.write_text(store.export_json(), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
