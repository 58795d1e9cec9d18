"""Create the data file, or migrate an existing one to the current format."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "doggy_daycare"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from doggy_daycare.storage.paths import resolve_data_path
from doggy_daycare.storage.store import DocumentStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    data_path = resolve_data_path(data_file=settings.DATA_FILE, dev_mode=settings.DEV_MODE)

    store = DocumentStore(data_path)
    dogs, schedules = store.read(lambda document: (len(document.dogs), len(document.recurring_schedules)))
    print(f"OK: Data file ready -> {data_path} (dogs={dogs}, schedules={schedules})")


if __name__ == "__main__":
    main()
