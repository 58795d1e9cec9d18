"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"

# Dog add/edit always materializes at least this many days ahead of today.
DEFAULT_FORWARD_WINDOW_DAYS = 30

AUTO_SCHEDULED_NOTE = "Auto-scheduled"
MIGRATED_ATTENDANCE_NOTE = "Migrated from legacy attendance"
AUTO_GENERATED_MARKERS = ("Auto-generated", "Scheduled (not confirmed)", AUTO_SCHEDULED_NOTE)

DATA_FILE_NAME = "data.json"
DEV_DATA_DIR_NAME = "doggy-daycare-dev-data"
APP_DATA_DIR_NAME = "doggy-daycare"
TEMP_FILE_PREFIX = "doggy-daycare-"
BACKUP_FILE_PREFIX = "doggy-daycare-backup-"
BACKUP_FILE_SUFFIX = ".json"
