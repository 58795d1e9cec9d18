import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Data lives under <cwd>/doggy-daycare-dev-data unless DATA_FILE points elsewhere
DEV_MODE = True
DATA_FILE = os.getenv("DATA_FILE")

FORWARD_WINDOW_DAYS = int(os.getenv("FORWARD_WINDOW_DAYS", "30"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
