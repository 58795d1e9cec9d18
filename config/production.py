import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

# Data lives in the OS user-data directory unless DATA_FILE points elsewhere
DEV_MODE = False
DATA_FILE = os.getenv("DATA_FILE")

FORWARD_WINDOW_DAYS = int(os.getenv("FORWARD_WINDOW_DAYS", "30"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
