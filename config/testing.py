import os

SECRET_KEY = "test-secret"

DEV_MODE = True
DATA_FILE = os.getenv("DATA_FILE")

FORWARD_WINDOW_DAYS = 30

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
