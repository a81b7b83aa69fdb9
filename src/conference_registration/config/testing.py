import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "conference_test"),
}

DEBUG = False
TESTING = True

HOST = "127.0.0.1"
PORT = 3000
API_PREFIX = "/api"

LOG_LEVEL = "WARNING"
LOG_FILE = None

AUTO_INIT_DB = False
AUTO_SEED_DB = False
