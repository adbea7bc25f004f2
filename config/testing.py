import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "staff_portal_test"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False

HISTORY_LIMIT = 10
CURRENCY_SYMBOL = "₹"
