import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_book"),
}

# Deployed URL printed into QR codes; empty means "the URL this app is served from".
CHECKIN_BASE_URL = os.getenv("CHECKIN_BASE_URL", "")
QR_SIZE = int(os.getenv("QR_SIZE", "250"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed the 'demo' class on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
