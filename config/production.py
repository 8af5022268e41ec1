import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "settlement"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "dispatch_settlement"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Monthly equipment-transport ceiling (KRW); unset keeps the built-in 300,000.
if os.getenv("EQUIPMENT_TRANSPORT_MONTHLY_CAP"):
    EQUIPMENT_TRANSPORT_MONTHLY_CAP = int(os.getenv("EQUIPMENT_TRANSPORT_MONTHLY_CAP"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
