import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# body | header | cookie
AUTH_STRATEGY = os.getenv("AUTH_STRATEGY", "cookie")
AUTH_HEADER = os.getenv("AUTH_HEADER", "X-User-Email")
# plain | hash
PASSWORD_SCHEME = os.getenv("PASSWORD_SCHEME", "plain")

DEFAULT_MONTHLY_SALARY = int(os.getenv("DEFAULT_MONTHLY_SALARY", "30000"))
SALARY_DAY_DIVISOR = int(os.getenv("SALARY_DAY_DIVISOR", "30"))

ALLOW_SELF_REGISTRATION = bool(int(os.getenv("ALLOW_SELF_REGISTRATION", "0")))
ALLOW_SELF_MARKING = bool(int(os.getenv("ALLOW_SELF_MARKING", "0")))

# Applies database/schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Upserts the default admin on startup; never wipes data
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
