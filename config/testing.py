import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTH_STRATEGY = os.getenv("AUTH_STRATEGY", "body")
AUTH_HEADER = "X-User-Email"
PASSWORD_SCHEME = "plain"

DEFAULT_MONTHLY_SALARY = 30000
SALARY_DAY_DIVISOR = 30

ALLOW_SELF_REGISTRATION = False
ALLOW_SELF_MARKING = False

AUTO_INIT_DB = False
AUTO_SEED_DB = False
