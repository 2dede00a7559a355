"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_MONTHLY_SALARY = 30000
SALARY_DAY_DIVISOR = 30
MONEY_PLACES = 2
# employees.salary is DECIMAL(12, 2)
MAX_SALARY = Decimal("9999999999.99")

# column widths in database/schema.sql
NAME_MAX_LENGTH = 100
USERNAME_MAX_LENGTH = 150
EMP_CODE_MAX_LENGTH = 50
PASSWORD_MAX_LENGTH = 255

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_ADMIN_CODE = "ADMIN001"
DEFAULT_ADMIN_SALARY = 50000

DEFAULT_AUTH_HEADER = "X-User-Email"
SESSION_IDENTITY_KEY = "identifier"
