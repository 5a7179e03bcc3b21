"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_YEAR = 2000
MAX_YEAR = 2100

EMPLOYEE_ID_MAX_LENGTH = 20

# Column widths of the employees table.
EMPLOYEE_TEXT_LIMITS = {
    "id": EMPLOYEE_ID_MAX_LENGTH,
    "name": 100,
    "place": 100,
    "contact": 20,
    "image_url": 255,
}
EMPLOYEE_ID_PREFIX = "EMP"

HALF_DAY_FACTOR = "0.5"

EXPORT_FILENAME_TEMPLATE = "attendance_{start}_to_{end}.csv"

DB_WAIT_RETRIES = 30
DB_WAIT_DELAY_SECONDS = 2.0
