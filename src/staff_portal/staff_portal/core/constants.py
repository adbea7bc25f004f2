"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_HISTORY_LIMIT = 10
HALF_DAY_FACTOR = Decimal("0.5")
DEFAULT_CURRENCY_SYMBOL = "₹"

TODAY_ONLY_MESSAGE = "You can only mark attendance for today!"
WEEKDAY_HEADERS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
