from __future__ import annotations

import logging
from datetime import date

from ..core.constants import TODAY_ONLY_MESSAGE
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def ensure_marking_allowed(selected_date: date, today: date) -> None:
    """Attendance may only be written for the current local day.

    Rejects back-dated and future-dated marks alike.
    """
    if selected_date != today:
        logger.info("Rejected attendance mark for %s (today is %s)", selected_date, today)
        raise ValidationError(TODAY_ONLY_MESSAGE)
