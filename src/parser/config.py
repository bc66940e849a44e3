"""Reference clock configuration for relative date resolution."""

import logging
import os
from datetime import datetime, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import ParserConfigError

logger = logging.getLogger(__name__)

TIMEZONE_ENV_VAR = "TASK_PARSER_TIMEZONE"


def get_timezone() -> Optional[tzinfo]:
    """Return the timezone configured for the reference clock.

    Reads TASK_PARSER_TIMEZONE (an IANA name such as "Europe/Berlin").
    When unset or empty, None is returned and the system local time is used.

    Raises:
        ParserConfigError: If the configured name is not a known timezone.
    """
    name = os.getenv(TIMEZONE_ENV_VAR, "").strip()
    if not name:
        return None

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ParserConfigError(TIMEZONE_ENV_VAR, name, "unknown timezone") from e


def reference_now(now: Optional[datetime] = None) -> datetime:
    """Resolve the reference instant for a parse call.

    Args:
        now: Explicit reference instant. Returned unchanged when given.

    Returns:
        The reference instant, defaulting to the current wall-clock time
        in the configured timezone.
    """
    if now is not None:
        return now

    tz = get_timezone()
    current = datetime.now(tz)
    logger.debug("Using wall-clock reference time %s", current.isoformat())
    return current
