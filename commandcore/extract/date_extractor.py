"""
Relative and absolute date extraction.

Recognized, in priority order:
- "today"
- "tomorrow"
- "next week"        (+7 days)
- "in N days"
- a literal YYYY-MM-DD token

Only the first match is returned; one date per message.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Optional
from loguru import logger


# ============================================================
# DATE PATTERNS
# ============================================================

RELATIVE_DATE_PATTERNS = [
    (re.compile(r'today', re.I), 0),
    (re.compile(r'tomorrow', re.I), 1),
    (re.compile(r'next week', re.I), 7),
]

IN_DAYS_PATTERN = re.compile(r'in\s+(\d+)\s+days?', re.I)
ISO_DATE_PATTERN = re.compile(r'(\d{4}-\d{2}-\d{2})')


def extract_date(message: str, today: Optional[date] = None) -> Optional[str]:
    """
    Extract a due date from free text.

    Args:
        message: User message
        today: Reference date; defaults to the wall-clock date

    Returns:
        ISO date string (YYYY-MM-DD), or None
    """
    today = today or date.today()

    for pattern, offset_days in RELATIVE_DATE_PATTERNS:
        if pattern.search(message):
            return (today + timedelta(days=offset_days)).isoformat()

    match = IN_DAYS_PATTERN.search(message)
    if match:
        try:
            return (today + timedelta(days=int(match.group(1)))).isoformat()
        except (OverflowError, ValueError):
            logger.debug(f"Offset '{match.group(0)[:40]}' is outside the supported date range")
            return None

    match = ISO_DATE_PATTERN.search(message)
    if match:
        # Returned verbatim, even if it is not a valid calendar date
        return match.group(1)

    logger.debug("No date found in message")
    return None
