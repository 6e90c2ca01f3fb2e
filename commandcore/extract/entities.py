"""
Keyword and numeric entity extraction.

Stateless helpers shared by the intent scorers:
- status keywords -> ProjectStatus
- priority keywords -> Priority
- first numeric token (percentage or currency)
"""

from __future__ import annotations

import re
from typing import Optional
from loguru import logger

from commandcore.core.contracts import ProjectStatus, Priority


# ============================================================
# KEYWORD TABLES
# ============================================================

# Evaluated in order; first containing keyword wins
STATUS_KEYWORDS = [
    (("on track",), ProjectStatus.ON_TRACK),
    (("at risk",), ProjectStatus.AT_RISK),
    (("off track", "on hold"), ProjectStatus.ON_HOLD),
    (("completed", "complete"), ProjectStatus.COMPLETED),
]

HIGH_PRIORITY_KEYWORDS = ("high priority", "urgent", "important", "critical")
LOW_PRIORITY_KEYWORDS = ("low priority",)

# ============================================================
# NUMERIC PATTERNS
# ============================================================

PERCENTAGE_PATTERN = re.compile(r'(\d+)%?')
AMOUNT_PATTERN = re.compile(r'\$?(\d+(?:,\d{3})*(?:\.\d{2})?)')


def extract_status(lowered: str) -> Optional[ProjectStatus]:
    """Map the first matching status keyword to a ProjectStatus."""
    for keywords, status in STATUS_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return status
    return None


def extract_priority(lowered: str) -> Optional[Priority]:
    """
    Detect an explicit priority.

    Returns None when the message states no priority, so callers
    can tell "defaulted" apart from "explicitly high".
    """
    if any(keyword in lowered for keyword in HIGH_PRIORITY_KEYWORDS):
        return Priority.HIGH
    if any(keyword in lowered for keyword in LOW_PRIORITY_KEYWORDS):
        return Priority.LOW
    return None


def _to_int(digits: str) -> Optional[int]:
    try:
        return int(digits)
    except ValueError:
        # Exceeds the interpreter's integer string conversion limit
        logger.debug(f"Ignoring {len(digits)}-digit number")
        return None


def extract_percentage(message: str) -> Optional[int]:
    """First integer anywhere in the message, with or without a % sign."""
    match = PERCENTAGE_PATTERN.search(message)
    if not match:
        return None
    return _to_int(match.group(1))


def extract_amount(message: str) -> Optional[int]:
    """
    First currency-style number in the message.

    Thousands separators are dropped and any cents are truncated:
    "$12,500.75" -> 12500.
    """
    match = AMOUNT_PATTERN.search(message)
    if not match:
        return None
    whole = match.group(1).replace(",", "").split(".")[0]
    return _to_int(whole)
