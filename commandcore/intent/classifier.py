"""
Classification Pipeline.

Runs the per-intent scorers in strict order:

1. update-status
2. assign-task
3. create-task
4. update-progress
5. add-budget

The first scorer whose confidence exceeds the threshold wins and
later scorers are never evaluated. This is first-above-threshold,
not highest-score: a 0.72 status match beats a 0.95 progress match.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, List, Optional, Tuple
from loguru import logger

from commandcore.core.contracts import DetectedIntent, Project
from commandcore.intent.scorers import (
    score_update_status,
    score_assign_task,
    score_create_task,
    score_update_progress,
    score_add_budget,
)


CONFIDENCE_THRESHOLD = 0.7

Scorer = Callable[[str, str, List[Project], Optional[date]], DetectedIntent]

# Order is significant (NEVER REORDER)
SCORER_PIPELINE: Tuple[Scorer, ...] = (
    score_update_status,
    score_assign_task,
    score_create_task,
    score_update_progress,
    score_add_budget,
)


def classify(
    message: str,
    projects: List[Project],
    threshold: float = CONFIDENCE_THRESHOLD,
    today: Optional[date] = None,
) -> DetectedIntent:
    """
    Classify a user message into a structured intent.

    Args:
        message: Raw user message
        projects: Read-only project snapshot used to resolve references
        threshold: Confidence a scorer must exceed to be selected
        today: Reference date for relative due dates

    Returns:
        The first confident DetectedIntent, or a "none" intent
    """
    lowered = message.lower()

    for scorer in SCORER_PIPELINE:
        candidate = scorer(message, lowered, projects, today)
        logger.debug(f"{candidate.type.value}: confidence={candidate.confidence:.2f}")
        if candidate.confidence > threshold:
            return candidate

    return DetectedIntent.none(message)
