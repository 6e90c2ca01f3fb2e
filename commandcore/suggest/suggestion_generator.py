"""
Proactive Suggestion Generator.

Scans the project snapshot and proposes follow-up actions.
For each project, in list order, heuristics run in this order:

1. At-risk status        -> move it back on track
2. Schedule slip         -> bring progress up to the expected value
3. Fewer than 3 tasks    -> add tasks
4. No budget             -> set a budget

Collection stops as soon as the cap is reached, even mid-project.
"""

from __future__ import annotations

import math
from datetime import date
from typing import List, Optional
from loguru import logger

from commandcore.core.contracts import Project, ProjectStatus


MAX_SUGGESTIONS = 5
DEFAULT_EXPECTED_PROGRESS = 50.0
PROGRESS_SLIP_THRESHOLD = 20.0
MIN_TASK_COUNT = 3


def expected_progress(project: Project, today: Optional[date] = None) -> float:
    """
    Linear schedule position of a project, in percent.

    Elapsed days over scheduled days, clamped to [0, 100].
    Projects without both dates are assumed to be halfway.
    """
    if project.start_date is None or project.due_date is None:
        return DEFAULT_EXPECTED_PROGRESS

    today = today or date.today()
    elapsed_days = (today - project.start_date).days
    total_days = (project.due_date - project.start_date).days

    if total_days == 0:
        # Zero-length schedule: due as soon as it started
        return 100.0 if elapsed_days > 0 else 0.0

    return min(100.0, max(0.0, elapsed_days / total_days * 100))


def _project_suggestions(project: Project, today: Optional[date]):
    if project.status == ProjectStatus.AT_RISK:
        yield f"Update status for {project.name} to {ProjectStatus.ON_TRACK.value}"

    expected = expected_progress(project, today)
    if expected - project.progress > PROGRESS_SLIP_THRESHOLD:
        yield f"Update progress for {project.name} to {math.floor(expected)}%"

    if len(project.tasks) < MIN_TASK_COUNT:
        yield f"Add tasks to {project.name}"

    if not project.budget:
        yield f"Set budget for {project.name}"


def generate_suggestions(
    projects: List[Project],
    limit: int = MAX_SUGGESTIONS,
    today: Optional[date] = None,
) -> List[str]:
    """
    Propose up to `limit` actions for the given projects.

    Args:
        projects: Read-only project snapshot
        limit: Maximum number of suggestions
        today: Reference date for schedule-slip checks

    Returns:
        Suggestions in (project order, heuristic order)
    """
    suggestions: List[str] = []
    if limit <= 0:
        return suggestions

    for project in projects:
        for suggestion in _project_suggestions(project, today):
            suggestions.append(suggestion)
            if len(suggestions) >= limit:
                logger.debug(f"Suggestion cap of {limit} reached at {project.name}")
                return suggestions

    logger.debug(f"Generated {len(suggestions)} suggestion(s) for {len(projects)} project(s)")
    return suggestions
