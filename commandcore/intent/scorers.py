"""
Per-Intent Scorers.

Each scorer looks at one candidate intent type and returns a
DetectedIntent carrying additive evidence as its confidence:

    update-status    pattern +0.4, status keyword +0.3, project +0.2
    assign-task      pattern +0.4, assignee +0.3, task name +0.2, project +0.1
    create-task      pattern +0.3, task name +0.3, project +0.2,
                     explicit high priority +0.1, due date +0.1
    update-progress  pattern +0.3 (+0.3 more per pattern if a number exists),
                     project +0.2
    add-budget       pattern +0.3, amount +0.4, project +0.2

Totals are clamped to 1.0 by DetectedIntent.
"""

from __future__ import annotations

import re
from datetime import date
from typing import List, Optional

from commandcore.core.contracts import (
    DetectedIntent,
    IntentType,
    Project,
    Priority,
    CreateTaskData,
    UpdateStatusData,
    AssignTaskData,
    UpdateProgressData,
    AddBudgetData,
)
from commandcore.extract.date_extractor import extract_date
from commandcore.extract.entities import (
    extract_status,
    extract_priority,
    extract_percentage,
    extract_amount,
)
from commandcore.intent.project_resolver import find_project_reference


def _compile(patterns: List[str]) -> List[re.Pattern]:
    return [re.compile(p, re.I) for p in patterns]


def _count_matches(patterns: List[re.Pattern], text: str) -> int:
    return sum(1 for pattern in patterns if pattern.search(text))


# ============================================================
# INTENT PATTERNS
# ============================================================

_STATUS_WORDS = r'(?:on track|at risk|off track|completed)'

UPDATE_STATUS_PATTERNS = _compile([
    r'(?:update|change|set|mark)\s+(?:the\s+)?(?:project\s+)?status',
    r'(?:mark|set)\s+(?:project\s+)?(?:as|to)\s+' + _STATUS_WORDS,
    r'(?:project\s+)?(?:is\s+now|became)\s+' + _STATUS_WORDS,
    r'status\s+(?:to|as|is)\s+' + _STATUS_WORDS,
])

ASSIGN_TASK_PATTERNS = _compile([
    r'(?:assign|give)\s+(?:the\s+)?task',
    r'(?:assign|allocate)\s+(?:this|that)\s+to',
    r'(?:can|could)\s+you\s+assign',
    r'task\s+(?:to|for)\s+(\w+)',
])

CREATE_TASK_PATTERNS = _compile([
    r'(?:create|add|make|new)\s+(?:a\s+)?task',
    r'(?:add|create)\s+(?:a\s+)?(?:new\s+)?task\s+(?:called|named|for)',
    r'task:\s*(.+)',
    r'(?:can you|please)\s+(?:create|add)\s+(?:a\s+)?task',
])

UPDATE_PROGRESS_PATTERNS = _compile([
    r'(?:update|set|change)\s+(?:the\s+)?progress',
    r'progress\s+(?:is|to)\s+(\d+)%?',
    r'(\d+)%?\s+(?:complete|done|finished)',
    r'(?:mark|set)\s+(?:as\s+)?(\d+)%',
])

ADD_BUDGET_PATTERNS = _compile([
    r'(?:set|add|update)\s+(?:the\s+)?budget',
    r'budget\s+(?:is|to)\s+\$?(\d+)',
    r'\$(\d+)\s+budget',
])

# ============================================================
# FIELD CAPTURE PATTERNS
# ============================================================

# "... for the Atlas project", "... to Atlas to ..."
STATUS_PROJECT_RE = re.compile(r'(?:for|in|on|to)\s+(?:the\s+)?["\']?([^"\'.]+?)["\']?\s+(?:project|to)', re.I)
# "Atlas is ...", "Atlas status ..."
STATUS_LEADING_PROJECT_RE = re.compile(r'^["\']?([^"\'.]+?)["\']?\s+(?:is|status|project)', re.I)
# "... in the Atlas project"
PROJECT_SUFFIX_RE = re.compile(r'(?:in|on|for)\s+(?:the\s+)?["\']?([^"\'.]+?)["\']?\s+project', re.I)
CREATE_PROJECT_RE = re.compile(r'(?:for|in|on|to)\s+(?:the\s+)?(?:project\s+)?["\']?([^"\'.]+)["\']?\s+project', re.I)

ASSIGNEE_RE = re.compile(r'(?:to|for)\s+(\w+(?:\s+\w+)?)', re.I)
ASSIGN_TASK_NAME_RE = re.compile(r'(?:task|todo)\s+["\']?([^"\'.]+?)["\']?\s+to', re.I)
CREATE_TASK_NAME_RE = re.compile(r'(?:task|todo)\s+(?:called|named|for|to|:)\s*["\']?([^"\'.]+)["\']?', re.I)


# ============================================================
# SCORERS
# ============================================================

def score_update_status(
    message: str,
    lowered: str,
    projects: List[Project],
    today: Optional[date] = None,
) -> DetectedIntent:
    """Score "set status to at risk for the Atlas project" style commands."""
    confidence = 0.4 * _count_matches(UPDATE_STATUS_PATTERNS, lowered)

    status = extract_status(lowered)
    if status is not None:
        confidence += 0.3

    project_name, project = find_project_reference(message, STATUS_PROJECT_RE, projects)
    if project_name is None:
        project_name, project = find_project_reference(message, STATUS_LEADING_PROJECT_RE, projects)
    if project is not None:
        confidence += 0.2

    return DetectedIntent(
        type=IntentType.UPDATE_STATUS,
        confidence=confidence,
        data=UpdateStatusData(
            project_name=project_name,
            project_id=project.project_id if project else None,
            status=status,
        ),
        raw_text=message,
    )


def score_assign_task(
    message: str,
    lowered: str,
    projects: List[Project],
    today: Optional[date] = None,
) -> DetectedIntent:
    """Score "assign task Design Review to Maria" style commands."""
    confidence = 0.4 * _count_matches(ASSIGN_TASK_PATTERNS, lowered)

    assignee = None
    match = ASSIGNEE_RE.search(message)
    if match:
        assignee = match.group(1).strip()
        confidence += 0.3

    task_name = None
    match = ASSIGN_TASK_NAME_RE.search(message)
    if match:
        task_name = match.group(1).strip()
        confidence += 0.2

    project_name, project = find_project_reference(message, PROJECT_SUFFIX_RE, projects)
    if project is not None:
        confidence += 0.1

    return DetectedIntent(
        type=IntentType.ASSIGN_TASK,
        confidence=confidence,
        data=AssignTaskData(
            task_name=task_name,
            assignee=assignee,
            project_name=project_name,
            project_id=project.project_id if project else None,
        ),
        raw_text=message,
    )


def score_create_task(
    message: str,
    lowered: str,
    projects: List[Project],
    today: Optional[date] = None,
) -> DetectedIntent:
    """Score "create a task called ... for the Atlas project" style commands."""
    confidence = 0.3 * _count_matches(CREATE_TASK_PATTERNS, lowered)

    task_name = None
    match = CREATE_TASK_NAME_RE.search(message)
    if match:
        task_name = match.group(1).strip()
        confidence += 0.3

    project_name, project = find_project_reference(message, CREATE_PROJECT_RE, projects)
    if project is not None:
        confidence += 0.2

    # Only an explicit high priority counts as evidence
    priority = extract_priority(lowered)
    if priority == Priority.HIGH:
        confidence += 0.1

    due_date = extract_date(message, today=today)
    if due_date:
        confidence += 0.1

    return DetectedIntent(
        type=IntentType.CREATE_TASK,
        confidence=confidence,
        data=CreateTaskData(
            task_name=task_name,
            project_name=project_name,
            project_id=project.project_id if project else None,
            priority=priority or Priority.MEDIUM,
            due_date=due_date,
        ),
        raw_text=message,
    )


def score_update_progress(
    message: str,
    lowered: str,
    projects: List[Project],
    today: Optional[date] = None,
) -> DetectedIntent:
    """Score "set progress to 65% for the Atlas project" style commands."""
    confidence = 0.0
    progress = 0

    # The first number in the message is taken as the progress value,
    # whatever it belongs to, and counts once per matching pattern.
    number = extract_percentage(message)
    for pattern in UPDATE_PROGRESS_PATTERNS:
        if pattern.search(message):
            confidence += 0.3
            if number is not None:
                progress = number
                confidence += 0.3

    project_name, project = find_project_reference(message, PROJECT_SUFFIX_RE, projects)
    if project is not None:
        confidence += 0.2

    return DetectedIntent(
        type=IntentType.UPDATE_PROGRESS,
        confidence=confidence,
        data=UpdateProgressData(
            project_name=project_name,
            project_id=project.project_id if project else None,
            progress=progress,
        ),
        raw_text=message,
    )


def score_add_budget(
    message: str,
    lowered: str,
    projects: List[Project],
    today: Optional[date] = None,
) -> DetectedIntent:
    """Score "set the budget to $50,000 for the Atlas project" style commands."""
    confidence = 0.3 * _count_matches(ADD_BUDGET_PATTERNS, message)

    budget = 0
    amount = extract_amount(message)
    if amount is not None:
        budget = amount
        confidence += 0.4

    project_name, project = find_project_reference(message, PROJECT_SUFFIX_RE, projects)
    if project is not None:
        confidence += 0.2

    return DetectedIntent(
        type=IntentType.ADD_BUDGET,
        confidence=confidence,
        data=AddBudgetData(
            project_name=project_name,
            project_id=project.project_id if project else None,
            budget=budget,
        ),
        raw_text=message,
    )
