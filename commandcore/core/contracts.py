"""
Core data contracts for the command interpreter.

All components must adhere to these contracts for:
- Type safety
- Deterministic behavior
- Read-only handling of project snapshots
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date
from enum import Enum
from typing import Optional, Dict, Any, Union
from loguru import logger


# ============================================================
# ENUMERATIONS
# ============================================================

class ProjectStatus(Enum):
    """Project lifecycle states used by the application."""
    PLANNING = "Planning"
    ON_TRACK = "On Track"
    AT_RISK = "At Risk"
    OFF_TRACK = "Off Track"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"


class Priority(Enum):
    """Task priority levels."""
    NONE = "None"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class IntentType(Enum):
    """Actionable command types a message can be classified into."""
    CREATE_TASK = "create-task"
    UPDATE_STATUS = "update-status"
    ASSIGN_TASK = "assign-task"
    UPDATE_PROGRESS = "update-progress"
    ADD_BUDGET = "add-budget"
    NONE = "none"


def _parse_date(value: Any) -> Optional[date]:
    if isinstance(value, date):
        return value
    if not value:
        return None
    return date.fromisoformat(str(value)[:10])


def _parse_enum(enum_cls, value: Any, default):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        logger.warning(f"Unknown {enum_cls.__name__} value {value!r}, using {default.value}")
        return default


# ============================================================
# PROJECT SNAPSHOT
# ============================================================

@dataclass(frozen=True)
class TeamMember:
    """A person on a project team."""
    name: str
    role: str = ""
    member_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TeamMember:
        return cls(
            name=data["name"],
            role=data.get("role", ""),
            member_id=data.get("id"),
        )


@dataclass(frozen=True)
class Task:
    """A task inside a project."""
    task_id: str
    name: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    due_date: Optional[date] = None
    assignee_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Task:
        return cls(
            task_id=str(data["id"]),
            name=data["name"],
            completed=bool(data.get("completed", False)),
            priority=_parse_enum(Priority, data.get("priority", "Medium"), Priority.MEDIUM),
            due_date=_parse_date(data.get("dueDate")),
            assignee_id=data.get("assigneeId"),
        )


@dataclass(frozen=True)
class Project:
    """
    Read-only project snapshot supplied by the application.

    The interpreter only reads these fields to resolve references
    and to drive suggestion heuristics. It never mutates them.
    """
    project_id: str
    name: str
    status: ProjectStatus = ProjectStatus.PLANNING
    progress: float = 0.0  # 0-100
    budget: Optional[float] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    tasks: tuple = ()
    team_members: tuple = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Project:
        """Build a snapshot from the application's JSON shape (camelCase keys)."""
        return cls(
            project_id=str(data["id"]),
            name=data["name"],
            status=_parse_enum(ProjectStatus, data.get("status", "Planning"), ProjectStatus.PLANNING),
            progress=float(data.get("progress") or 0),
            budget=data.get("budget"),
            start_date=_parse_date(data.get("startDate")),
            due_date=_parse_date(data.get("dueDate")),
            tasks=tuple(Task.from_dict(t) for t in data.get("tasks") or []),
            team_members=tuple(TeamMember.from_dict(m) for m in data.get("teamMembers") or []),
        )


# ============================================================
# INTENT DATA VARIANTS
# ============================================================

@dataclass(frozen=True)
class CreateTaskData:
    """Fields extracted for a create-task command."""
    task_name: Optional[str] = None
    project_name: Optional[str] = None
    project_id: Optional[str] = None
    priority: Priority = Priority.MEDIUM
    due_date: Optional[str] = None  # YYYY-MM-DD


@dataclass(frozen=True)
class UpdateStatusData:
    """Fields extracted for an update-status command."""
    project_name: Optional[str] = None
    project_id: Optional[str] = None
    status: Optional[ProjectStatus] = None


@dataclass(frozen=True)
class AssignTaskData:
    """Fields extracted for an assign-task command."""
    task_name: Optional[str] = None
    assignee: Optional[str] = None
    project_name: Optional[str] = None
    project_id: Optional[str] = None


@dataclass(frozen=True)
class UpdateProgressData:
    """Fields extracted for an update-progress command."""
    project_name: Optional[str] = None
    project_id: Optional[str] = None
    progress: int = 0


@dataclass(frozen=True)
class AddBudgetData:
    """Fields extracted for an add-budget command."""
    project_name: Optional[str] = None
    project_id: Optional[str] = None
    budget: int = 0


@dataclass(frozen=True)
class NoIntentData:
    """Placeholder payload when nothing was recognized."""


IntentData = Union[
    CreateTaskData,
    UpdateStatusData,
    AssignTaskData,
    UpdateProgressData,
    AddBudgetData,
    NoIntentData,
]

INTENT_DATA_TYPES: Dict[IntentType, type] = {
    IntentType.CREATE_TASK: CreateTaskData,
    IntentType.UPDATE_STATUS: UpdateStatusData,
    IntentType.ASSIGN_TASK: AssignTaskData,
    IntentType.UPDATE_PROGRESS: UpdateProgressData,
    IntentType.ADD_BUDGET: AddBudgetData,
    IntentType.NONE: NoIntentData,
}


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# ============================================================
# RESULT TYPE
# ============================================================

@dataclass(frozen=True)
class DetectedIntent:
    """
    Result of classifying a single message.

    `data` is the variant matching `type`; `raw_text` is the
    untouched input message.
    """
    type: IntentType
    confidence: float
    data: IntentData = field(default_factory=NoIntentData)
    raw_text: str = ""

    def __post_init__(self):
        expected = INTENT_DATA_TYPES[self.type]
        if not isinstance(self.data, expected):
            raise TypeError(
                f"{self.type.value} intent requires {expected.__name__}, "
                f"got {type(self.data).__name__}"
            )
        # Frozen dataclass: clamp through object.__setattr__
        object.__setattr__(self, "confidence", min(1.0, max(0.0, float(self.confidence))))

    @classmethod
    def none(cls, message: str) -> DetectedIntent:
        return cls(type=IntentType.NONE, confidence=0.0, data=NoIntentData(), raw_text=message)

    def data_dict(self) -> Dict[str, Any]:
        """Populated data fields keyed the way the application expects."""
        result = {}
        for f in fields(self.data):
            value = getattr(self.data, f.name)
            if value is None:
                continue
            if isinstance(value, Enum):
                value = value.value
            result[_camel_case(f.name)] = value
        return result

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "confidence": self.confidence,
            "data": self.data_dict(),
            "rawText": self.raw_text,
        }
