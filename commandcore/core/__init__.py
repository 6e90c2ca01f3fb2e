"""
Core data contracts for the command interpreter.

Contents:
- Project snapshot types supplied by the application (read-only)
- Status, priority and intent-type enumerations
- Per-intent data variants and the DetectedIntent result
"""

from .contracts import (
    ProjectStatus,
    Priority,
    IntentType,
    Project,
    Task,
    TeamMember,
    DetectedIntent,
)
