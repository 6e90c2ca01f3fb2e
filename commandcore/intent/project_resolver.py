"""
Project Resolution.

Resolves free-text project name fragments to known projects using:
- Case-insensitive exact name match
- Case-insensitive substring match in either direction

Substring ties are broken by list order only. With overlapping names
("Atlas" vs "Atlas Redesign") the earlier project wins even when a
later one is the better fit.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple
from loguru import logger

from commandcore.core.contracts import Project


def resolve_project(name_fragment: str, projects: List[Project]) -> Optional[Project]:
    """
    Resolve a name fragment to a project.

    Args:
        name_fragment: Name as written by the user
        projects: Current project snapshot

    Returns:
        Matching project, or None
    """
    fragment = name_fragment.lower()

    for project in projects:
        if project.name.lower() == fragment:
            return project

    for project in projects:
        name = project.name.lower()
        if fragment in name or name in fragment:
            return project

    logger.debug(f"No project matches {name_fragment!r}")
    return None


def find_project_reference(
    message: str,
    pattern: re.Pattern,
    projects: List[Project],
) -> Tuple[Optional[str], Optional[Project]]:
    """
    Capture a project name with `pattern` and resolve it.

    Returns:
        Tuple of (captured_name, resolved_project); either may be None
    """
    match = pattern.search(message)
    if not match:
        return (None, None)

    project_name = match.group(1).strip()
    return (project_name, resolve_project(project_name, projects))
