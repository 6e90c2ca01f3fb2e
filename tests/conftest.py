from datetime import date

import pytest

from commandcore.core.contracts import Project, ProjectStatus, Task, TeamMember


TODAY = date(2026, 10, 19)


def make_tasks(count: int):
    return tuple(Task(task_id=f"t{i}", name=f"Task {i}") for i in range(count))


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def projects():
    return [
        Project(
            project_id="p1",
            name="Atlas",
            status=ProjectStatus.ON_TRACK,
            progress=40,
            budget=10000,
            start_date=date(2026, 1, 1),
            due_date=date(2026, 12, 31),
            tasks=make_tasks(4),
            team_members=(TeamMember(name="Maria", role="Designer"),),
        ),
        Project(
            project_id="p2",
            name="Atlas Redesign",
            status=ProjectStatus.AT_RISK,
            progress=20,
            tasks=make_tasks(1),
        ),
        Project(
            project_id="p3",
            name="Beacon",
            status=ProjectStatus.PLANNING,
            progress=0,
            budget=2500,
            tasks=make_tasks(5),
        ),
    ]
