"""
Tests for the core data contracts.

Run with: python -m pytest tests/test_contracts.py -v
"""

from datetime import date

import pytest

from commandcore.core.contracts import (
    AddBudgetData,
    DetectedIntent,
    IntentType,
    NoIntentData,
    Priority,
    Project,
    ProjectStatus,
    UpdateStatusData,
)


class TestDetectedIntent:

    def test_confidence_is_clamped(self):
        high = DetectedIntent(IntentType.ADD_BUDGET, 1.7, AddBudgetData(budget=10))
        low = DetectedIntent(IntentType.ADD_BUDGET, -0.2, AddBudgetData())
        assert high.confidence == 1.0
        assert low.confidence == 0.0

    def test_data_variant_must_match_type(self):
        with pytest.raises(TypeError):
            DetectedIntent(IntentType.UPDATE_STATUS, 0.9, AddBudgetData())

    def test_none_intent(self):
        intent = DetectedIntent.none("hi")
        assert intent.type == IntentType.NONE
        assert intent.confidence == 0.0
        assert intent.data == NoIntentData()
        assert intent.to_dict() == {"type": "none", "confidence": 0.0, "data": {}, "rawText": "hi"}

    def test_to_dict_uses_camel_case_and_omits_absent_fields(self):
        intent = DetectedIntent(
            IntentType.UPDATE_STATUS,
            0.9,
            UpdateStatusData(project_name="Atlas", status=ProjectStatus.AT_RISK),
            raw_text="Atlas is now at risk",
        )
        assert intent.to_dict() == {
            "type": "update-status",
            "confidence": 0.9,
            "data": {"projectName": "Atlas", "status": "At Risk"},
            "rawText": "Atlas is now at risk",
        }


class TestProjectSnapshot:

    def test_from_application_json(self):
        project = Project.from_dict({
            "id": 7,
            "name": "Atlas",
            "status": "At Risk",
            "progress": 35,
            "budget": 12000,
            "startDate": "2026-01-05",
            "dueDate": "2026-06-30T00:00:00.000Z",
            "tasks": [{"id": "t1", "name": "Kickoff", "priority": "High"}],
            "teamMembers": [{"id": "u1", "name": "Maria", "role": "Designer"}],
        })

        assert project.project_id == "7"
        assert project.status == ProjectStatus.AT_RISK
        assert project.start_date == date(2026, 1, 5)
        assert project.due_date == date(2026, 6, 30)
        assert project.tasks[0].priority == Priority.HIGH
        assert project.team_members[0].name == "Maria"

    def test_defaults_and_unknown_values(self):
        project = Project.from_dict({"id": "p1", "name": "Atlas", "status": "Archived", "dueDate": ""})

        assert project.status == ProjectStatus.PLANNING
        assert project.due_date is None
        assert project.budget is None
        assert project.tasks == ()

    def test_missing_name_raises(self):
        with pytest.raises(KeyError):
            Project.from_dict({"id": "p1"})
