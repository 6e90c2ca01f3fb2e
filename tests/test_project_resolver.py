"""
Tests for project resolution.

Run with: python -m pytest tests/test_project_resolver.py -v
"""

from commandcore.core.contracts import Project
from commandcore.intent.project_resolver import resolve_project


def _projects(*names):
    return [Project(project_id=f"p{i}", name=name) for i, name in enumerate(names, start=1)]


class TestExactMatch:

    def test_case_insensitive_exact(self):
        projects = _projects("Atlas", "Beacon")
        assert resolve_project("beacon", projects).project_id == "p2"

    def test_exact_wins_over_earlier_substring_match(self):
        projects = _projects("Atlas Redesign", "Atlas")
        assert resolve_project("ATLAS", projects).project_id == "p2"


class TestSubstringMatch:

    def test_fragment_inside_project_name(self):
        projects = _projects("Atlas", "Mobile Onboarding")
        assert resolve_project("onboarding", projects).project_id == "p2"

    def test_project_name_inside_fragment(self):
        projects = _projects("Atlas", "Beacon")
        assert resolve_project("completed for Beacon", projects).project_id == "p2"

    def test_no_match(self):
        assert resolve_project("Zephyr", _projects("Atlas", "Beacon")) is None
        assert resolve_project("Atlas", []) is None


class TestKnownLimitations:
    """First substring match in list order wins, with no ranking"""

    def test_overlapping_names_resolve_to_first_in_list(self):
        projects = _projects("Atlas", "Atlas Redesign")
        # "Atlas Redesign v2" is closer to p2, but p1 comes first
        assert resolve_project("Atlas Redesign v2", projects).project_id == "p1"

    def test_result_depends_on_list_order(self):
        forward = _projects("Atlas", "Atlas Redesign")
        backward = list(reversed(forward))
        assert resolve_project("the atlas redesign work", forward).project_id == "p1"
        assert resolve_project("the atlas redesign work", backward).project_id == "p2"
