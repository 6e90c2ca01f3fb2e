"""
Suggestion Module.

Responsibilities:
- State-driven recommendations from the project snapshot
- Stable (project, heuristic) ordering with a global cap
"""

from .suggestion_generator import generate_suggestions, expected_progress, MAX_SUGGESTIONS
