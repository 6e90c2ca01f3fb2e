"""
Intent Classification Module.

Responsibilities:
- Natural language → structured intents
- Project reference resolution
- Ordered, short-circuiting confidence scoring

Processing order (NEVER REORDER):
1. Lowercase the message once
2. Run the per-intent scorers in priority order
3. Extract entities (project, status, numbers, dates) while scoring
4. Return the first confident intent, or "none"
"""

from .classifier import classify, SCORER_PIPELINE, CONFIDENCE_THRESHOLD
from .project_resolver import resolve_project
