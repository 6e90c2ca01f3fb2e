"""
Command Interpreter.

Entry point used by the application's chat and suggestion panels:

1. Classify a message against the current project snapshot
2. Produce proactive suggestions from the same snapshot

The interpreter holds configuration only. Projects are passed in on
every call and are never stored or mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional
from loguru import logger

from commandcore.core.contracts import DetectedIntent, IntentType, Project
from commandcore.intent.classifier import classify, CONFIDENCE_THRESHOLD
from commandcore.suggest.suggestion_generator import generate_suggestions, MAX_SUGGESTIONS


@dataclass(frozen=True)
class InterpreterConfig:
    """Configuration for the interpreter."""
    confidence_threshold: float = CONFIDENCE_THRESHOLD
    max_suggestions: int = MAX_SUGGESTIONS

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> InterpreterConfig:
        """Build from the parsed settings.yaml mapping."""
        return cls(
            confidence_threshold=float(
                (settings.get('classifier') or {}).get('confidence_threshold', CONFIDENCE_THRESHOLD)
            ),
            max_suggestions=int(
                (settings.get('suggestions') or {}).get('max_suggestions', MAX_SUGGESTIONS)
            ),
        )


class CommandInterpreter:
    """
    Natural-language command interpreter.

    Guarantees:
    - Scorer order is NEVER reordered
    - Never raises on message text; unknown input becomes a "none" intent
    - Project snapshots are read, never written
    """

    def __init__(self, config: Optional[InterpreterConfig] = None):
        """
        Initialize interpreter.

        Args:
            config: Interpreter configuration
        """
        self.config = config or InterpreterConfig()

    def interpret(
        self,
        message: str,
        projects: List[Project],
        today: Optional[date] = None,
    ) -> DetectedIntent:
        """Classify `message` against `projects`."""
        intent = classify(
            message,
            projects,
            threshold=self.config.confidence_threshold,
            today=today,
        )

        if intent.type == IntentType.NONE:
            logger.info(f"No intent recognized: {message!r}")
        else:
            logger.info(f"Intent {intent.type.value} ({intent.confidence:.2f}): {message!r}")
            if getattr(intent.data, 'project_id', None) is None and getattr(intent.data, 'project_name', None):
                logger.debug(f"Project {intent.data.project_name!r} not resolved")

        return intent

    def suggest(
        self,
        projects: List[Project],
        today: Optional[date] = None,
    ) -> List[str]:
        """Proactive suggestions for `projects`."""
        return generate_suggestions(projects, limit=self.config.max_suggestions, today=today)
