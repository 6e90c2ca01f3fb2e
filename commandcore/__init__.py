"""
Natural-Language Command Interpreter for Project Management

Converts free-text chat messages ("set status to at risk for the
Atlas project") into structured, typed intents, and proposes
proactive actions from the current project state.

Top Priorities (strict order):
1. Deterministic, explainable behavior
2. Never mutate the caller's project data
3. Degrade to "no intent" rather than raise
"""

__version__ = "0.1.0"
__author__ = "Command Interpreter Team"

from commandcore.core.contracts import DetectedIntent, IntentType, Project, ProjectStatus
from commandcore.intent.classifier import classify
from commandcore.suggest.suggestion_generator import generate_suggestions
from commandcore.pipeline.interpreter import CommandInterpreter, InterpreterConfig
