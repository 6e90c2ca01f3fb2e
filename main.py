#!/usr/bin/env python3
"""
Natural-Language Command Interpreter

Main entry point for classifying chat commands and generating
proactive suggestions against a project snapshot.

Usage:
    python main.py classify "MESSAGE" --projects SNAPSHOT [--config CONFIG_PATH]
    python main.py suggest --projects SNAPSHOT [--config CONFIG_PATH]

The snapshot is a YAML or JSON list of projects in the application's
shape (id, name, status, progress, budget, startDate, dueDate,
tasks, teamMembers).

Example Commands:
    "update status to completed for Atlas project"
    "assign task Design Review to Maria"
    "set progress to 65% for Atlas project"
    "create a task called Write launch notes for the Atlas project tomorrow"
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import yaml
from loguru import logger

from commandcore.core.contracts import Project
from commandcore.pipeline.interpreter import CommandInterpreter, InterpreterConfig


# ============================================================
# LOGGING CONFIGURATION
# ============================================================

def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """Configure logging."""
    logger.remove()  # Remove default handler

    # Console output with colors
    logger.add(
        sys.stderr,
        level=log_level,
        format="<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{module}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>",
        colorize=True,
    )

    # File output
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {module}:{line} | {message}",
            rotation="10 MB",
            retention="7 days",
        )


# ============================================================
# CONFIGURATION & INPUT
# ============================================================

def load_config(config_path: Optional[str] = None) -> dict:
    """Load settings from YAML, falling back to the bundled defaults."""
    if config_path and Path(config_path).exists():
        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    if config_path:
        logger.warning(f"Config file {config_path} not found, using defaults")

    default_path = Path(__file__).parent / "config" / "settings.yaml"
    if default_path.exists():
        with open(default_path) as f:
            return yaml.safe_load(f) or {}

    return {}


def load_projects(snapshot_path: Optional[str]) -> List[Project]:
    """
    Load a project snapshot (YAML or JSON list of projects).

    Raises:
        ValueError: The document is not a list of project mappings
        KeyError: A project is missing its id or name
    """
    if not snapshot_path:
        return []

    with open(snapshot_path) as f:
        document = yaml.safe_load(f)

    if document is None:
        return []
    if isinstance(document, dict) and 'projects' in document:
        document = document['projects']
    if not isinstance(document, list) or not all(isinstance(p, dict) for p in document):
        raise ValueError(f"{snapshot_path}: expected a list of projects")

    projects = [Project.from_dict(p) for p in document]
    logger.debug(f"Loaded {len(projects)} project(s) from {snapshot_path}")
    return projects


# ============================================================
# ENTRY POINT
# ============================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Natural-language command interpreter for project management",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to configuration file",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from config, else WARNING)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Log file path (default: from config, else none)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_parser = subparsers.add_parser("classify", help="Classify a message")
    classify_parser.add_argument("message", type=str, help="User message")
    classify_parser.add_argument("--projects", "-p", type=str, default=None, help="Project snapshot file")

    suggest_parser = subparsers.add_parser("suggest", help="Suggest actions for projects")
    suggest_parser.add_argument("--projects", "-p", type=str, default=None, help="Project snapshot file")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    settings = load_config(args.config)
    logging_settings = settings.get('logging', {}) or {}

    # Setup logging
    setup_logging(
        args.log_level or logging_settings.get('level', 'WARNING'),
        args.log_file or logging_settings.get('file'),
    )

    try:
        projects = load_projects(args.projects)
    except (OSError, yaml.YAMLError, ValueError, KeyError) as e:
        logger.error(f"Could not load project snapshot: {e}")
        return 1

    interpreter = CommandInterpreter(InterpreterConfig.from_settings(settings))

    if args.command == "classify":
        intent = interpreter.interpret(args.message, projects)
        print(json.dumps(intent.to_dict(), indent=2))
    else:
        for suggestion in interpreter.suggest(projects):
            print(suggestion)

    return 0


if __name__ == "__main__":
    sys.exit(main())
