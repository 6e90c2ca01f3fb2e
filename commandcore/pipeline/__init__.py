"""
Interpreter pipeline wiring classification and suggestions.
"""

from .interpreter import CommandInterpreter, InterpreterConfig
