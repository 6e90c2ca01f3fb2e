"""
Tests for the interpreter facade and the command-line entry point.

Run with: python -m pytest tests/test_interpreter.py -v
"""

import json

import yaml

import main
from commandcore.core.contracts import IntentType
from commandcore.pipeline.interpreter import CommandInterpreter, InterpreterConfig


SNAPSHOT = [
    {
        "id": "p1",
        "name": "Atlas",
        "status": "At Risk",
        "progress": 80,
        "budget": 10000,
        "tasks": [{"id": "t1", "name": "Kickoff"}],
    },
    {
        "id": "p2",
        "name": "Beacon",
        "status": "On Track",
        "progress": 60,
        "tasks": [{"id": f"t{i}", "name": f"Task {i}"} for i in range(3)],
    },
]


class TestInterpreterConfig:

    def test_defaults(self):
        config = InterpreterConfig.from_settings({})
        assert config.confidence_threshold == 0.7
        assert config.max_suggestions == 5

    def test_from_settings(self):
        config = InterpreterConfig.from_settings({
            "classifier": {"confidence_threshold": 0.9},
            "suggestions": {"max_suggestions": 2},
        })
        assert config == InterpreterConfig(confidence_threshold=0.9, max_suggestions=2)


class TestCommandInterpreter:

    def test_interpret_uses_configured_threshold(self, projects):
        message = "assign task Design Review to Maria"

        assert CommandInterpreter().interpret(message, projects).type == IntentType.ASSIGN_TASK
        strict = CommandInterpreter(InterpreterConfig(confidence_threshold=0.95))
        assert strict.interpret(message, projects).type == IntentType.NONE

    def test_suggest_uses_configured_cap(self, projects, today):
        interpreter = CommandInterpreter(InterpreterConfig(max_suggestions=1))
        assert len(interpreter.suggest(projects, today=today)) == 1


class TestCommandLine:

    def _write_snapshot(self, tmp_path, document):
        path = tmp_path / "projects.yaml"
        path.write_text(yaml.safe_dump(document))
        return str(path)

    def test_classify_prints_intent_json(self, tmp_path, capsys):
        snapshot = self._write_snapshot(tmp_path, SNAPSHOT)

        code = main.main(["classify", "update status to completed for Atlas project", "--projects", snapshot])

        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["type"] == "update-status"
        assert output["data"]["projectId"] == "p1"
        assert output["data"]["status"] == "Completed"
        assert output["rawText"] == "update status to completed for Atlas project"

    def test_suggest_prints_one_per_line(self, tmp_path, capsys):
        snapshot = self._write_snapshot(tmp_path, {"projects": SNAPSHOT})

        code = main.main(["suggest", "--projects", snapshot])

        assert code == 0
        assert capsys.readouterr().out.splitlines() == [
            "Update status for Atlas to On Track",
            "Add tasks to Atlas",
            "Set budget for Beacon",
        ]

    def test_config_file_overrides_cap(self, tmp_path, capsys):
        snapshot = self._write_snapshot(tmp_path, SNAPSHOT)
        config = tmp_path / "settings.yaml"
        config.write_text(yaml.safe_dump({"suggestions": {"max_suggestions": 1}}))

        code = main.main(["--config", str(config), "suggest", "--projects", snapshot])

        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["Update status for Atlas to On Track"]

    def test_invalid_snapshot_returns_error_code(self, tmp_path, capsys):
        snapshot = self._write_snapshot(tmp_path, {"name": "not a list"})

        assert main.main(["suggest", "--projects", snapshot]) == 1
        assert capsys.readouterr().out == ""

    def test_missing_snapshot_returns_error_code(self, tmp_path):
        missing = str(tmp_path / "missing.yaml")

        assert main.main(["classify", "hello", "--projects", missing]) == 1

    def test_load_config_falls_back_to_bundled_settings(self):
        settings = main.load_config(None)

        assert settings["classifier"]["confidence_threshold"] == 0.7
