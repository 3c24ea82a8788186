from __future__ import annotations

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from promptgen import config
from promptgen.errors import ConfigError


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "nested" / "config.json"
        patcher = mock.patch("promptgen.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def _create(self, project_dir: str, answers: str) -> tuple[config.ProjectConfig, str]:
        writer = io.StringIO()
        created = config.create_project_config(project_dir, io.StringIO(answers), writer)
        return created, writer.getvalue()

    def test_create_config_prompts_and_parses_answers(self) -> None:
        created, output = self._create(
            "/path/to/current/dir",
            "New Project\n/path/to/new/output\nNew intro prompt\nrs, .toml,,md\ntarget, node_modules\n",
        )

        self.assertEqual(created.project_name, "New Project")
        self.assertEqual(created.output_path, "/path/to/new/output")
        self.assertEqual(created.intro_prompt, "New intro prompt")
        self.assertEqual(created.allowed_extensions, ("rs", "toml", "md"))
        self.assertEqual(created.deny_dirs, ("target", "node_modules"))
        self.assertEqual(created.history, ())
        self.assertIn("Configuration not found for the current directory.", output)
        self.assertIn("Let's create a new configuration.", output)
        self.assertIn("Enter the project name (default: dir): ", output)
        self.assertIn("Enter the output path: ", output)
        self.assertIn("Enter the introductory prompt: ", output)
        self.assertIn("Enter the allowed file extensions (comma-separated): ", output)
        self.assertIn("Enter the directories to ignore (comma-separated): ", output)

    def test_empty_project_name_defaults_to_directory_name(self) -> None:
        created, _output = self._create("/work/demo", "\nout\nintro\nrs\n\n")
        self.assertEqual(created.project_name, "demo")
        self.assertEqual(created.deny_dirs, ())

    def test_input_ending_early_raises(self) -> None:
        with self.assertRaises(ConfigError):
            self._create("/work/demo", "demo\nout\n")

    def test_multiple_projects_round_trip_independently(self) -> None:
        first, _ = self._create("/path/to/project1", "Project 1\n/out1\nIntro 1\nrs,toml\ntarget\n")
        second, _ = self._create("/path/to/project2", "Project 2\n/out2\nIntro 2\nrs,md\ndist,build\n")
        config.save_project_config("/path/to/project1", first)
        config.save_project_config("/path/to/project2", second)

        self.assertEqual(config.load_project_config("/path/to/project1"), first)
        self.assertEqual(config.load_project_config("/path/to/project2"), second)
        self.assertIsNone(config.load_project_config("/path/to/non-existent-dir"))

        stored = json.loads(self.config_path.read_text(encoding="utf-8"))
        self.assertEqual(stored["/path/to/project2"]["deny_dirs"], ["dist", "build"])

    def test_append_history_preserves_order(self) -> None:
        project = config.ProjectConfig(project_name="demo", output_path="out", intro_prompt="hi")
        config.save_project_config("/work/demo", project)

        config.append_history("/work/demo", "first goal")
        updated = config.append_history("/work/demo", "second goal")

        self.assertEqual(updated.history, ("first goal", "second goal"))
        self.assertEqual(config.load_project_config("/work/demo").history, ("first goal", "second goal"))

    def test_append_history_for_unknown_project_raises(self) -> None:
        with self.assertRaises(ConfigError):
            config.append_history("/work/unknown", "goal")

    def test_malformed_store_loads_as_empty(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("{not json", encoding="utf-8")
        self.assertEqual(config.load_config(), {})
        self.assertIsNone(config.load_project_config("/work/demo"))

    def test_malformed_entry_fields_are_coerced(self) -> None:
        config.save_config(
            {
                "/work/demo": {
                    "project_name": "demo",
                    "output_path": 3,
                    "allowed_extensions": ["rs", 7, "py"],
                    "deny_dirs": "target",
                }
            }
        )
        loaded = config.load_project_config("/work/demo")
        self.assertEqual(loaded.project_name, "demo")
        self.assertEqual(loaded.output_path, "")
        self.assertEqual(loaded.intro_prompt, "")
        self.assertEqual(loaded.allowed_extensions, ("rs", "py"))
        self.assertEqual(loaded.deny_dirs, ())
        self.assertEqual(loaded.history, ())


if __name__ == "__main__":
    unittest.main()
