"""Persistent JSON config keyed by project directory.

Each project directory maps to its prompt settings and the history of goals
entered for it. Reads are defensive: malformed or missing config falls back
to an empty store. Writes raise ``ConfigError`` since a lost project setup
cannot be recovered silently.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import IO

from platformdirs import user_config_dir

from .errors import ConfigError

APP_NAME = "prompt-gen"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class ProjectConfig:
    """Prompt settings and goal history for one project directory."""

    project_name: str
    output_path: str
    intro_prompt: str
    allowed_extensions: tuple[str, ...] = ()
    deny_dirs: tuple[str, ...] = ()
    history: tuple[str, ...] = ()


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to write configuration {CONFIG_PATH}: {exc}") from exc


def _coerce_str(value: object) -> str:
    return value if isinstance(value, str) else ""


def _coerce_str_tuple(value: object) -> tuple[str, ...]:
    """Normalize a JSON list to a tuple of strings, dropping other items."""
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str))


def _project_key(project_dir: Path | str) -> str:
    return str(project_dir)


def load_project_config(project_dir: Path | str) -> ProjectConfig | None:
    """Return stored settings for ``project_dir`` or ``None`` when absent."""
    raw = load_config().get(_project_key(project_dir))
    if not isinstance(raw, dict):
        return None
    return ProjectConfig(
        project_name=_coerce_str(raw.get("project_name")),
        output_path=_coerce_str(raw.get("output_path")),
        intro_prompt=_coerce_str(raw.get("intro_prompt")),
        allowed_extensions=_coerce_str_tuple(raw.get("allowed_extensions")),
        deny_dirs=_coerce_str_tuple(raw.get("deny_dirs")),
        history=_coerce_str_tuple(raw.get("history")),
    )


def save_project_config(project_dir: Path | str, project: ProjectConfig) -> None:
    """Store ``project`` under ``project_dir`` leaving other projects untouched."""
    serialized = asdict(project)
    for key in ("allowed_extensions", "deny_dirs", "history"):
        serialized[key] = list(serialized[key])

    config = load_config()
    config[_project_key(project_dir)] = serialized
    save_config(config)


def append_history(project_dir: Path | str, goal: str) -> ProjectConfig:
    """Append ``goal`` to the stored history of ``project_dir`` and persist it."""
    project = load_project_config(project_dir)
    if project is None:
        raise ConfigError(f"Configuration not found for directory: {project_dir}")
    updated = replace(project, history=project.history + (goal,))
    save_project_config(project_dir, updated)
    return updated


def split_list_answer(answer: str, strip_dots: bool = False) -> tuple[str, ...]:
    """Split a comma-separated answer into trimmed, non-empty items."""
    items: list[str] = []
    for raw_item in answer.split(","):
        item = raw_item.strip()
        if strip_dots:
            item = item.lstrip(".")
        if item:
            items.append(item)
    return tuple(items)


def _ask(reader: IO[str], writer: IO[str], prompt: str) -> str:
    """Write ``prompt`` and return the trimmed answer line."""
    writer.write(prompt)
    writer.flush()
    line = reader.readline()
    if not line:
        raise ConfigError("Input ended before configuration was complete.")
    return line.strip()


def create_project_config(
    project_dir: Path | str,
    reader: IO[str],
    writer: IO[str],
    announce_missing: bool = True,
) -> ProjectConfig:
    """Interactively build a ``ProjectConfig`` for ``project_dir``.

    Prompts are written to ``writer`` and answers read line by line from
    ``reader``. An empty project name falls back to the directory name.
    """
    default_name = Path(project_dir).name or _project_key(project_dir)
    if announce_missing:
        writer.write("Configuration not found for the current directory.\n")
        writer.write("Let's create a new configuration.\n")

    project_name = _ask(reader, writer, f"Enter the project name (default: {default_name}): ") or default_name
    output_path = _ask(reader, writer, "Enter the output path: ")
    intro_prompt = _ask(reader, writer, "Enter the introductory prompt: ")
    allowed_extensions = split_list_answer(
        _ask(reader, writer, "Enter the allowed file extensions (comma-separated): "),
        strip_dots=True,
    )
    deny_dirs = split_list_answer(_ask(reader, writer, "Enter the directories to ignore (comma-separated): "))

    return ProjectConfig(
        project_name=project_name,
        output_path=output_path,
        intro_prompt=intro_prompt,
        allowed_extensions=allowed_extensions,
        deny_dirs=deny_dirs,
    )


__all__ = [
    "CONFIG_PATH",
    "ProjectConfig",
    "load_config",
    "save_config",
    "load_project_config",
    "save_project_config",
    "append_history",
    "split_list_answer",
    "create_project_config",
]
