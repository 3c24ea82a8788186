"""Command-line front door for prompt-gen.

Resolves the project directory, loads or creates its configuration, and reads
the goal. Then walks the source tree and writes the assembled artifact.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import IO

from .artifact import artifact_filename, assemble_artifact
from .config import (
    ProjectConfig,
    append_history,
    create_project_config,
    load_project_config,
    save_project_config,
)
from .errors import ConfigError, SourceTreeError
from .source_tree import SourceTree, walk_source_tree


def _resolve_project_dir(raw_path: Path) -> Path:
    """Return the resolved project directory or exit when it is unusable."""
    if not raw_path.exists():
        raise SystemExit(f"Path not found: {raw_path}")
    if not raw_path.is_dir():
        raise SystemExit(f"Not a directory: {raw_path}")
    return raw_path.resolve()


def _configure(project_dir: Path, existing: ProjectConfig | None, prompt_stream: IO[str]) -> ProjectConfig:
    """Run interactive configuration, keeping history of ``existing``."""
    try:
        created = create_project_config(
            project_dir,
            sys.stdin,
            prompt_stream,
            announce_missing=existing is None,
        )
        if existing is not None:
            created = replace(created, history=existing.history)
        save_project_config(project_dir, created)
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc
    return created


def _read_goal(prompt_stream: IO[str]) -> str:
    print("Enter a specific goal or feature for the project:", file=prompt_stream)
    prompt_stream.flush()
    return sys.stdin.readline().strip()


def _report_walk_errors(source: SourceTree) -> None:
    for error in source.errors:
        print(f"warning: {error.path}: {error.message}", file=sys.stderr)


def _output_dir(project_dir: Path, project: ProjectConfig, override: str | None) -> Path:
    """Resolve the artifact directory; relative paths are taken from ``project_dir``."""
    raw = override or project.output_path
    if not raw:
        return project_dir
    return project_dir / Path(raw).expanduser()


def main(argv: list[str] | None = None, default_path: Path | None = None) -> int:
    """Parse CLI arguments and build the prompt artifact for one project.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Fatal problems exit through ``SystemExit`` before any
    artifact is written or history is appended.
    """
    parser = argparse.ArgumentParser(
        description="Compile a project's source tree into a single prompt file."
    )
    parser.add_argument("path", nargs="?", default=None, help="Project directory. Defaults to current directory.")
    parser.add_argument("--goal", default=None, help="Goal text; prompted on stdin when omitted.")
    parser.add_argument("--reconfigure", action="store_true", help="Re-enter the project configuration.")
    parser.add_argument("--history", action="store_true", help="Print previously entered goals and exit.")
    parser.add_argument("--stdout", action="store_true", help="Print the artifact instead of writing a file; prompts go to stderr.")
    parser.add_argument("--output-dir", default=None, help="Override the configured output path for this run.")
    args = parser.parse_args(argv)

    if default_path is None:
        default_path = Path.cwd()
    project_dir = _resolve_project_dir(Path(args.path or default_path))

    project = load_project_config(project_dir)
    if args.history:
        if project is None:
            raise SystemExit(f"Configuration not found for directory: {project_dir}")
        for idx, goal in enumerate(project.history, start=1):
            print(f"{idx}. {goal}")
        return 0

    # With --stdout, stdout carries only the artifact.
    prompt_stream = sys.stderr if args.stdout else sys.stdout
    if project is None or args.reconfigure:
        project = _configure(project_dir, project, prompt_stream)

    goal = args.goal.strip() if args.goal is not None else _read_goal(prompt_stream)

    try:
        source = walk_source_tree(project_dir, project.allowed_extensions, project.deny_dirs)
    except SourceTreeError as exc:
        raise SystemExit(str(exc)) from exc
    _report_walk_errors(source)

    document = assemble_artifact(project.intro_prompt, source.tree, source.files, goal)

    prompt_path: Path | None = None
    if args.stdout:
        sys.stdout.write(document)
    else:
        output_dir = _output_dir(project_dir, project, args.output_dir)
        prompt_path = output_dir / artifact_filename(project.project_name, date.today())
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            prompt_path.write_text(document, encoding="utf-8")
        except OSError as exc:
            raise SystemExit(f"Failed to write prompt file {prompt_path}: {exc}") from exc

    try:
        append_history(project_dir, goal)
    except ConfigError as exc:
        raise SystemExit(str(exc)) from exc

    if prompt_path is not None:
        print(f"Prompt file generated: {prompt_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
