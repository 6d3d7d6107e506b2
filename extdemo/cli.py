"""Command-line entry point for extdemo.

Usage::

    extdemo tasks
    extdemo run add [--alpha N] [--bravo N] [-c extdemo.yaml]
    extdemo show [--alpha N] [--bravo N] [-c extdemo.yaml]

``extdemo.yaml`` in the working directory is loaded automatically when
``--config`` is not given.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from extdemo import log
from extdemo.config import DEFAULT_CONFIG_FILE, extension_settings, load_build_config
from extdemo.plugin import ExtDemoPlugin
from extdemo.project import Project
from extdemo.types import ExtDemoError, HelloExtension

logger = logging.getLogger(__name__)


def _build_project(args: argparse.Namespace) -> Project:
    """Create a project with the plugin applied and user settings loaded."""
    project = Project(name=Path.cwd().name).apply(ExtDemoPlugin)

    config_path = getattr(args, "config", None)
    if config_path is None and Path(DEFAULT_CONFIG_FILE).exists():
        config_path = DEFAULT_CONFIG_FILE
    if config_path is not None:
        project.configure(load_build_config(config_path))

    overrides = {
        key: value
        for key, value in (("alpha", getattr(args, "alpha", None)),
                           ("bravo", getattr(args, "bravo", None)))
        if value is not None
    }
    if overrides:
        project.configure({HelloExtension.EXTENSION_NAME: overrides})
    return project


# ---------------------------------------------------------------------------
# Sub-command handlers
# ---------------------------------------------------------------------------

def _cmd_tasks(_args: argparse.Namespace) -> int:
    # Registration only; listing never reads extdemo.yaml.
    project = Project(name=Path.cwd().name).apply(ExtDemoPlugin)
    for task in project.tasks:
        print(f"  {task.name:15s}  {task.group:10s}  {task.description}")
    print(f"\n{len(project.tasks)} task(s)")
    return 0


def _cmd_run(args: argparse.Namespace) -> int:
    project = _build_project(args)
    project.run_task(args.task)
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    project = _build_project(args)
    data = {
        name: extension_settings(project.extensions[name])
        for name in project.extensions.names()
    }
    print(yaml.dump(data, default_flow_style=False, sort_keys=False), end="")
    return 0


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

def _add_settings_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("-c", "--config", default=None, help="Build configuration file")
    p.add_argument("--alpha", type=int, default=None, help="Override hello.alpha")
    p.add_argument("--bravo", type=int, default=None, help="Override hello.bravo")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="extdemo", description="Extension demo plugin")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("tasks", help="List registered tasks")

    p = sub.add_parser("run", help="Run a task")
    p.add_argument("task")
    _add_settings_args(p)

    p = sub.add_parser("show", help="Show extension values")
    _add_settings_args(p)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry-point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    log.setup(logging.DEBUG if args.verbose else logging.INFO)

    dispatch = {
        "tasks": _cmd_tasks,
        "run": _cmd_run,
        "show": _cmd_show,
    }
    handler = dispatch.get(args.command or "")
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except ExtDemoError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
