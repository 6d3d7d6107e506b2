"""Shared fixtures for extdemo tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from extdemo import ExtDemoPlugin, HelloExtension, Project, log


@pytest.fixture()
def project() -> Project:
    """A project with ExtDemoPlugin applied."""
    p = Project(name="demo")
    p.apply(ExtDemoPlugin)
    return p


@pytest.fixture()
def extension(project: Project) -> HelloExtension:
    return project.extensions.get_by_type(HelloExtension)


@pytest.fixture()
def build_yaml(tmp_path: Path) -> Path:
    """Write a sample extdemo.yaml and return its path."""
    p = tmp_path / "extdemo.yaml"
    with open(p, "w") as fh:
        yaml.dump({"hello": {"alpha": 5, "bravo": 6}}, fh)
    return p


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove the CLI console handler after each test."""
    yield
    log.teardown()
    logging.getLogger().setLevel(logging.WARNING)
