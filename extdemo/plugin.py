"""Plugins register extensions and tasks with a project."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from extdemo.tasks import AddTask
from extdemo.types import HelloExtension

if TYPE_CHECKING:
    from extdemo.project import Project

logger = logging.getLogger(__name__)


class Plugin(ABC):
    """Abstract base class for plugins.

    Attributes:
        id: Plugin identifier shown in log messages
    """

    id: str = ""

    @abstractmethod
    def apply(self, project: "Project") -> None:
        """Register this plugin's extensions and tasks with *project*."""


class ExtDemoPlugin(Plugin):
    """Registers the ``hello`` extension and the ``add`` task."""

    id = "extdemo"

    def apply(self, project: "Project") -> None:
        extension = project.extensions.create(HelloExtension.EXTENSION_NAME, HelloExtension)
        project.tasks.register(AddTask(extension))
        logger.debug("%s: registered extension %r and task %r",
                     self.id, HelloExtension.EXTENSION_NAME, "add")
