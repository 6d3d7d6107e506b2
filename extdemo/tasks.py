"""
Task Module

A task is a named unit of work registered with a :class:`extdemo.Project`.
Collaborators are handed to the task when it is constructed, so a task can be
exercised on its own without a project:

    >>> from extdemo import AddTask, HelloExtension
    >>> ext = HelloExtension(alpha=5, bravo=6)
    >>> AddTask(ext).perform()
    5 + 6 = 11
    11
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from extdemo.types import HelloExtension

logger = logging.getLogger(__name__)


class Task(ABC):
    """
    Abstract base class for project tasks.

    Attributes:
        name: Task name used to invoke it (e.g., "add")
        group: Group shown in task listings
        description: One-line help text shown in task listings
    """

    group: str = ""
    description: str = ""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def perform(self) -> Any:
        """Execute the task and return its result."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class AddTask(Task):
    """Adds ``alpha`` and ``bravo`` of a :class:`HelloExtension`."""

    group = "demo"
    description = "Adds some numbers together"

    def __init__(self, extension: HelloExtension, name: str = "add"):
        super().__init__(name)
        self.extension = extension

    def perform(self) -> int:
        ex = self.extension
        logger.debug("Adding alpha=%r and bravo=%r", ex.alpha, ex.bravo)
        ex.sum = ex.alpha + ex.bravo
        print(f"{ex.alpha} + {ex.bravo} = {ex.sum}")
        return ex.sum
