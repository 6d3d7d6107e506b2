"""Project: the host object plugins register extensions and tasks with."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, TypeVar

from extdemo.config import apply_settings, check_settings
from extdemo.tasks import Task
from extdemo.types import (
    ConfigError,
    DuplicateNameError,
    ExtensionNotFoundError,
    TaskNotFoundError,
)

logger = logging.getLogger(__name__)

E = TypeVar("E")


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

class ExtensionContainer:
    """Named extension instances, kept in registration order."""

    def __init__(self) -> None:
        self._items: dict[str, Any] = {}

    def create(self, name: str, ext_type: type[E], *args: Any, **kwargs: Any) -> E:
        """Instantiate *ext_type* and register it under *name*."""
        ext = ext_type(*args, **kwargs)
        self.add(name, ext)
        return ext

    def add(self, name: str, extension: Any) -> None:
        if name in self._items:
            raise DuplicateNameError(f"Extension already registered: {name}")
        self._items[name] = extension
        logger.debug("Registered extension %s (%s)", name, type(extension).__name__)

    def remove(self, name: str) -> None:
        self._items.pop(name, None)

    def find_by_name(self, name: str) -> Any | None:
        return self._items.get(name)

    def get_by_name(self, name: str) -> Any:
        try:
            return self._items[name]
        except KeyError:
            raise ExtensionNotFoundError(f"Unknown extension: {name}") from None

    def find_by_type(self, ext_type: type[E]) -> E | None:
        """Return the first registered instance of *ext_type*, or ``None``."""
        for ext in self._items.values():
            if isinstance(ext, ext_type):
                return ext
        return None

    def get_by_type(self, ext_type: type[E]) -> E:
        ext = self.find_by_type(ext_type)
        if ext is None:
            raise ExtensionNotFoundError(f"No extension of type {ext_type.__name__}")
        return ext

    def names(self) -> list[str]:
        return list(self._items)

    def __getitem__(self, name: str) -> Any:
        return self.get_by_name(name)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)


class TaskContainer:
    """Named tasks, kept in registration order."""

    def __init__(self) -> None:
        self._items: dict[str, Task] = {}

    def register(self, task: Task) -> Task:
        if task.name in self._items:
            raise DuplicateNameError(f"Task already registered: {task.name}")
        self._items[task.name] = task
        logger.debug("Registered task %s (%s)", task.name, type(task).__name__)
        return task

    def remove(self, name: str) -> None:
        self._items.pop(name, None)

    def get(self, name: str) -> Task | None:
        return self._items.get(name)

    def names(self) -> list[str]:
        return list(self._items)

    def __getitem__(self, name: str) -> Task:
        try:
            return self._items[name]
        except KeyError:
            raise TaskNotFoundError(f"Unknown task: {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __iter__(self) -> Iterator[Task]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)


# ---------------------------------------------------------------------------
# Project
# ---------------------------------------------------------------------------

class Project:
    """A build project.

    Attributes:
        name: Project name, used in log messages.
        extensions: Extensions registered by applied plugins.
        tasks: Tasks registered by applied plugins.
    """

    def __init__(self, name: str = "project") -> None:
        self.name = name
        self.extensions = ExtensionContainer()
        self.tasks = TaskContainer()
        self._plugins: dict[type, Any] = {}

    def apply(self, plugin: Any) -> Project:
        """Apply a plugin instance or class to this project.

        Applying the same plugin class a second time does nothing. If the
        plugin raises, the extensions and tasks it registered are removed
        again and the error propagates.
        """
        plugin_cls = plugin if isinstance(plugin, type) else type(plugin)
        if plugin_cls in self._plugins:
            logger.debug("Plugin %s already applied to %s", plugin_cls.__name__, self.name)
            return self
        instance = plugin() if isinstance(plugin, type) else plugin
        ext_names = set(self.extensions.names())
        task_names = set(self.tasks.names())
        try:
            instance.apply(self)
        except Exception:
            for name in set(self.extensions.names()) - ext_names:
                self.extensions.remove(name)
            for name in set(self.tasks.names()) - task_names:
                self.tasks.remove(name)
            raise
        self._plugins[plugin_cls] = instance
        logger.debug("Applied plugin %s to %s", plugin_cls.__name__, self.name)
        return self

    def has_plugin(self, plugin_cls: type) -> bool:
        return plugin_cls in self._plugins

    def configure(self, settings: Mapping[str, Mapping[str, Any]]) -> None:
        """Apply ``{extension_name: {field: value}}`` settings to extensions.

        Every section is checked before any extension is changed.

        Raises:
            ConfigError: If a section names an unregistered extension, an
                extension that is not a dataclass, or an invalid field.
        """
        resolved = []
        for ext_name, values in settings.items():
            ext = self.extensions.find_by_name(ext_name)
            if ext is None:
                raise ConfigError(f"Unknown extension in configuration: {ext_name}")
            check_settings(ext, values, section=ext_name)
            resolved.append((ext_name, ext, values))
        for ext_name, ext, values in resolved:
            apply_settings(ext, values, section=ext_name)

    def run_task(self, name: str) -> Any:
        """Run the task registered under *name* and return its result."""
        task = self.tasks[name]
        logger.info("> Task :%s", task.name)
        return task.perform()
