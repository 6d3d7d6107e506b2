"""extdemo - a plugin that exposes an extension to a task.

The ``add`` task sums the two integers held by the ``hello`` extension::

    from extdemo import ExtDemoPlugin, Project

    project = Project().apply(ExtDemoPlugin)
    project.extensions["hello"].alpha = 5
    project.run_task("add")      # prints "5 + 2 = 7"
"""

from extdemo.plugin import ExtDemoPlugin, Plugin
from extdemo.project import ExtensionContainer, Project, TaskContainer
from extdemo.tasks import AddTask, Task
from extdemo.types import (
    ConfigError,
    DuplicateNameError,
    ExtDemoError,
    ExtensionNotFoundError,
    HelloExtension,
    TaskNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AddTask",
    "ConfigError",
    "DuplicateNameError",
    "ExtDemoError",
    "ExtDemoPlugin",
    "ExtensionContainer",
    "ExtensionNotFoundError",
    "HelloExtension",
    "Plugin",
    "Project",
    "Task",
    "TaskContainer",
    "TaskNotFoundError",
]
