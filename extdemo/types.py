"""Data classes and exceptions for extdemo."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


# ---------------------------------------------------------------------------
# Extension data classes
# ---------------------------------------------------------------------------

@dataclass
class HelloExtension:
    """User-configurable operands of the ``add`` task.

    ``alpha`` and ``bravo`` are set by the user (build file or CLI flags);
    ``sum`` is written by :class:`extdemo.tasks.AddTask`.
    """

    EXTENSION_NAME: ClassVar[str] = "hello"
    COMPUTED_FIELDS: ClassVar[tuple[str, ...]] = ("sum",)

    alpha: int = 1
    bravo: int = 2
    sum: int = 0


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ExtDemoError(Exception):
    """Base exception for extdemo."""


class _LookupError(ExtDemoError, KeyError):
    # KeyError quotes its message in str()
    def __str__(self) -> str:
        return Exception.__str__(self)


class ExtensionNotFoundError(_LookupError):
    """Raised when no extension matches the requested name or type."""


class TaskNotFoundError(_LookupError):
    """Raised when a task name is not registered in the project."""


class DuplicateNameError(ExtDemoError, ValueError):
    """Raised when an extension or task name is already taken."""


class ConfigError(ExtDemoError):
    """Raised when a build configuration file is invalid or missing."""
