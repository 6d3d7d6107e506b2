"""
Logging integration for the extdemo CLI.

Records from the standard ``logging`` module are printed to stderr through a
rich console, coloured by level. Task output stays on stdout.

Example:
    >>> import logging
    >>> from extdemo import log
    >>> log.setup()
    >>> logging.getLogger("extdemo").info("> Task :add")   # -> blue
"""
import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape

console = Console(stderr=True, highlight=False)

_STYLES = {
    logging.ERROR: "bold red",
    logging.WARNING: "yellow",
    logging.INFO: "blue",
}


class ConsoleHandler(logging.Handler):
    """Logging handler that prints to a rich console with colours."""

    def __init__(self, target: Optional[Console] = None, level: int = logging.NOTSET):
        super().__init__(level)
        self.console = target or console

    @staticmethod
    def style_for(levelno: int) -> str:
        if levelno >= logging.ERROR:
            return _STYLES[logging.ERROR]
        if levelno >= logging.WARNING:
            return _STYLES[logging.WARNING]
        if levelno >= logging.INFO:
            return _STYLES[logging.INFO]
        return "dim"

    def emit(self, record: logging.LogRecord):
        try:
            msg = escape(self.format(record))
            style = self.style_for(record.levelno)
            self.console.print(f"[{style}]{msg}[/{style}]")
        except Exception:
            self.handleError(record)


_handler: Optional[ConsoleHandler] = None


def setup(level: int = logging.INFO):
    """Attach the console handler to the root logger.

    Calling it again only updates the level.

    Args:
        level: Minimum logging level (default INFO)
    """
    global _handler

    root = logging.getLogger()
    root.setLevel(level)
    if _handler is not None:
        return

    _handler = ConsoleHandler()
    _handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(_handler)


def teardown():
    """Remove the console handler."""
    global _handler

    if _handler is not None:
        logging.getLogger().removeHandler(_handler)
        _handler = None
