"""Logging infrastructure with per-command context tracking.

The interactive shell owns stdout, so log output goes to stderr (and an
optional file). Every record is stamped with the shell command being
processed, held in a ContextVar for the duration of that command.
"""

import contextvars
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Final, override

# Shell command currently being processed
command_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "command",
    default=None,
)

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - [%(command)s] - %(message)s"

NO_COMMAND: Final[str] = "-"


class CommandContextFilter(logging.Filter):
    """Logging filter that adds the current shell command to log records.

    Records emitted outside of command processing get ``-``.
    """

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        """Add the command name to the log record from the ContextVar.

        Args:
            record: Log record to enhance

        Returns:
            True to allow the record to be logged
        """
        command = command_var.get()
        record.command = command if command is not None else NO_COMMAND
        return True


def configure_logging(
    *,
    log_level: str = "WARNING",
    log_file: Path | None = None,
    enable_console: bool = True,
) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that receives log output
        enable_console: Enable the stderr handler

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> logger = logging.getLogger(__name__)
        >>> with command_context("ls"):
        ...     logger.debug("Listing directory")
    """
    root_logger = logging.getLogger()

    level = getattr(logging, log_level.upper(), logging.WARNING)
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    command_filter = CommandContextFilter()
    formatter = logging.Formatter(DEFAULT_LOG_FORMAT)

    if log_file is not None:
        try:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            print(
                f"Warning: Could not open log file {log_file}: {exc}",
                file=sys.stderr,
            )
        else:
            file_handler.setFormatter(formatter)
            file_handler.addFilter(command_filter)
            root_logger.addHandler(file_handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(command_filter)
        root_logger.addHandler(console_handler)


@contextmanager
def command_context(command: str) -> Iterator[None]:
    """Mark log records emitted inside the block with a command name.

    Args:
        command: Shell command being processed

    Example:
        >>> with command_context("cd"):
        ...     logger.debug("Changing directory")
    """
    token = command_var.set(command)
    try:
        yield
    finally:
        command_var.reset(token)
