"""Interactive shell for navigating the tree and reporting sizes.

All state lives in a :class:`ShellSession` (input, output and the current
directory cursor) which is passed to every command handler, so the shell
can be driven from in-memory streams as easily as from a terminal.

Every error condition is reported to the user and the loop continues.
Only ``exit`` or end of input stop the shell.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Final, TextIO

from dirsize.core.tree import DirectoryNode, Node
from dirsize.utils.formatting import format_byte_count, format_size
from dirsize.utils.logging import command_context

logger = logging.getLogger(__name__)

PARENT_TARGET: Final[str] = ".."
ROOT_TARGET: Final[str] = "/"
DEFAULT_ROOT_ALIAS: Final[str] = "root"

NAME_COLUMN_WIDTH: Final[int] = 20
SIZE_COLUMN_WIDTH: Final[int] = 10

BANNER: Final[str] = (
    "Directory Size Calculator\n"
    "Available commands: cd <directory>, ls, size, pwd, exit\n"
    "Type 'help' for more info\n"
)

HELP_TEXT: Final[str] = """
Available commands:
  cd <directory>  - Change to specified directory
  cd ..          - Go to parent directory
  cd /           - Go to root directory
  ls             - List contents of current directory
  size           - Calculate total size of current directory
  pwd            - Print current working directory
  help           - Show this help message
  exit           - Exit the application
"""


@dataclass(slots=True)
class ShellSession:
    """State of one interactive session.

    Attributes:
        root: Root directory of the tree
        stdin: Source of command lines
        stdout: Sink for all user-facing output
        root_alias: Name accepted by ``cd`` as an alias for ``/``
        cwd: Current directory cursor, initially the root
        running: False once ``exit`` or end of input was seen
    """

    root: DirectoryNode
    stdin: TextIO
    stdout: TextIO
    root_alias: str = DEFAULT_ROOT_ALIAS
    cwd: DirectoryNode = field(init=False)
    running: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        self.cwd = self.root
        # Undecodable bytes become U+FFFD instead of ending the loop
        if isinstance(self.stdin, io.TextIOWrapper):
            self.stdin.reconfigure(errors="replace")

    @property
    def path(self) -> str:
        return self.cwd.path

    def write(self, text: str = "") -> None:
        print(text, file=self.stdout)


type CommandHandler = Callable[[ShellSession, Sequence[str]], None]


def parse_command(line: str) -> tuple[str, list[str]] | None:
    """Split a command line into a lower-cased command and its arguments.

    Args:
        line: Raw input line

    Returns:
        Tuple of (command, arguments), or None for a blank line

    Examples:
        >>> parse_command("  CD   documents ")
        ('cd', ['documents'])
        >>> parse_command("   ") is None
        True
    """
    parts = line.split()
    if not parts:
        return None
    return parts[0].lower(), parts[1:]


def change_directory(session: ShellSession, args: Sequence[str]) -> None:
    """Move the cursor: ``..``, ``/`` or the root alias, or a child directory."""
    if not args:
        session.write("Usage: cd <directory>")
        return

    target = args[0]

    if target == PARENT_TARGET:
        parent = session.cwd.parent
        if parent is None:
            session.write("Already at root directory")
        else:
            session.cwd = parent
        return

    if target in (ROOT_TARGET, session.root_alias):
        session.cwd = session.root
        return

    node = session.cwd.get_child(target)
    if node is None:
        logger.debug("Child not found", extra={"target": target, "cwd": session.path})
        session.write(f"Directory not found: {target}")
    elif not isinstance(node, DirectoryNode):
        logger.debug("Target is not a directory", extra={"target": target, "cwd": session.path})
        session.write(f"{target} is not a directory")
    else:
        session.cwd = node


def format_entry(node: Node) -> str:
    """Render one listing row: ``name/  <DIR>`` or ``name  N bytes``."""
    if node.is_directory:
        return f"{node.name + '/':<{NAME_COLUMN_WIDTH}} {'<DIR>':>{SIZE_COLUMN_WIDTH}}"
    return f"{node.name:<{NAME_COLUMN_WIDTH}} {node.get_size():>{SIZE_COLUMN_WIDTH}} bytes"


def list_contents(session: ShellSession, args: Sequence[str]) -> None:  # noqa: ARG001
    children = session.cwd.children
    if not children:
        session.write("Directory is empty")
        return

    session.write()
    session.write(f"Contents of {session.path}:")
    session.write(f"{'Name':<{NAME_COLUMN_WIDTH}} Size")
    session.write("-" * NAME_COLUMN_WIDTH + "+" + "-" * SIZE_COLUMN_WIDTH)
    for child in sorted(children, key=lambda node: node.name):
        session.write(format_entry(child))
    session.write()


def report_size(session: ShellSession, args: Sequence[str]) -> None:  # noqa: ARG001
    total = session.cwd.get_size()
    session.write(f"Total size of {session.path}: {format_size(total)} ({format_byte_count(total)})")


def print_working_directory(session: ShellSession, args: Sequence[str]) -> None:  # noqa: ARG001
    session.write(session.path)


def show_help(session: ShellSession, args: Sequence[str]) -> None:  # noqa: ARG001
    session.write(HELP_TEXT)


def exit_shell(session: ShellSession, args: Sequence[str]) -> None:  # noqa: ARG001
    session.write("Goodbye!")
    session.running = False


COMMANDS: Final[Mapping[str, CommandHandler]] = {
    "cd": change_directory,
    "ls": list_contents,
    "size": report_size,
    "pwd": print_working_directory,
    "help": show_help,
    "exit": exit_shell,
}


class Shell:
    """Read-eval-print loop over a :class:`ShellSession`."""

    def __init__(
        self,
        session: ShellSession,
        *,
        banner: bool = True,
        commands: Mapping[str, CommandHandler] = COMMANDS,
    ) -> None:
        """Initialize the shell.

        Args:
            session: Session holding streams and cursor
            banner: Whether to print the welcome banner on start
            commands: Command name to handler mapping
        """
        self.session: ShellSession = session
        self.banner: bool = banner
        self.commands: Mapping[str, CommandHandler] = commands

    @property
    def prompt(self) -> str:
        return f"{self.session.path} $ "

    def execute(self, line: str) -> None:
        """Parse and run a single command line.

        Blank lines are ignored. Unknown commands are reported with a hint.

        Args:
            line: Raw input line
        """
        parsed = parse_command(line)
        if parsed is None:
            return

        command, args = parsed
        handler = self.commands.get(command)
        if handler is None:
            logger.debug("Unknown command", extra={"command_name": command})
            self.session.write(f"Unknown command: {command}")
            self.session.write("Type 'help' for available commands")
            return

        with command_context(command):
            logger.debug("Dispatching command", extra={"command_args": list(args), "cwd": self.session.path})
            handler(self.session, args)

    def run(self) -> None:
        """Run the loop until ``exit`` or end of input."""
        session = self.session
        logger.info("Shell started", extra={"root": session.root.name})

        if self.banner:
            session.write(BANNER)

        while session.running:
            _ = session.stdout.write(self.prompt)
            session.stdout.flush()

            line = session.stdin.readline()
            if not line:
                # End of input behaves like 'exit'
                session.write()
                self.execute("exit")
                break

            self.execute(line)

        logger.info("Shell stopped")
