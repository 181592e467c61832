"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterator

import pytest

from dirsize.core.seed import build_demo_tree
from dirsize.core.shell import Shell, ShellSession
from dirsize.core.tree import DirectoryNode, FileNode


@pytest.fixture
def demo_root() -> DirectoryNode:
    """Provide the demo seed tree."""
    return build_demo_tree()


@pytest.fixture
def documents_root() -> DirectoryNode:
    """Provide a root containing only the documents subtree.

    Layout::

        /documents/resume.pdf            1,024,000
        /documents/cover_letter.doc        512,000
        /documents/projects/project1.zip 5,120,000
        /documents/projects/project2.tar 3,072,000
    """
    root = DirectoryNode("root")
    documents = DirectoryNode("documents")
    projects = DirectoryNode("projects")

    _ = documents.add_child(FileNode("resume.pdf", 1_024_000))
    _ = documents.add_child(FileNode("cover_letter.doc", 512_000))
    _ = projects.add_child(FileNode("project1.zip", 5_120_000))
    _ = projects.add_child(FileNode("project2.tar", 3_072_000))

    _ = root.add_child(documents)
    _ = documents.add_child(projects)
    return root


@pytest.fixture
def make_shell() -> Callable[..., tuple[Shell, io.StringIO]]:
    """Factory building a shell over in-memory streams.

    Returns:
        Callable taking a root and optional input text, returning the shell
        and its output buffer
    """

    def _make(root: DirectoryNode, input_text: str = "", **session_kwargs: str) -> tuple[Shell, io.StringIO]:
        stdout = io.StringIO()
        session = ShellSession(root=root, stdin=io.StringIO(input_text), stdout=stdout, **session_kwargs)
        return Shell(session, banner=False), stdout

    return _make


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Remove handlers installed by configure_logging and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    try:
        yield
    finally:
        # Exact type match leaves pytest's own capture handlers alone
        for handler in list(root_logger.handlers):
            if type(handler) in (logging.StreamHandler, logging.FileHandler):
                root_logger.removeHandler(handler)
                handler.close()
        root_logger.setLevel(level)
