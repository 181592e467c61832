"""Seed data for the shell: the demo tree and YAML tree definitions.

A tree definition is a nested mapping where a mapping value describes a
directory and an integer value describes a file size in bytes::

    documents:
      resume.pdf: 1024000
      projects:
        project1.zip: 5120000
    empty: {}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from dirsize.core.tree import DirectoryNode, FileNode
from dirsize.utils.yaml_loading import load_yaml_mapping

logger = logging.getLogger(__name__)

ROOT_NAME: Final[str] = "root"

type TreeDefinition = Mapping[str, object]

DEMO_TREE: Final[TreeDefinition] = {
    "documents": {
        "resume.pdf": 1_024_000,
        "cover_letter.doc": 512_000,
        "projects": {
            "project1.zip": 5_120_000,
            "project2.tar": 3_072_000,
        },
    },
    "pictures": {
        "vacation.jpg": 2_048_000,
        "family.png": 1_536_000,
    },
    "music": {
        "song1.mp3": 4_096_000,
        "song2.mp3": 3_584_000,
    },
    "empty": {},
}


class TreeDefinitionError(Exception):
    """Exception raised when a tree definition cannot be loaded or is invalid.

    The message names the offending location inside the definition so the
    user can find it in the source file.
    """


def build_demo_tree() -> DirectoryNode:
    """Build the fixed demo hierarchy used when no tree file is given.

    Returns:
        Root directory of the demo tree
    """
    return build_tree(DEMO_TREE)


def build_tree(definition: TreeDefinition, *, root_name: str = ROOT_NAME) -> DirectoryNode:
    """Build a tree from a nested mapping.

    Args:
        definition: Mapping of entry names to either nested mappings
            (directories) or integer byte counts (files)
        root_name: Name given to the root directory

    Returns:
        Root directory containing the described entries

    Raises:
        TreeDefinitionError: If an entry has an invalid name or value
    """
    root = DirectoryNode(root_name)
    _populate(root, definition, location="")
    return root


def _populate(directory: DirectoryNode, definition: TreeDefinition, *, location: str) -> None:
    for raw_name, value in definition.items():
        entry_path = f"{location}/{raw_name}"

        # YAML keys may be any scalar
        if not isinstance(raw_name, str):  # pyright: ignore[reportUnnecessaryIsInstance]  # YAML boundary
            msg = f"Entry name must be a string at {entry_path}, got {type(raw_name).__name__}"
            raise TreeDefinitionError(msg)

        # bool is an int subclass; YAML 'yes'/'true' must not become a size
        if isinstance(value, bool):
            msg = f"File size must be an integer at {entry_path}, got bool"
            raise TreeDefinitionError(msg)

        try:
            if isinstance(value, Mapping):
                child = DirectoryNode(raw_name)
                _ = directory.add_child(child)
                _populate(child, value, location=entry_path)  # pyright: ignore[reportUnknownArgumentType]  # YAML boundary
            elif value is None:
                # "name:" with nothing after it in YAML
                _ = directory.add_child(DirectoryNode(raw_name))
            elif isinstance(value, int):
                _ = directory.add_child(FileNode(raw_name, value))
            else:
                msg = (
                    f"Entry at {entry_path} must be a mapping (directory) or an "
                    f"integer (file size), got {type(value).__name__}"
                )
                raise TreeDefinitionError(msg)
        except ValueError as e:
            msg = f"Invalid entry at {entry_path}: {e}"
            raise TreeDefinitionError(msg) from e


def load_tree_file(path: Path, *, root_name: str = ROOT_NAME) -> DirectoryNode:
    """Load a tree definition from a YAML file.

    Args:
        path: Path to the YAML tree definition
        root_name: Name given to the root directory

    Returns:
        Root directory of the loaded tree

    Raises:
        TreeDefinitionError: If the file cannot be read, parsed or validated
    """
    definition = load_yaml_mapping(path, label="Tree definition file", error=TreeDefinitionError)
    root = build_tree(definition, root_name=root_name)
    logger.info(
        "Loaded tree definition",
        extra={"tree_file": str(path), "entries": sum(1 for _ in root.iter_all()) - 1},
    )
    return root
