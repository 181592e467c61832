"""Core tree model, seed data, configuration and shell interpreter."""

from dirsize.core.seed import TreeDefinitionError, build_demo_tree, build_tree, load_tree_file
from dirsize.core.shell import Shell, ShellSession
from dirsize.core.tree import DirectoryNode, FileNode, Node, NodeKind

__all__ = [
    # Tree model
    "DirectoryNode",
    "FileNode",
    "Node",
    "NodeKind",
    # Seed data
    "TreeDefinitionError",
    "build_demo_tree",
    "build_tree",
    "load_tree_file",
    # Shell
    "Shell",
    "ShellSession",
]
