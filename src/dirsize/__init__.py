"""dirsize - navigate an in-memory directory tree and compute directory sizes.

This package provides a tree of directories and files with recursive size
aggregation and an interactive shell for walking it.
"""

from dirsize.__main__ import main

__all__ = ["main"]
