"""Shared utility modules for common operations.

This package provides:
- Data size formatting (bytes to human-readable)
- Logging setup with per-command context
- Reading YAML files whose root is a mapping

All formatting utilities are pure and have no side effects.
"""

from dirsize.utils.formatting import (
    format_byte_count,
    format_size,
)

__all__ = [
    "format_byte_count",
    "format_size",
]
