"""Pure formatting utilities for human-readable output.

This module provides stateless formatting functions for converting raw byte
counts into human-readable strings. All functions are pure with no side effects.
"""

# Binary unit constants (1024-based)
_KB_INT = 1024
_MB_INT = _KB_INT * 1024  # 1,048,576
_GB_INT = _MB_INT * 1024  # 1,073,741,824

_KB_FLOAT = 1024.0
_MB_FLOAT = _KB_FLOAT * 1024.0
_GB_FLOAT = _MB_FLOAT * 1024.0


def format_size(bytes: int) -> str:
    """Convert bytes to human-readable size format.

    Uses binary units (1024-based). Values below one kilobyte are shown as
    whole bytes; larger values use two decimal places.

    Args:
        bytes: Number of bytes to format (must be non-negative)

    Returns:
        Human-readable string representation of the size.
        - < 1024: "X B"
        - KB/MB/GB: "X.YY <unit>"

    Raises:
        ValueError: If bytes is negative

    Examples:
        >>> format_size(500)
        '500 B'
        >>> format_size(1024)
        '1.00 KB'
        >>> format_size(1048576)
        '1.00 MB'
        >>> format_size(9728000)
        '9.28 MB'
    """
    if bytes < 0:
        msg = "bytes must be non-negative"
        raise ValueError(msg)

    if bytes < _KB_INT:
        return f"{bytes} B"

    if bytes < _MB_INT:
        return f"{bytes / _KB_FLOAT:.2f} KB"

    if bytes < _GB_INT:
        return f"{bytes / _MB_FLOAT:.2f} MB"

    # Anything larger stays in GB
    return f"{bytes / _GB_FLOAT:.2f} GB"


def format_byte_count(bytes: int) -> str:
    """Render an exact byte count with a unit suffix.

    Args:
        bytes: Number of bytes (must be non-negative)

    Returns:
        String of the form "N bytes"

    Examples:
        >>> format_byte_count(1024000)
        '1024000 bytes'
    """
    if bytes < 0:
        msg = "bytes must be non-negative"
        raise ValueError(msg)
    return f"{bytes} bytes"
