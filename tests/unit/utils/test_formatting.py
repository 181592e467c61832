"""Unit tests for formatting utilities.

Tests cover:
- All unit boundaries (B, KB, MB, GB)
- Edge cases (zero, negative, very large values)
- Property-based testing with Hypothesis
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dirsize.utils.formatting import format_byte_count, format_size


class TestFormatSize:
    """Test suite for format_size function."""

    @pytest.mark.parametrize(
        ("bytes_value", "expected"),
        [
            # Bytes range (< 1024)
            (0, "0 B"),
            (1, "1 B"),
            (500, "500 B"),
            (1023, "1023 B"),
            # KB range (1024 <= x < 1024²)
            (1024, "1.00 KB"),
            (1536, "1.50 KB"),
            (512_000, "500.00 KB"),
            (1024**2 - 1, "1024.00 KB"),
            # MB range (1024² <= x < 1024³)
            (1024**2, "1.00 MB"),
            (8_192_000, "7.81 MB"),
            (9_728_000, "9.28 MB"),
            # GB range (>= 1024³)
            (1024**3, "1.00 GB"),
            (1024**3 * 10, "10.00 GB"),
            # No TB unit: large values stay in GB
            (1024**4, "1024.00 GB"),
        ],
    )
    def test_format_size_boundaries(self, bytes_value: int, expected: str) -> None:
        """Test format_size at all unit boundaries."""
        assert format_size(bytes_value) == expected

    def test_format_size_negative_raises_error(self) -> None:
        """Test that negative bytes raise ValueError."""
        with pytest.raises(ValueError, match="bytes must be non-negative"):
            _ = format_size(-1)

    @given(st.integers(min_value=0, max_value=1023))
    def test_small_values_are_whole_bytes(self, bytes_value: int) -> None:
        """Property test: values below 1 KB render as integer bytes."""
        assert format_size(bytes_value) == f"{bytes_value} B"

    @given(st.integers(min_value=1024, max_value=1024**5))
    def test_large_values_have_two_decimals(self, bytes_value: int) -> None:
        """Property test: values from 1 KB up use two decimal places and a binary unit."""
        number, unit = format_size(bytes_value).split()

        assert unit in {"KB", "MB", "GB"}
        assert len(number.split(".")[1]) == 2

    @given(st.integers(min_value=0, max_value=1024**5))
    def test_format_size_idempotent(self, bytes_value: int) -> None:
        """Property test: same input always produces same output."""
        assert format_size(bytes_value) == format_size(bytes_value)


class TestFormatByteCount:
    """Test suite for format_byte_count function."""

    def test_exact_count(self) -> None:
        """Test the exact count is rendered with a unit."""
        assert format_byte_count(8_192_000) == "8192000 bytes"
        assert format_byte_count(0) == "0 bytes"

    def test_negative_raises_error(self) -> None:
        """Test that negative bytes raise ValueError."""
        with pytest.raises(ValueError, match="bytes must be non-negative"):
            _ = format_byte_count(-5)
