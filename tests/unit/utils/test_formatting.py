"""Unit tests for console formatting helpers."""

import logging

import pytest
from flutterwipe.utils.formatting import configure_logging, format_size


class TestFormatSize:
    """Tests for format_size."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (None, "0 B"),
            (0, "0 B"),
            (512, "512 B"),
            (1536, "1.5 KB"),
            (10 * 1024 * 1024, "10.0 MB"),
            (3 * 1024**3, "3.0 GB"),
            (2 * 1024**4, "2.0 TB"),
        ],
    )
    def test_formats(self, size: int | None, expected: str) -> None:
        """Sizes are rendered with the largest fitting unit."""
        assert format_size(size) == expected


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_verbose_enables_debug(self) -> None:
        """Verbose mode sets the root logger to DEBUG."""
        configure_logging(verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_default_is_warning(self) -> None:
        """Default mode only shows warnings and above."""
        configure_logging()
        assert logging.getLogger().level == logging.WARNING
