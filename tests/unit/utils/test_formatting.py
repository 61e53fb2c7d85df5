"""Unit tests for console formatting and logging setup."""

import logging
from collections.abc import Iterator

import pytest
from buildsweep.utils.formatting import format_path, printable
from buildsweep.utils.log import setup_logging
from rich.logging import RichHandler


class TestFormatPath:
    """Tests for format_path."""

    def test_wraps_in_path_style(self) -> None:
        """Paths are wrapped in the path style."""
        assert format_path("/src/target") == "[path]/src/target[/]"

    def test_escapes_markup(self) -> None:
        """Square brackets in paths are escaped."""
        assert format_path("/src/[bold]/target") == "[path]/src/\\[bold]/target[/]"

    def test_undecodable_bytes_replaced(self) -> None:
        """Surrogate-escaped bytes become U+FFFD so the path can be printed."""
        path = "/src/proj\udcff/target"

        assert printable(path) == "/src/proj�/target"
        assert format_path(path) == "[path]/src/proj�/target[/]"


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_default_level(self, restore_root_logger: None) -> None:
        """Without verbose only warnings and errors are logged."""
        setup_logging()

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[-1], RichHandler)

    def test_verbose_level(self, restore_root_logger: None) -> None:
        """Verbose mode logs at DEBUG."""
        setup_logging(verbose=True)

        assert logging.getLogger().level == logging.DEBUG

    def test_repeated_setup_does_not_stack_handlers(self, restore_root_logger: None) -> None:
        """Calling setup twice leaves a single handler."""
        setup_logging()
        setup_logging()

        assert len(logging.getLogger().handlers) == 1
