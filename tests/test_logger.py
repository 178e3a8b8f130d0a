"""
Tests for logging helpers
"""

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from entity_registry import EntityRegistry
from entity_registry.utils import get_logger, setup_logger


@pytest.fixture
def clean_root_logger():
    """Remove handlers added to the package logger during a test"""
    root = logging.getLogger("entity_registry")
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


class TestLogger:
    """Test logger setup"""

    def test_get_logger_namespacing(self):
        """Test names are placed under the package logger"""
        assert get_logger().name == "entity_registry"
        assert get_logger("cli").name == "entity_registry.cli"
        assert get_logger("entity_registry.entities").name == "entity_registry.entities"

    def test_setup_logger_is_idempotent(self, clean_root_logger):
        """Test repeated setup adds a single RichHandler"""
        setup_logger(level=logging.INFO)
        setup_logger(level=logging.DEBUG)

        rich_handlers = [h for h in clean_root_logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert clean_root_logger.level == logging.DEBUG
        assert rich_handlers[0].level == logging.DEBUG

    def test_registry_operations_are_logged(self, clean_root_logger):
        """Test add/remove/clear emit debug records through the handler"""
        clean_root_logger.handlers = [
            h for h in clean_root_logger.handlers if not isinstance(h, RichHandler)
        ]
        buffer = io.StringIO()
        setup_logger(level=logging.DEBUG, console=Console(file=buffer, width=200))

        registry = EntityRegistry()
        registry.add("x", 1).add("x", 2)
        registry.remove("x")
        registry.remove("x")

        output = buffer.getvalue()
        assert "Added 'x'" in output
        assert "Replacing handle for 'x'" in output
        assert "Removed 'x'" in output
        assert "unknown identifier 'x'" in output
