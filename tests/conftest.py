"""Pytest configuration and shared fixtures."""

import logging

import pytest

from ingreedy.config import get_settings
from ingreedy.parse import MultipartPolicy, ParseOptions

# =============================================================================
# Pytest Configuration
# =============================================================================


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handler and level changes made by configure_logging()."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    levels = {name: logging.getLogger(name).level for name in ("", "ingreedy", "ingreedy.parse")}
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Parser Fixtures
# =============================================================================


@pytest.fixture
def multiply_options():
    """Options reproducing the count-times-quantity multipart behaviour."""
    return ParseOptions(multipart_policy=MultipartPolicy.MULTIPLY)


@pytest.fixture
def strip_of_options():
    """Options dropping a leading "of" from the ingredient text."""
    return ParseOptions(strip_of_prefix=True)


@pytest.fixture
def ingredient_lines():
    """A short recipe's ingredient list."""
    return [
        "2 (28 ounce) can crushed tomatoes",
        "1 pound (16 ounces) butter",
        "",
        "a pinch of salt",
        "two eggs",
    ]


@pytest.fixture
def ingredient_file(tmp_path, ingredient_lines):
    """The ingredient list written to a text file, one line per ingredient."""
    path = tmp_path / "ingredients.txt"
    path.write_text("\n".join(ingredient_lines) + "\n", encoding="utf-8")
    return path


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client():
    """Test client for the FastAPI application."""
    from fastapi.testclient import TestClient

    from ingreedy.main import app

    return TestClient(app)
