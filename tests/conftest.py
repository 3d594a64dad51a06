"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, a temporary config file, sample article
data and singleton resets so tests stay isolated.
"""

import json
import logging
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="highlight_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_config(temp_dir: Path) -> Generator[Path, None, None]:
    """
    Create a temporary config.json for testing.

    Args:
        temp_dir: Temporary directory fixture.

    Yields:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    logs_dir = temp_dir / "output" / "logs"
    logs_dir.mkdir(parents=True)

    config_data = {
        "paths": {
            "logs_directory": str(logs_dir)
        },
        "highlighting": {
            "max_text_length": 5000,
            "max_query_length": 200,
            "max_terms": 8,
            "min_term_length": 2,
            "trailing_context": 20
        },
        "gui": {
            "page_title": "Test Highlighting",
            "default_field": "title",
            "show_performance": False
        },
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "max_file_size_mb": 1,
            "backup_count": 1
        }
    }

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    yield config_path


@pytest.fixture
def long_text() -> str:
    """Text longer than typical field limits with matches in the middle."""
    return (
        "This is a very long text that contains machine learning concepts and should "
        "be truncated intelligently based on search terms to preserve context around "
        "the important parts."
    )


@pytest.fixture
def sample_article():
    """
    Build an upstream search result for field highlighting tests.

    Returns:
        ArticleSearchResult with every displayed field populated.
    """
    from search_highlighting.search import ArticleSearchResult, build_search_context

    return ArticleSearchResult(
        id="1",
        title="Machine Learning in Modern JavaScript Applications",
        content="This article explores the integration of machine learning algorithms "
                "into JavaScript applications...",
        author="John Doe",
        tags=["JavaScript", "Machine Learning", "AI"],
        relevance_score=0.95,
        matched_fields=["title", "content", "tags"],
        search_context=build_search_context("machine learning javascript", 42.5)
    )


@pytest.fixture
def reset_config_singleton():
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance.
    """
    from search_highlighting.core import config_loader
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def package_caplog(caplog):
    """
    caplog wired to the package logger.

    The package logger does not propagate to the root logger, so the
    capture handler is attached to it directly.
    """
    from search_highlighting.core.logger import PACKAGE_LOGGER

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.addHandler(caplog.handler)
    yield caplog
    package_logger.removeHandler(caplog.handler)


@pytest.fixture
def reset_logger_singleton():
    """
    Reset the logger initialization flag between tests.
    """
    from search_highlighting.core import logger
    logger._logger_initialized = False
    yield
    logger._logger_initialized = False
