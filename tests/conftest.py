"""Root test configuration: logger isolation and a shared documentation tree"""

import logging

import pytest

from llmstxt_gen.logger import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo init_logging() between tests so caplog sees package records."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture(name="docs_dir")
def docs_dir_fixture(tmp_path):
    """Two-section documentation tree used by end-to-end tests."""
    root = tmp_path / "pages"
    (root / "section1").mkdir(parents=True)
    (root / "section2").mkdir(parents=True)
    (root / "section1" / "test.mdx").write_text(
        "# Test Document\n\nSummary line.\n\n<Information>Note</Information>",
        encoding="utf-8",
    )
    (root / "section2" / "another.mdx").write_text(
        "# Another Test Document\n\nOther summary.",
        encoding="utf-8",
    )
    return root
