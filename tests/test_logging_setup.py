import sys

import pytest
from loguru import logger

from brush_translate.logging_setup import configure_logging


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.unit
def test_configure_logging_filters_below_level(restore_logger, capsys):
    configure_logging("warning")

    logger.info("quiet message")
    logger.warning("loud message")

    err = capsys.readouterr().err
    assert "quiet message" not in err
    assert "loud message" in err
