import logging
from pathlib import Path

import matplotlib
matplotlib.use('Agg')

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    return FIXTURES


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logging.getLogger("gameoflife").handlers.clear()
