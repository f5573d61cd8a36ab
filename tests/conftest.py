import logging
from typing import Any

import pytest

from wikibase_datavalues.config.settings import settings


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Configure logging for all test sessions"""
    log_level = logging.DEBUG if settings.test_log_level == "DEBUG" else logging.INFO

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
        force=True
    )


@pytest.fixture
def quantity_payload() -> dict[str, Any]:
    """Quantity in metres with uncertainty, unit given as concept URI"""
    return {
        "amount": "+34.5",
        "unit": "http://www.wikidata.org/entity/Q11573",
        "upperBound": "+35.3",
        "lowerBound": "+33.7"
    }


@pytest.fixture
def dimensionless_payload() -> dict[str, Any]:
    return {
        "amount": "+5",
        "unit": "",
        "upperBound": "+5",
        "lowerBound": "+5"
    }
