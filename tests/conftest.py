import os
from datetime import datetime
from unittest.mock import patch

import pytest

_ENV_KEYS = (
    "MONTHGRID_FIRST_DAY_OF_WEEK",
    "MONTHGRID_FULL_DAYS",
    "MONTHGRID_MIN_DATE",
    "MONTHGRID_MAX_DATE",
)


@pytest.fixture
def leap_february():
    """2024-02-01 is a Thursday and February 2024 has 29 days."""
    return datetime(2024, 2, 1)


@pytest.fixture
def cli_env():
    """Isolate CLI tests from the caller's environment and ``.env`` file."""
    env = {key: value for key, value in os.environ.items() if key not in _ENV_KEYS}
    with (
        patch.dict(os.environ, env, clear=True),
        patch("monthgrid._cli.load_dotenv") as mock_load,
    ):
        yield mock_load
