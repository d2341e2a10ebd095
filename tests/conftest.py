"""Root conftest — shared test configuration and fixtures."""

import os
import random
from datetime import datetime, timezone

import pytest

# Keep tests independent of a developer's local .env / shell settings
os.environ.setdefault("CHRONO_INTERVALS_LOG_FORMAT", "text")
os.environ.setdefault("CHRONO_INTERVALS_MAX_INTERVALS", "10000")


@pytest.fixture
def rng():
    """Seeded RNG so property tests are reproducible."""
    return random.Random(20221029)


@pytest.fixture
def random_time(rng):
    """Factory for random UTC datetimes within a century of `start_year`."""
    def _random_time(start_year: int = 1950) -> datetime:
        return datetime(
            start_year + rng.randrange(0, 100),
            rng.randint(1, 12),
            rng.randint(1, 28),
            rng.randrange(0, 24),
            rng.randrange(0, 60),
            rng.randrange(0, 60),
            tzinfo=timezone.utc,
        )
    return _random_time
