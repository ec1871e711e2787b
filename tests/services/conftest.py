"""Use case fixtures: in-memory ports and a seeded rng.

Invariants:
    - Every test gets a fresh InMemoryCohort (no shared state)
    - rng is seeded so tie-breaks and shuffles are reproducible
"""

import random

import pytest

from tests.services.fake_ports import InMemoryCohort, make_admin_notifier


@pytest.fixture
def cohort():
    return InMemoryCohort()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def admin_notifier():
    return make_admin_notifier()
