"""Shared fixtures for the pwbuild test suite."""

from __future__ import annotations

import random

import pytest


@pytest.fixture()
def seeded_rng() -> random.Random:
    """Deterministic random source for reproducible passwords."""
    return random.Random(20240611)
