"""Shared fixtures for rules engine tests."""

import random

import pytest

from wizard.models.player import Player


@pytest.fixture
def p1() -> Player:
    return Player(name="Max")


@pytest.fixture
def p2() -> Player:
    return Player(name="David")


@pytest.fixture
def p3() -> Player:
    return Player(name="Karl")


@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source for shuffling."""
    return random.Random(1234)
