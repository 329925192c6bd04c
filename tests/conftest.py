"""Shared fixtures for the Rule 30 generator tests."""

import pytest

from ecarandom import Automaton, RandomGenerator

# Central column of Rule 30 grown from a single live cell
RULE30_CENTER_COLUMN = [True, True, False, True, True, True, False]


@pytest.fixture
def center_column():
    return list(RULE30_CENTER_COLUMN)


@pytest.fixture
def small_automaton():
    return Automaton(0, length=7)


@pytest.fixture
def generator():
    return RandomGenerator(seed=1234)
