"""ECA Random - deterministic pseudo-random numbers from a Rule 30 elementary cellular automaton."""

from .automaton import (
    Automaton,
    Rule,
    RULE_30,
    rule30,
    DEFAULT_LENGTH,
    DEFAULT_MAX_SEED_DIMENSION,
)
from .generator import RandomGenerator
from .seeding import SeedSource, fixed_seed, wall_clock_seed

__all__ = [
    "Automaton",
    "Rule",
    "RULE_30",
    "rule30",
    "DEFAULT_LENGTH",
    "DEFAULT_MAX_SEED_DIMENSION",
    "RandomGenerator",
    "SeedSource",
    "fixed_seed",
    "wall_clock_seed",
]
