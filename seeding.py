"""Seed sources for automata that are not given an explicit seed."""

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)

SeedSource = Callable[[], int]


def wall_clock_seed() -> int:
    """Current wall-clock time in milliseconds. Not reproducible."""
    seed = time.time_ns() // 1_000_000
    logger.debug("Drew wall-clock seed %d", seed)
    return seed


def fixed_seed(value: int) -> SeedSource:
    """Seed source that always yields ``value``."""
    def source() -> int:
        return value
    return source
