"""Pseudo-random numbers assembled bit by bit from the central cell of a Rule 30 automaton."""

import logging
from typing import Iterator, Optional

from .automaton import Automaton, DEFAULT_LENGTH, DEFAULT_MAX_SEED_DIMENSION, _check_int
from .seeding import SeedSource, wall_clock_seed

logger = logging.getLogger(__name__)

INT_BITS = 31
LONG_BITS = 63
FLOAT_BITS = 23  # single-precision fraction width
DOUBLE_BITS = 52  # double-precision fraction width


class RandomGenerator:
    """Generates ints, longs, floats and doubles from an owned Automaton.

    Every bit is read from the central cell and the automaton is then evolved
    one step, so no two bits ever come from the same state.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        length: int = DEFAULT_LENGTH,
        max_seed_dimension: int = DEFAULT_MAX_SEED_DIMENSION,
        seed_source: SeedSource = wall_clock_seed,
        automaton: Optional[Automaton] = None,
    ):
        if automaton is not None:
            if not isinstance(automaton, Automaton):
                raise TypeError(f"Expected an Automaton, got {type(automaton).__name__}")
        elif seed is None:
            automaton = Automaton.from_seed_source(
                seed_source, length=length, max_seed_dimension=max_seed_dimension
            )
        else:
            automaton = Automaton(seed, length=length, max_seed_dimension=max_seed_dimension)
        self._adopt(automaton)

    @classmethod
    def from_automaton(cls, automaton: Automaton) -> "RandomGenerator":
        """Take ownership of a pre-configured automaton.

        The caller must not evolve the automaton afterwards. An automaton can
        only belong to one generator.
        """
        return cls(automaton=automaton)

    def _adopt(self, automaton: Automaton):
        if automaton.owned:
            raise ValueError("Automaton is already owned by another generator")
        automaton.owned = True
        self._automaton = automaton
        logger.debug("Generator adopted %r", automaton)

    @property
    def automaton(self) -> Automaton:
        """The owned automaton; read it, do not evolve it."""
        return self._automaton

    def _next_bit(self) -> bool:
        bit = self._automaton.central_bit()
        self._automaton.evolve(1)
        return bit

    def bits(self) -> Iterator[bool]:
        """Endless stream of central bits; each one consumes a step."""
        while True:
            yield self._next_bit()

    def getrandbits(self, k: int) -> int:
        """Non-negative integer with ``k`` random bits, least significant bit first."""
        _check_int("k", k)
        if k < 0:
            raise ValueError(f"Number of bits must be non-negative, got {k}")
        value, factor = 0, 1
        for _ in range(k):
            if self._next_bit():
                value += factor
            factor *= 2
        return value

    def _fraction(self, bits: int) -> float:
        value, factor = 0.0, 0.5
        for _ in range(bits):
            if self._next_bit():
                value += factor
            factor /= 2
        return value

    def _bounded(self, bits: int, a: Optional[int], b: Optional[int]) -> int:
        # Bounds are checked before any bit is drawn
        if a is not None:
            _check_int("a", a)
            a = int(a)
        if b is not None:
            _check_int("b", b)
            b = int(b)
        if a is None:
            if b is not None:
                raise ValueError("An upper bound needs a lower bound")
            return self.getrandbits(bits)
        if b is None:
            if a <= 0:
                raise ValueError(f"Bound must be positive, got {a}")
            return self.getrandbits(bits) % a
        if b <= a:
            raise ValueError(f"Empty range [{a}, {b})")
        return a + self.getrandbits(bits) % (b - a)

    def next_int(self, a: Optional[int] = None, b: Optional[int] = None) -> int:
        """31-bit draw.

        ``next_int()`` is in [0, 2**31 - 1], ``next_int(bound)`` in [0, bound)
        and ``next_int(left, right)`` in [left, right).
        """
        return self._bounded(INT_BITS, a, b)

    def next_long(self, a: Optional[int] = None, b: Optional[int] = None) -> int:
        """63-bit draw; same calling forms as next_int."""
        return self._bounded(LONG_BITS, a, b)

    def next_float(self) -> float:
        """Float in [0, 1) built from 23 bits."""
        return self._fraction(FLOAT_BITS)

    def next_double(self) -> float:
        """Float in [0, 1) built from 52 bits."""
        return self._fraction(DOUBLE_BITS)

    def random(self) -> float:
        """Alias of next_double, in the style of random.random()."""
        return self.next_double()

    def __repr__(self):
        return f"RandomGenerator({self._automaton!r})"
