"""1D elementary cellular automaton on a ring, driven by a Wolfram rule."""

import logging
import numpy as np
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .seeding import SeedSource, wall_clock_seed

logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 50
DEFAULT_MAX_SEED_DIMENSION = 5000


def rule30(left: bool, center: bool, right: bool) -> bool:
    """Closed form of Rule 30: left XOR (center OR right)."""
    return bool(left) ^ (bool(center) or bool(right))


@dataclass(frozen=True)
class Rule:
    """Elementary CA rule identified by its Wolfram number (0-255)."""
    number: int

    def __post_init__(self):
        if isinstance(self.number, bool) or not isinstance(self.number, (int, np.integer)):
            raise TypeError(f"Rule number must be an integer, got {type(self.number).__name__}")
        if not 0 <= self.number <= 255:
            raise ValueError(f"Rule number must be in 0..255, got {self.number}")

    @classmethod
    def from_string(cls, rule_str: str) -> "Rule":
        """Parse rule from string like 'W30', 'R30', 'Rule 30' or '30'."""
        text = rule_str.upper().replace(" ", "")
        for prefix in ("RULE", "W", "R"):
            if text.startswith(prefix):
                text = text[len(prefix):]
                break
        if not text.isdigit():
            raise ValueError(f"Cannot parse rule '{rule_str}'")
        return cls(int(text))

    def to_string(self) -> str:
        """Convert to Wolfram notation like 'W30'."""
        return f"W{self.number}"

    def next_state(self, left: bool, center: bool, right: bool) -> bool:
        """Next state of a single cell given its (left, self, right) neighbourhood."""
        pattern = (int(bool(left)) << 2) | (int(bool(center)) << 1) | int(bool(right))
        return bool((self.number >> pattern) & 1)

    def apply(self, left: np.ndarray, center: np.ndarray, right: np.ndarray) -> np.ndarray:
        """Vectorised next_state over whole neighbour arrays."""
        pattern = (left.astype(np.uint8) << 2) | (center.astype(np.uint8) << 1) | right.astype(np.uint8)
        return ((self.number >> pattern) & 1).astype(np.uint8)

    def table(self) -> Dict[Tuple[bool, bool, bool], bool]:
        """Truth table, highest neighbourhood (T, T, T) first."""
        rows = {}
        for pattern in range(7, -1, -1):
            key = (bool(pattern & 4), bool(pattern & 2), bool(pattern & 1))
            rows[key] = self.next_state(*key)
        return rows


def _check_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


class Automaton:
    """Ring of binary cells with a single live cell in the middle at time zero.

    The automaton is evolved ``abs(seed) % max_seed_dimension`` times during
    construction, so a fresh instance is already past its warmup.
    """

    def __init__(
        self,
        seed: int,
        length: int = DEFAULT_LENGTH,
        max_seed_dimension: int = DEFAULT_MAX_SEED_DIMENSION,
        rule: Optional[Rule] = None,
    ):
        _check_int("seed", seed)
        _check_int("length", length)
        _check_int("max_seed_dimension", max_seed_dimension)
        if rule is not None and not isinstance(rule, Rule):
            raise TypeError(f"rule must be a Rule, got {type(rule).__name__}")
        if length < 1:
            raise ValueError(f"length must be positive, got {length}")
        if max_seed_dimension < 1:
            raise ValueError(f"max_seed_dimension must be positive, got {max_seed_dimension}")

        self.length = int(length)
        self.max_seed_dimension = int(max_seed_dimension)
        self.rule = rule if rule is not None else RULE_30
        self.effective_seed = abs(int(seed)) % self.max_seed_dimension
        self.generation = 0
        self.owned = False
        self._history: List[np.ndarray] = []

        self._cells = np.zeros(self.length, dtype=np.uint8)
        self._cells[self.central_index] = 1

        logger.debug(
            "Automaton %s length=%d seed=%d effective_seed=%d",
            self.rule.to_string(), self.length, seed, self.effective_seed,
        )
        self.evolve(self.effective_seed)

    @classmethod
    def from_seed_source(cls, source: SeedSource = wall_clock_seed, **kwargs) -> "Automaton":
        """Build an automaton seeded from a (usually non-deterministic) seed source."""
        return cls(source(), **kwargs)

    @property
    def central_index(self) -> int:
        """Index of the cell that starts live and supplies the random bits."""
        return self.length // 2

    @property
    def cells(self) -> np.ndarray:
        """Copy of the current state as a bool array."""
        return self._cells.astype(bool)

    def step(self):
        """Advance by one generation."""
        # Neighbours come from the old array; the result is a new one
        left = np.roll(self._cells, 1)
        right = np.roll(self._cells, -1)
        self._cells = self.rule.apply(left, self._cells, right)
        self.generation += 1

    def evolve(self, times: int = 1):
        """Advance the automaton by ``times`` generations."""
        _check_int("times", times)
        if times < 0:
            raise ValueError(f"Cannot evolve a negative number of times: {times}")
        for _ in range(times):
            self.step()

    def central_bit(self) -> bool:
        """Current value of the central cell."""
        return bool(self._cells[self.central_index])

    def run(self, steps: int, record_history: bool = False) -> List[np.ndarray]:
        """Run simulation for multiple steps."""
        _check_int("steps", steps)
        if steps < 0:
            raise ValueError(f"Cannot run a negative number of steps: {steps}")
        for _ in range(steps):
            if record_history:
                self._history.append(self.cells)
            self.step()
        if record_history:
            self._history.append(self.cells)
        return self._history

    def get_history(self) -> List[np.ndarray]:
        """Get recorded history."""
        return self._history

    def clear_history(self):
        self._history = []

    def render(self, steps: int, live: str = "#", dead: str = ".") -> List[str]:
        """Space-time diagram as text rows; the current state is the first row."""
        rows = []
        for state in self.run(steps, record_history=True)[-(steps + 1):]:
            rows.append("".join(live if cell else dead for cell in state))
        return rows

    def __repr__(self):
        return (
            f"Automaton(rule={self.rule.to_string()}, length={self.length}, "
            f"effective_seed={self.effective_seed}, generation={self.generation})"
        )


RULE_30 = Rule(30)
