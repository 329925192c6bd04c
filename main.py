#!/usr/bin/env python3
"""CLI for drawing numbers from the Rule 30 random generator."""

import argparse
import logging
import sys

from .automaton import Automaton, DEFAULT_LENGTH, DEFAULT_MAX_SEED_DIMENSION
from .generator import RandomGenerator
from .seeding import wall_clock_seed

logger = logging.getLogger(__name__)


def _make_generator(args) -> RandomGenerator:
    return RandomGenerator(
        seed=args.seed,
        length=args.length,
        max_seed_dimension=args.max_seed_dimension,
    )


def _bounds(args):
    if args.left is not None or args.right is not None:
        if args.bound is not None:
            raise ValueError("--bound cannot be combined with --left/--right")
        if args.left is None or args.right is None:
            raise ValueError("--left and --right must be given together")
        return args.left, args.right
    return args.bound, None


def cmd_int(args):
    """Draw 31-bit integers."""
    generator = _make_generator(args)
    a, b = _bounds(args)
    for _ in range(args.count):
        print(generator.next_int(a, b))


def cmd_long(args):
    """Draw 63-bit integers."""
    generator = _make_generator(args)
    a, b = _bounds(args)
    for _ in range(args.count):
        print(generator.next_long(a, b))


def cmd_float(args):
    """Draw single-precision fractions."""
    generator = _make_generator(args)
    for _ in range(args.count):
        print(repr(generator.next_float()))


def cmd_double(args):
    """Draw double-precision fractions."""
    generator = _make_generator(args)
    for _ in range(args.count):
        print(repr(generator.next_double()))


def cmd_cells(args):
    """Print the space-time diagram of the automaton."""
    seed = args.seed if args.seed is not None else wall_clock_seed()
    automaton = Automaton(seed, length=args.length, max_seed_dimension=args.max_seed_dimension)
    for row in automaton.render(args.steps, live=args.live, dead=args.dead):
        print(row)


def _add_common(parser):
    parser.add_argument("--seed", type=int, default=None, help="Seed (default: wall clock)")
    parser.add_argument("--length", type=int, default=DEFAULT_LENGTH, help="Number of cells")
    parser.add_argument(
        "--max-seed-dimension", type=int, default=DEFAULT_MAX_SEED_DIMENSION,
        help="Seeds are reduced modulo this value",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="ECA Random - pseudo-random numbers from a Rule 30 cellular automaton"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for name, func, help_text in (
        ("int", cmd_int, "Draw 31-bit integers"),
        ("long", cmd_long, "Draw 63-bit integers"),
    ):
        int_parser = subparsers.add_parser(name, help=help_text)
        _add_common(int_parser)
        int_parser.add_argument("-n", "--count", type=int, default=1, help="Number of draws")
        int_parser.add_argument("--bound", type=int, default=None, help="Exclusive upper bound")
        int_parser.add_argument("--left", type=int, default=None, help="Inclusive lower bound")
        int_parser.add_argument("--right", type=int, default=None, help="Exclusive upper bound")
        int_parser.set_defaults(func=func)

    for name, func, help_text in (
        ("float", cmd_float, "Draw floats in [0, 1) from 23 bits"),
        ("double", cmd_double, "Draw floats in [0, 1) from 52 bits"),
    ):
        frac_parser = subparsers.add_parser(name, help=help_text)
        _add_common(frac_parser)
        frac_parser.add_argument("-n", "--count", type=int, default=1, help="Number of draws")
        frac_parser.set_defaults(func=func)

    cells_parser = subparsers.add_parser("cells", help="Show the space-time diagram")
    _add_common(cells_parser)
    cells_parser.add_argument("--steps", type=int, default=20, help="Generations to show")
    cells_parser.add_argument("--live", type=str, default="#", help="Character for live cells")
    cells_parser.add_argument("--dead", type=str, default=".", help="Character for dead cells")
    cells_parser.set_defaults(func=cmd_cells)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        args.func(args)
    except (ValueError, TypeError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
