"""Rule table, ring evolution and warmup tests for the automaton."""

import itertools

import numpy as np
import pytest

from ecarandom import Automaton, Rule, RULE_30, rule30, fixed_seed

RULE30_TABLE = {
    (True, True, True): False,
    (True, True, False): False,
    (True, False, True): False,
    (True, False, False): True,
    (False, True, True): True,
    (False, True, False): True,
    (False, False, True): True,
    (False, False, False): False,
}


@pytest.mark.parametrize("left,center,right", list(itertools.product([True, False], repeat=3)))
def test_rule30_matches_table_and_closed_form(left, center, right):
    expected = RULE30_TABLE[(left, center, right)]
    assert RULE_30.next_state(left, center, right) == expected
    assert rule30(left, center, right) == expected
    assert expected == (left ^ (center or right))


def test_rule_table_lists_all_neighbourhoods():
    assert RULE_30.table() == RULE30_TABLE
    assert list(RULE_30.table())[0] == (True, True, True)


def test_vectorised_apply_agrees_with_next_state():
    patterns = list(itertools.product([0, 1], repeat=3))
    left, center, right = (np.array(col, dtype=np.uint8) for col in zip(*patterns))
    result = RULE_30.apply(left, center, right)
    assert [bool(x) for x in result] == [RULE_30.next_state(*p) for p in patterns]


def test_rule_string_round_trip():
    assert Rule.from_string("W30") == RULE_30
    assert Rule.from_string("rule 30") == RULE_30
    assert Rule.from_string("90") == Rule(90)
    assert RULE_30.to_string() == "W30"


@pytest.mark.parametrize("number", [-1, 256])
def test_rule_number_out_of_range(number):
    with pytest.raises(ValueError):
        Rule(number)


def test_rule_string_garbage():
    with pytest.raises(ValueError):
        Rule.from_string("B3/S23")


def test_initial_configuration_single_center_cell():
    automaton = Automaton(0, length=7)
    assert automaton.cells.tolist() == [False, False, False, True, False, False, False]
    assert automaton.central_index == 3
    assert automaton.central_bit() is True
    assert automaton.generation == 0


def test_single_step_on_seven_cells(small_automaton):
    small_automaton.evolve(1)
    assert small_automaton.cells.tolist() == [False, False, True, True, True, False, False]


def test_steps_up_to_full_ring(small_automaton):
    small_automaton.evolve(2)
    assert small_automaton.cells.tolist() == [False, True, True, False, False, True, False]
    small_automaton.evolve(1)
    assert small_automaton.cells.tolist() == [True, True, False, True, True, True, True]


def test_ring_wraps_at_both_ends():
    automaton = Automaton(0, length=1)
    # A single cell is its own left and right neighbour: (T, T, T) -> F
    assert automaton.central_bit() is True
    automaton.evolve(1)
    assert automaton.central_bit() is False
    # (F, F, F) -> F
    automaton.evolve(1)
    assert automaton.central_bit() is False

    edge = Automaton(0, length=2)
    # cells [F, T]; cell 0 sees (T, F, T) -> F, cell 1 sees (F, T, F) -> T
    edge.evolve(1)
    assert edge.cells.tolist() == [False, True]


def test_central_column(center_column):
    automaton = Automaton(0, length=50)
    observed = []
    for _ in center_column:
        observed.append(automaton.central_bit())
        automaton.evolve(1)
    assert observed == center_column


def test_central_bit_has_no_side_effects(small_automaton):
    small_automaton.evolve(4)
    before = small_automaton.cells
    assert small_automaton.central_bit() == small_automaton.central_bit()
    assert np.array_equal(before, small_automaton.cells)
    assert small_automaton.generation == 4


def test_evolve_zero_is_noop(small_automaton):
    before = small_automaton.cells
    small_automaton.evolve(0)
    assert np.array_equal(before, small_automaton.cells)
    assert small_automaton.generation == 0


def test_evolve_many_equals_repeated_single_steps():
    bulk = Automaton(0, length=31)
    single = Automaton(0, length=31)
    bulk.evolve(40)
    for _ in range(40):
        single.evolve(1)
    assert np.array_equal(bulk.cells, single.cells)


@pytest.mark.parametrize("seed", [1, 7, 123, 4999])
def test_warmup_equals_evolving_zero_seed(seed):
    warmed = Automaton(seed, length=21)
    manual = Automaton(0, length=21)
    manual.evolve(seed)
    assert warmed.effective_seed == seed
    assert warmed.generation == seed
    assert np.array_equal(warmed.cells, manual.cells)


def test_seed_reduction_uses_abs_and_modulo():
    assert Automaton(5003).effective_seed == 3
    assert Automaton(-3).effective_seed == 3
    assert Automaton(10, max_seed_dimension=4).effective_seed == 2
    assert Automaton(2**64 + 5, max_seed_dimension=10).effective_seed == 1
    assert np.array_equal(Automaton(-17, length=9).cells, Automaton(17, length=9).cells)


@pytest.mark.parametrize("kwargs", [{"length": 0}, {"length": -5}, {"max_seed_dimension": 0}])
def test_invalid_construction_parameters(kwargs):
    with pytest.raises(ValueError):
        Automaton(1, **kwargs)


@pytest.mark.parametrize("seed", [1.5, "12", None, True])
def test_non_integer_seed_rejected(seed):
    with pytest.raises(TypeError):
        Automaton(seed)


def test_negative_evolve_rejected(small_automaton):
    with pytest.raises(ValueError):
        small_automaton.evolve(-1)
    assert small_automaton.generation == 0


def test_from_seed_source():
    automaton = Automaton.from_seed_source(fixed_seed(42), length=11)
    assert automaton.effective_seed == 42
    assert np.array_equal(automaton.cells, Automaton(42, length=11).cells)


def test_run_records_history(small_automaton):
    history = small_automaton.run(3, record_history=True)
    assert len(history) == 4
    assert history[0].tolist() == [False, False, False, True, False, False, False]
    assert history[1].tolist() == [False, False, True, True, True, False, False]
    assert np.array_equal(history[-1], small_automaton.cells)
    assert small_automaton.get_history() is history
    small_automaton.clear_history()
    assert small_automaton.get_history() == []


def test_render_rows(small_automaton):
    rows = small_automaton.render(2, live="#", dead=".")
    assert rows == ["...#...", "..###..", ".##..#."]
    assert small_automaton.generation == 2


def test_other_rules_supported():
    automaton = Automaton(0, length=7, rule=Rule(90))
    automaton.evolve(1)
    assert automaton.cells.tolist() == [False, False, True, False, True, False, False]


@pytest.mark.parametrize("rule", [30, "W30", 30.0])
def test_non_rule_object_rejected(rule):
    with pytest.raises(TypeError):
        Automaton(0, length=7, rule=rule)
