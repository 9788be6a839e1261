"""Bracket generation: single elimination draw shape, ids, byes and format aliases."""
import math

import pytest

from courtside.models.bracket import Bracket, TournamentFormat
from courtside.utils.match_generation import (
    elimination_round_count,
    generate_bracket,
    generate_single_elimination,
    next_power_of_two,
)


def _pairs(round_):
    return [(m.team1, m.team2) for m in round_.matches]


def test_next_power_of_two():
    assert next_power_of_two(0) == 1
    assert next_power_of_two(1) == 1
    assert next_power_of_two(2) == 2
    assert next_power_of_two(3) == 4
    assert next_power_of_two(5) == 8
    assert next_power_of_two(16) == 16


def test_three_entrants_single():
    """A, B, C -> round 1: A v B, C v bye; round 2: one empty match."""
    bracket = generate_bracket("single", ["A", "B", "C"])

    assert len(bracket.rounds) == 2
    assert _pairs(bracket.rounds[0]) == [("A", "B"), ("C", None)]
    assert _pairs(bracket.rounds[1]) == [(None, None)]
    assert [r.round for r in bracket.rounds] == [1, 2]


@pytest.mark.parametrize("n", [2, 3, 4, 5, 7, 8, 9, 16, 17])
def test_single_round_count_is_ceil_log2(n):
    entrants = [f"P{i}" for i in range(n)]
    bracket = generate_bracket(TournamentFormat.SINGLE, entrants)

    assert len(bracket.rounds) == math.ceil(math.log2(n))
    assert len(bracket.rounds) == elimination_round_count(n)
    assert len(bracket.rounds[-1].matches) == 1


def test_single_round_sizes_halve():
    bracket = generate_single_elimination([f"P{i}" for i in range(6)])
    assert [len(r.matches) for r in bracket.rounds] == [4, 2, 1]


def test_single_ids_dense_round_by_round():
    bracket = generate_single_elimination([f"P{i}" for i in range(8)])
    ids = [[m.id for m in r.matches] for r in bracket.rounds]
    assert ids == [[1, 2, 3, 4], [5, 6], [7]]


def test_single_all_matches_start_pending():
    bracket = generate_single_elimination(["A", "B", "C", "D"])
    for m in bracket.iter_matches():
        assert m.status == "pending"
        assert m.court is None
        assert m.winner is None
        assert m.score is None


def test_single_byes_padded_after_entrants():
    """5 entrants -> 8 slots; byes fill the tail in input order."""
    bracket = generate_single_elimination(["A", "B", "C", "D", "E"])
    assert _pairs(bracket.rounds[0]) == [("A", "B"), ("C", "D"), ("E", None), (None, None)]


def test_single_degenerate_inputs_do_not_crash():
    empty = generate_single_elimination([])
    assert len(empty.rounds) == 1
    assert _pairs(empty.rounds[0]) == [(None, None)]

    solo = generate_single_elimination(["A"])
    assert len(solo.rounds) == 1
    assert _pairs(solo.rounds[0]) == [("A", None)]


@pytest.mark.parametrize("fmt", ["double", "seeding", TournamentFormat.DOUBLE, TournamentFormat.SEEDING])
def test_double_and_seeding_alias_single(fmt):
    entrants = ["A", "B", "C", "D", "E"]
    assert generate_bracket(fmt, entrants) == generate_bracket("single", entrants)


def test_unknown_format_returns_empty_bracket():
    bracket = generate_bracket("swiss", ["A", "B", "C"])
    assert bracket == Bracket()
    assert bracket.is_empty
    assert bracket.to_dict() == {"rounds": []}


def test_generation_does_not_mutate_entrants():
    entrants = ["A", "B", "C"]
    generate_bracket("single", entrants)
    assert entrants == ["A", "B", "C"]
