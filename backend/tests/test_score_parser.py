"""Free-text score parsing (non-fatal)."""
import pytest

from courtside.services.score_parser import parse_score


def test_single_game():
    parsed = parse_score("11-7")
    assert parsed.games == [(11, 7)]
    assert parsed.team1_games_won == 1
    assert parsed.team2_games_won == 0
    assert (parsed.team1_points, parsed.team2_points) == (11, 7)


@pytest.mark.parametrize("raw", ["11-7 9-11 11-5", "11-7, 9-11, 11-5", " 11-7,9-11 ,11-5 "])
def test_multi_game_variants(raw):
    parsed = parse_score(raw)
    assert parsed.games == [(11, 7), (9, 11), (11, 5)]
    assert parsed.team1_games_won == 2
    assert parsed.team2_games_won == 1
    assert (parsed.team1_points, parsed.team2_points) == (31, 23)


@pytest.mark.parametrize("raw", [None, "", "   ", "eleven-seven", "11", "11-7-3", "11:7", "W/O"])
def test_unparseable_returns_none(raw):
    assert parse_score(raw) is None
