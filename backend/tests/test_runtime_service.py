"""Court assignment / completion state machine, including the accepted replay cases."""
from courtside.models.bracket import Done, InPlay
from courtside.services.runtime_service import assign_to_court, end_match, finish_match
from courtside.utils.match_generation import generate_bracket


def _four():
    return generate_bracket("single", ["A", "B", "C", "D"])


def test_assign_puts_match_in_play():
    bracket = assign_to_court(_four(), 1, "Front Left")
    match = bracket.get_match(1)
    assert match.status == "in_play"
    assert match.court == "Front Left"
    assert match.state == InPlay(court="Front Left")


def test_assign_then_end_invariants():
    bracket = assign_to_court(_four(), 1, "Back")
    bracket = end_match(bracket, 1, "11-9", "A")
    match = bracket.get_match(1)
    assert match.status == "done"
    assert match.court is None
    assert match.winner == "A"
    assert match.score == "11-9"


def test_end_match_does_not_advance():
    bracket = end_match(assign_to_court(_four(), 1, "Back"), 1, "11-9", "A")
    final = bracket.rounds[1].matches[0]
    assert final.team1 is None


def test_end_match_without_score():
    bracket = end_match(_four(), 2, None, "C")
    assert bracket.get_match(2).state == Done(winner="C", score=None)


def test_operations_do_not_mutate_input():
    original = _four()
    before = original.to_dict()
    assign_to_court(original, 1, "Back")
    end_match(original, 2, "11-0", "C")
    assert original.to_dict() == before


def test_unknown_match_is_identity():
    bracket = _four()
    assert assign_to_court(bracket, 42, "Back") == bracket
    assert end_match(bracket, 42, "11-0", "A") == bracket


def test_reassign_in_play_moves_court():
    bracket = assign_to_court(_four(), 1, "Back")
    bracket = assign_to_court(bracket, 1, "Front Left")
    assert bracket.get_match(1).court == "Front Left"


def test_assign_done_match_reopens_it():
    """No terminal lock: assigning a finished match puts it back in play and drops the result."""
    bracket = end_match(_four(), 1, "11-3", "A")
    bracket = assign_to_court(bracket, 1, "Back")
    match = bracket.get_match(1)
    assert match.status == "in_play"
    assert match.winner is None


def test_assign_match_without_opponents_is_accepted():
    bracket = assign_to_court(_four(), 3, "Back")  # final: both slots empty
    match = bracket.get_match(3)
    assert match.status == "in_play"
    assert not match.has_opponents


def test_two_matches_can_share_a_court():
    bracket = assign_to_court(_four(), 1, "Back")
    bracket = assign_to_court(bracket, 2, "Back")
    assert bracket.get_match(1).court == "Back"
    assert bracket.get_match(2).court == "Back"


def test_double_end_overwrites_winner():
    bracket = end_match(_four(), 1, "11-7", "A")
    bracket = end_match(bracket, 1, "7-11", "B")
    match = bracket.get_match(1)
    assert match.winner == "B"
    assert match.score == "7-11"


def test_finish_match_ends_advances_and_logs():
    bracket = assign_to_court(_four(), 2, "Back")
    bracket, entry = finish_match(bracket, 2, "11-5", "D")

    assert bracket.get_match(2).winner == "D"
    assert bracket.rounds[1].matches[0].team2 == "D"
    assert entry.match_id == 2
    assert entry.winner == "D"
    assert entry.score == "11-5"
    assert entry.ts is not None


def test_finish_match_without_advance():
    bracket, _ = finish_match(_four(), 1, "11-5", "A", advance=False)
    assert bracket.get_match(1).winner == "A"
    assert bracket.rounds[1].matches[0].team1 is None
