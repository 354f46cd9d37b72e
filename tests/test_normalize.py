"""
Unit tests for Challonge payload parsing and match normalization.
"""

import pytest

from src.challonge.models import ChallongeTournament, ChallongeMatch, ChallongeParticipant
from src.challonge.normalize import (
    parse_scores, build_name_maps, classify_stage, normalize_matches, load_tournament
)
from src.utils.constants import BYE, GROUP_STAGE, FINAL_STAGE, MAIN_BRACKET


def raw_match(match_id, round_number, p1, p2, winner=None, scores_csv="", state="complete", **extra):
    data = {
        "id": match_id,
        "round": round_number,
        "state": state,
        "player1_id": p1,
        "player2_id": p2,
        "winner_id": winner,
        "scores_csv": scores_csv,
        "forfeited": None,
    }
    data.update(extra)
    return {"match": data}


def raw_participant(participant_id, name, group_player_ids=None):
    return {"participant": {
        "id": participant_id,
        "name": name,
        "group_player_ids": group_player_ids or [],
    }}


@pytest.fixture
def group_payload():
    """Two-group tournament: group matches use group player ids, finals use participant ids."""
    return {"tournament": {
        "id": 9001,
        "name": "Weekly #12",
        "group_stages_enabled": True,
        "group_stages": [{"id": 77, "identifier": "A"}],
        "participants": [
            raw_participant(1, "Alice", [101]),
            raw_participant(2, "Bob", [102]),
        ],
        "matches": [
            raw_match(10, 1, 101, 102, winner=102, scores_csv="5-3", group_id=77),
            raw_match(11, 1, 1, 2, winner=1, scores_csv="3-1", identifier="G"),
            raw_match(12, 2, 101, None, group_id=78),
        ],
    }}


class TestParseScores:
    """Tests for scores_csv parsing."""

    def test_player1_winner(self):
        assert parse_scores("5-2", "1", "1", "2") == (5, 2)

    def test_player2_winner_swaps(self):
        assert parse_scores("5-2", "2", "1", "2") == (2, 5)

    def test_no_winner_positional(self):
        assert parse_scores("3-3", None, "1", "2") == (3, 3)

    def test_multiple_sets_uses_first(self):
        assert parse_scores("3-1,2-3", "1", "1", "2") == (3, 1)

    def test_unparseable(self):
        assert parse_scores("abc", "1", "1", "2") == (None, None)

    def test_empty_falls_back_to_fields(self):
        assert parse_scores("", "1", "1", "2", 4, 1) == (4, 1)
        assert parse_scores(None) == (None, None)


class TestModels:
    """Tests for payload dataclasses."""

    def test_ids_are_strings(self):
        m = ChallongeMatch.from_dict(raw_match(10, 1, 101, 102, winner=102, group_id=77))
        assert m.id == "10"
        assert m.player1_id == "101"
        assert m.winner_id == "102"
        assert m.group_id == "77"
        assert m.forfeited is False

    def test_bare_dict_accepted(self):
        p = ChallongeParticipant.from_dict({"id": 5, "name": "Eve"})
        assert p.id == "5"
        assert p.name == "Eve"
        assert p.group_player_ids == []

    def test_tournament_unwraps(self, group_payload):
        t = ChallongeTournament.from_dict(group_payload)
        assert t.id == "9001"
        assert t.group_stages_enabled
        assert len(t.participants) == 2
        assert len(t.matches) == 3
        assert t.find_group_stage("77").identifier == "A"
        assert t.find_group_stage("nope") is None


class TestNormalize:
    """Tests for MatchRecord normalization."""

    def test_group_match(self, group_payload):
        _, matches = load_tournament(group_payload)
        m = matches[0]

        assert m.stage_name == GROUP_STAGE
        assert m.group_stage == "A"
        assert (m.player1, m.player2) == ("Alice", "Bob")
        assert m.winner == "Bob"
        assert (m.player1_score, m.player2_score) == (3, 5)
        assert m.score_difference == 2
        assert m.resolve_result() == ("Bob", "Alice")

    def test_final_match(self, group_payload):
        _, matches = load_tournament(group_payload)
        m = matches[1]

        assert m.stage_name == FINAL_STAGE
        assert m.group_stage is None
        assert m.identifier == "G"
        assert (m.player1, m.player2) == ("Alice", "Bob")

    def test_missing_player_is_bye(self, group_payload):
        _, matches = load_tournament(group_payload)
        m = matches[2]

        assert m.player2 == BYE
        assert m.group_stage == "Group 78"
        assert not m.has_score

    def test_main_bracket(self):
        payload = {"tournament": {
            "id": 1,
            "participants": [raw_participant(1, "Alice"), raw_participant(2, "Bob")],
            "matches": [raw_match(10, 1, 1, 2, winner=1, scores_csv="2-0")],
        }}
        _, matches = load_tournament(payload)
        assert matches[0].stage_name == MAIN_BRACKET

    def test_unknown_ids_get_placeholders(self):
        tournament = ChallongeTournament.from_dict({
            "id": 1,
            "participants": [raw_participant(1, "Alice")],
            "matches": [raw_match(10, 1, 500, 501, winner=500, scores_csv="2-0")],
        })
        m = normalize_matches(tournament)[0]
        assert (m.player1, m.player2, m.winner) == ("Player 1", "Player 2", "Winner")

    def test_positional_ids(self):
        tournament = ChallongeTournament.from_dict({
            "id": 1,
            "group_stages_enabled": True,
            "participants": [raw_participant(1, "Alice"), raw_participant(2, "Bob")],
            "matches": [raw_match(10, 1, 500, 501, winner=500, scores_csv="2-0", group_id=7)],
        })
        _, group_map = build_name_maps(tournament, positional_ids=True)
        assert group_map == {"500": "Alice", "501": "Bob"}

        m = normalize_matches(tournament, positional_ids=True)[0]
        assert (m.player1, m.player2) == ("Alice", "Bob")

        m = normalize_matches(tournament, positional_ids=False)[0]
        assert (m.player1, m.player2) == ("Player 1", "Player 2")

    def test_classify_stage_without_groups(self):
        tournament = ChallongeTournament.from_dict({"id": 1})
        m = ChallongeMatch.from_dict(raw_match(10, 1, 1, 2, group_id=5))
        assert classify_stage(tournament, m) == (MAIN_BRACKET, None)
