"""
Unit tests for CSV export.
"""

from src.export.csv_export import (
    matches_to_csv, player_stats_to_csv, safe_filename, format_cell,
    MATCH_COLUMNS, STATS_COLUMNS
)
from src.scoring.records import MatchRecord, PlayerStats


class TestFormatting:
    """Tests for cell formatting."""

    def test_format_cell(self):
        assert format_cell(None) == ''
        assert format_cell(3.0) == 3
        assert format_cell(1.5) == 1.5
        assert format_cell("x") == "x"

    def test_safe_filename(self):
        assert safe_filename("Weekly #12 (Finals)") == "Weekly__12__Finals_"
        assert safe_filename("abc123") == "abc123"


class TestPlayerStatsCsv:
    """Tests for points table export."""

    def test_header_and_rows(self):
        stats = [
            PlayerStats(event_id="9001", player="Alice", swiss_wins=2, streak_bonus=0.5,
                        finals_place=1, finals_points=6, event_total=12.5),
            PlayerStats(event_id="9001", player="Bob", swiss_losses=1, event_total=0.5),
        ]

        lines = player_stats_to_csv(stats).splitlines()

        assert lines[0] == ",".join(STATS_COLUMNS)
        assert lines[1] == "9001,Alice,2,0,0,0,0.5,1,6,12.5"
        assert lines[2] == "9001,Bob,0,1,0,0,0,,0,0.5"

    def test_whole_totals_have_no_decimal(self):
        stats = [PlayerStats(event_id="1", player="Alice", swiss_wins=1, event_total=3.0)]
        assert player_stats_to_csv(stats).splitlines()[1].endswith(",3")

    def test_quotes_names_with_commas(self):
        stats = [PlayerStats(event_id="1", player="Doe, Jane")]
        assert '"Doe, Jane"' in player_stats_to_csv(stats)

    def test_empty(self):
        assert player_stats_to_csv([]) == ",".join(STATS_COLUMNS) + "\n"


class TestMatchesCsv:
    """Tests for match list export."""

    def test_row(self):
        m = MatchRecord(
            match_id="10", round=2, player1="Alice", player2="Bob", state="complete",
            player1_id="1", player2_id="2", winner_id="1", winner="Alice",
            player1_score=5, player2_score=2, stage_name="Group Stage",
            play_order=4, updated_at="2025-01-01T00:00:00Z"
        )

        lines = matches_to_csv([m]).splitlines()

        assert lines[0] == ",".join(MATCH_COLUMNS)
        assert lines[1] == "10,2,Alice,Bob,5,2,3,Alice,complete,Group Stage,4,2025-01-01T00:00:00Z"

    def test_missing_values_blank(self):
        m = MatchRecord(match_id="11", round=1, player1="Alice", player2="BYE", state="pending")
        assert matches_to_csv([m]).splitlines()[1] == "11,1,Alice,BYE,,,,,pending,Main Bracket,,"
