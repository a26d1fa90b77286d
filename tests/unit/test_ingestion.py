"""Unit tests for ingestion, filters and summary statistics."""

import pytest
from datetime import date, datetime
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from data.filters import PairingFilter, aircraft_types
from data.generators.sample_month import write_sample_csv
from data.ingestion import (
    PairingFileError,
    extract_layovers,
    load_pairings,
    parse_block_hours,
    parse_timestamp,
)
from data.statistics import describe_pairings
from models import Preference
from optimization.ranking import rank_pairings

HEADER = "Pairing,Pre-assigned,Duration,AC,Departure,Arrival,Pairing details,Block hours\n"


class TestParsing:
    """Tests for field-level parsing."""

    def test_block_hours(self):
        assert parse_block_hours("12:30") == 12.5
        assert parse_block_hours("7:00") == 7.0
        assert parse_block_hours("") == 0.0

    def test_layovers(self):
        assert extract_layovers("PTY - SMR -PTY -LIM -PTY") == frozenset({"PTY", "SMR", "LIM"})
        assert extract_layovers("") == frozenset()

    def test_timestamp(self):
        assert parse_timestamp("Oct 12,2025 12:15") == datetime(2025, 10, 12, 12, 15)
        assert parse_timestamp("2025-10-12 12:15") is None


class TestLoadPairings:
    """Tests for reading the CSV export."""

    def test_sample_round_trip(self, tmp_path, sample_month):
        """The written sample loads back to the same pairings."""
        path = write_sample_csv(tmp_path / "october.csv")
        assert load_pairings(path) == sample_month

    def test_skips_bad_rows(self, tmp_path, caplog):
        path = tmp_path / "pairings.csv"
        path.write_text(
            HEADER
            + 'P1,,2,737,"Oct 12,2025 12:15","Oct 13,2025 18:00",PTY - MIA - PTY,12:30\n'
            + 'P2,,1,737,,"Oct 14,2025 10:00",PTY-BOG-PTY,3:00\n'
            + 'P3,,x,737,"Oct 15,2025 10:00","Oct 15,2025 18:00",PTY-BOG-PTY,3:00\n'
            + 'P4,,0,737,"Oct 16,2025 10:00","Oct 16,2025 18:00",PTY-BOG-PTY,3:00\n'
        )
        pairings = load_pairings(path)

        assert [p.pairing_number for p in pairings] == ["P1"]
        p1 = pairings[0]
        assert p1.duration == 2
        assert p1.block_hours_decimal == 12.5
        assert p1.layovers == frozenset({"PTY", "MIA"})
        assert p1.pre_assigned == ""
        assert "Skipping row 3" in caplog.text
        assert "Skipping row 4" in caplog.text
        assert "Skipping row 5" in caplog.text

    def test_zero_duration_never_reaches_ranking(self, tmp_path):
        """A 0-day row is dropped, so legs-per-day scoring cannot divide by zero."""
        path = tmp_path / "pairings.csv"
        path.write_text(
            HEADER
            + 'P1,,0,737,"Oct 12,2025 08:00","Oct 12,2025 18:00",PTY-MIA-PTY,7:00\n'
        )
        pairings = load_pairings(path)
        assert pairings == []
        assert rank_pairings(pairings, [Preference.create("MAX_LEGS_PER_DAY", "2")]) == []

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "wrong.csv"
        path.write_text("Pairing,Departure\nP1,Oct 12\n")
        with pytest.raises(PairingFileError, match="missing columns"):
            load_pairings(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(PairingFileError):
            load_pairings(tmp_path / "absent.csv")


class TestPairingFilter:
    """Tests for hard filters."""

    def test_defaults_keep_everything(self, sample_month):
        assert PairingFilter().apply(sample_month) == sample_month

    def test_aircraft(self, sample_month):
        kept = PairingFilter(aircraft_types=["E190"]).apply(sample_month)
        assert [p.pairing_number for p in kept] == ["P1005", "P1009"]

    def test_search_case_insensitive(self, sample_month):
        kept = PairingFilter(search_query="lim").apply(sample_month)
        assert [p.pairing_number for p in kept] == ["P1004", "P1008"]

    def test_date_range(self, sample_month):
        """The end date is inclusive: P1011 departs at 06:00 on Oct 28."""
        kept = PairingFilter(
            start_date=date(2025, 10, 20), end_date=date(2025, 10, 28)
        ).apply(sample_month)
        assert [p.pairing_number for p in kept] == ["P1008", "P1009", "P1010", "P1011"]

    def test_duration_and_block_hours(self, sample_month):
        assert len(PairingFilter(max_duration=2).apply(sample_month)) == 7
        assert len(PairingFilter(min_block_hours=15).apply(sample_month)) == 4

    def test_aircraft_types(self, sample_month):
        assert aircraft_types(sample_month) == ["737", "787", "E190"]


class TestStatistics:
    """Tests for bid-package summaries."""

    def test_durations(self, sample_month):
        summary = describe_pairings(sample_month)
        assert summary["durations"] == [
            {"name": "1 Days", "count": 4},
            {"name": "2 Days", "count": 3},
            {"name": "3 Days", "count": 3},
            {"name": "4 Days", "count": 2},
        ]

    def test_aircraft_most_common_first(self, sample_month):
        aircraft = describe_pairings(sample_month)["aircraft"]
        assert aircraft[0] == {"name": "737", "count": 8}
        assert sorted(a["count"] for a in aircraft) == [2, 2, 8]

    def test_empty(self):
        assert describe_pairings([]) == {"durations": [], "aircraft": []}
