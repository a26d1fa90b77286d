"""Pytest fixtures for pairing planner tests."""

import pytest
from datetime import datetime, timedelta
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import Pairing, ScheduleRules
from data.ingestion import extract_layovers
from data.generators.sample_month import generate_sample_month


def build_pairing(
    number: str = "P1",
    departure: datetime = datetime(2025, 10, 1, 8, 0),
    arrival: datetime = None,
    duration: int = None,
    block_hours: float = 10.0,
    details: str = "PTY-MIA-PTY",
    aircraft_type: str = "737"
) -> Pairing:
    """Pairing with sensible defaults; a day trip unless told otherwise."""
    if arrival is None:
        arrival = departure + timedelta(hours=10)
    if duration is None:
        duration = (arrival.date() - departure.date()).days + 1
    return Pairing(
        pairing_number=number,
        pre_assigned="",
        duration=duration,
        aircraft_type=aircraft_type,
        departure_time=departure,
        arrival_time=arrival,
        details=details,
        block_hours_decimal=block_hours,
        layovers=extract_layovers(details)
    )


@pytest.fixture
def make_pairing():
    """Factory for ad-hoc pairings."""
    return build_pairing


@pytest.fixture
def three_day_trip():
    """Trip spanning Oct 10-12, 2025 (Friday to Sunday)."""
    return build_pairing(
        number="P310",
        departure=datetime(2025, 10, 10, 8, 0),
        arrival=datetime(2025, 10, 12, 18, 0),
        block_hours=20.0,
        details="PTY-JFK-PTY"
    )


@pytest.fixture
def rest_clash_pair():
    """Two trips that only clash once the 10h rest is added."""
    first = build_pairing(
        number="A",
        departure=datetime(2025, 10, 1, 8, 0),
        arrival=datetime(2025, 10, 1, 18, 0),
        block_hours=10.0
    )
    second = build_pairing(
        number="B",
        departure=datetime(2025, 10, 2, 2, 0),
        arrival=datetime(2025, 10, 2, 12, 0),
        block_hours=5.0
    )
    return first, second


@pytest.fixture
def default_rules():
    """Standard monthly rules."""
    return ScheduleRules()


@pytest.fixture
def sample_month():
    """Full sample bid package."""
    return generate_sample_month()
