"""Loading the monthly pairing export."""

from datetime import datetime
from pathlib import Path
from typing import FrozenSet, List, Optional, Union
import logging

import pandas as pd

from models import Pairing

logger = logging.getLogger(__name__)

# Example: "Oct 12,2025 12:15"
DATE_FORMAT = "%b %d,%Y %H:%M"

REQUIRED_COLUMNS = (
    "Pairing",
    "Pre-assigned",
    "Duration",
    "AC",
    "Departure",
    "Arrival",
    "Pairing details",
    "Block hours",
)


class PairingFileError(ValueError):
    """The pairing file cannot be read as a bid package."""


def parse_block_hours(text: str) -> float:
    """Convert "HH:MM" block time into decimal hours."""
    if not text or not text.strip():
        return 0.0
    hours, _, minutes = text.strip().partition(":")
    return int(hours) + (int(minutes) if minutes else 0) / 60


def extract_layovers(details: str) -> FrozenSet[str]:
    """Distinct stations in a "PTY - SMR -PTY" style route."""
    stations = (s.strip() for s in (details or "").split("-"))
    return frozenset(s for s in stations if s)


def parse_timestamp(text: str) -> Optional[datetime]:
    """Parse an export timestamp, or None if it does not match."""
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT)
    except (AttributeError, ValueError):
        return None


def row_to_pairing(row: dict) -> Optional[Pairing]:
    """
    Convert one export row into a Pairing.

    Returns None for rows without usable timestamps.

    Raises:
        ValueError: If the duration is not a positive integer
    """
    departure = parse_timestamp(row.get("Departure", ""))
    arrival = parse_timestamp(row.get("Arrival", ""))
    if departure is None or arrival is None:
        return None
    if arrival <= departure:
        return None

    duration = int(row["Duration"])
    if duration < 1:
        raise ValueError(f"duration must be at least 1 day, got {duration}")

    details = row.get("Pairing details", "")
    block_hours = row.get("Block hours", "")
    return Pairing(
        pairing_number=row.get("Pairing", ""),
        pre_assigned=row.get("Pre-assigned", ""),
        duration=duration,
        aircraft_type=row.get("AC", ""),
        departure_time=departure,
        arrival_time=arrival,
        details=details,
        block_hours_decimal=parse_block_hours(block_hours),
        block_hours=block_hours,
        layovers=extract_layovers(details)
    )


def load_pairings(source: Union[str, Path]) -> List[Pairing]:
    """
    Read a pairing CSV export.

    Args:
        source: Path to the CSV file

    Returns:
        Pairings in file order; unusable rows are skipped

    Raises:
        PairingFileError: If the file is unreadable or lacks columns
    """
    try:
        frame = pd.read_csv(
            source, dtype=str, keep_default_na=False, skipinitialspace=True
        )
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise PairingFileError(f"Cannot read pairing file {source}: {e}") from e

    frame.columns = [str(c).strip() for c in frame.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
    if missing:
        raise PairingFileError(
            f"Pairing file {source} is missing columns: {', '.join(missing)}"
        )

    pairings = []
    for line, row in enumerate(frame.to_dict(orient="records"), start=2):
        try:
            pairing = row_to_pairing(row)
        except ValueError as e:
            logger.warning(f"Skipping row {line}: {e}")
            continue
        if pairing is None:
            logger.warning(f"Skipping row {line}: missing or invalid timestamps")
            continue
        pairings.append(pairing)

    logger.info(f"Loaded {len(pairings)} pairings from {source}")
    return pairings
