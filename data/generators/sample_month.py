"""Sample bid-package generator.

Creates a 12-pairing month out of a PTY base for demos and tests.
The set mixes day trips, long-haul red-eyes, weekend-spanning trips
and one overlapping pair, so every preference kind has something to bite on.
"""

from datetime import datetime
from pathlib import Path
from typing import List, Union

import pandas as pd

from data.ingestion import DATE_FORMAT, extract_layovers, parse_block_hours
from models import Pairing

# number, days, aircraft, departure, arrival, route, block hours
SAMPLE_ROWS = [
    ("P1001", 1, "737", "2025-10-01 06:00", "2025-10-01 15:00", "PTY-MIA-PTY", "6:30"),
    ("P1002", 3, "737", "2025-10-02 08:00", "2025-10-04 18:00", "PTY-JFK-BOG-PTY", "14:45"),
    ("P1003", 4, "787", "2025-10-06 22:00", "2025-10-10 06:00", "PTY-MAD-PTY", "22:10"),
    ("P1004", 2, "737", "2025-10-08 07:00", "2025-10-09 20:00", "PTY-LIM-PTY", "9:20"),
    ("P1005", 1, "E190", "2025-10-13 10:00", "2025-10-13 19:30", "PTY-SJO-PTY", "4:15"),
    ("P1006", 3, "737", "2025-10-14 05:30", "2025-10-16 17:00", "PTY-GRU-PTY", "16:40"),
    ("P1007", 4, "787", "2025-10-17 21:00", "2025-10-21 05:00", "PTY-AMS-PTY", "23:30"),
    ("P1008", 2, "737", "2025-10-22 09:00", "2025-10-23 16:00", "PTY-SMR-PTY-LIM-PTY", "10:05"),
    ("P1009", 1, "E190", "2025-10-24 13:00", "2025-10-24 21:00", "PTY-MDE-PTY", "3:50"),
    ("P1010", 3, "737", "2025-10-27 07:15", "2025-10-29 18:45", "PTY-LAX-PTY", "15:30"),
    ("P1011", 2, "737", "2025-10-28 06:00", "2025-10-29 14:00", "PTY-MEX-PTY", "8:10"),
    ("P1012", 1, "737", "2025-10-30 08:00", "2025-10-30 17:00", "PTY-CUN-PTY", "5:00"),
]


def generate_sample_month() -> List[Pairing]:
    """
    Generate the sample October bid package.

    Returns:
        Pairings in bid-package order
    """
    pairings = []
    for number, days, aircraft, dep, arr, route, block in SAMPLE_ROWS:
        pairings.append(Pairing(
            pairing_number=number,
            pre_assigned="",
            duration=days,
            aircraft_type=aircraft,
            departure_time=datetime.fromisoformat(dep),
            arrival_time=datetime.fromisoformat(arr),
            details=route,
            block_hours_decimal=parse_block_hours(block),
            block_hours=block,
            layovers=extract_layovers(route)
        ))
    return pairings


def write_sample_csv(path: Union[str, Path]) -> Path:
    """Write the sample month in the airline export format."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    frame = pd.DataFrame(
        [
            {
                "Pairing": p.pairing_number,
                "Pre-assigned": p.pre_assigned,
                "Duration": p.duration,
                "AC": p.aircraft_type,
                "Departure": p.departure_time.strftime(DATE_FORMAT),
                "Arrival": p.arrival_time.strftime(DATE_FORMAT),
                "Pairing details": p.details,
                "Block hours": p.block_hours,
            }
            for p in generate_sample_month()
        ]
    )
    frame.to_csv(output_path, index=False)
    return output_path


if __name__ == "__main__":
    from data.statistics import print_pairing_summary

    print_pairing_summary(generate_sample_month())
