"""Summary statistics over a pairing list."""

from typing import Dict, List, Sequence

import pandas as pd

from models import Pairing


def pairings_frame(pairings: Sequence[Pairing]) -> pd.DataFrame:
    """Tabulate pairings, one row each."""
    return pd.DataFrame(
        [
            {
                "pairing_number": p.pairing_number,
                "duration": p.duration,
                "aircraft_type": p.aircraft_type,
                "departure_time": p.departure_time,
                "block_hours": p.block_hours_decimal,
            }
            for p in pairings
        ],
        columns=[
            "pairing_number", "duration", "aircraft_type",
            "departure_time", "block_hours",
        ],
    )


def describe_pairings(pairings: Sequence[Pairing]) -> Dict[str, List[Dict]]:
    """
    Trip-length distribution and aircraft-type breakdown.

    Durations are listed in ascending day order; aircraft types by
    descending count.
    """
    frame = pairings_frame(pairings)
    if frame.empty:
        return {"durations": [], "aircraft": []}

    durations = frame["duration"].value_counts().sort_index()
    aircraft = frame["aircraft_type"].value_counts(sort=False)
    aircraft = aircraft.sort_values(ascending=False, kind="stable")

    return {
        "durations": [
            {"name": f"{int(days)} Days", "count": int(count)}
            for days, count in durations.items()
        ],
        "aircraft": [
            {"name": str(ac), "count": int(count)}
            for ac, count in aircraft.items()
        ],
    }


def print_pairing_summary(pairings: Sequence[Pairing]) -> None:
    """Print a summary of the bid package."""
    summary = describe_pairings(pairings)
    print("\n" + "=" * 60)
    print("           BID PACKAGE SUMMARY")
    print("=" * 60)
    print(f"Pairings: {len(pairings)}")

    print("\nTRIP LENGTH:")
    print("-" * 60)
    for row in summary["durations"]:
        print(f"  {row['name']:<10} {row['count']:>5}")

    print("\nAIRCRAFT:")
    print("-" * 60)
    for row in summary["aircraft"]:
        print(f"  {row['name']:<10} {row['count']:>5}")
    print("=" * 60 + "\n")
