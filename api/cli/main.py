"""Command-line interface for the pairing bid planner."""

import argparse
import logging
import json
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from data.filters import PairingFilter
from data.generators.sample_month import generate_sample_month
from data.ingestion import PairingFileError, load_pairings
from data.statistics import print_pairing_summary
from models import Pairing, Preference, ScheduleRules, blocked_dates
from optimization.ranking import rank_pairings
from optimization.schedule_builder import ScheduleBuilder


def setup_logging(level: str = "INFO", log_file: str = None) -> None:
    """Configure logging."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    handlers = [logging.StreamHandler()]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        handlers=handlers
    )


def parse_preference(text: str) -> Preference:
    """Parse a TYPE=VALUE flag, e.g. ROUTE=MIA or AVOID_RED_EYE."""
    kind, sep, value = text.partition("=")
    kind = kind.strip().upper()
    if not kind:
        raise argparse.ArgumentTypeError(f"Invalid preference: {text!r}")
    if not sep and kind not in ("STRATEGY_MONEY", "AVOID_RED_EYE"):
        raise argparse.ArgumentTypeError(
            f"Preference {kind} needs a value, e.g. {kind}=..."
        )
    return Preference.create(kind, value.strip())


def load_preferences(path: str) -> List[Preference]:
    """
    Read preferences from a JSON list of {type, value, label} objects.

    Raises:
        ValueError: If the file is not valid JSON or an entry has no type
    """
    with open(path) as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"{path} must hold a JSON list of preferences")

    preferences = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict) or not entry.get("type"):
            raise ValueError(f"Preference {i} in {path} has no type")
        pref = Preference.create(
            entry["type"], str(entry.get("value", "")), entry.get("label")
        )
        if entry.get("id"):
            pref = Preference(
                id=entry["id"], type=pref.type, value=pref.value, label=pref.label
            )
        preferences.append(pref)
    return preferences


def parse_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date (use YYYY-MM-DD): {text!r}")


def run_planner(
    pairings: Sequence[Pairing],
    preferences: Sequence[Preference],
    rules: ScheduleRules,
    top: int = 10,
    verbose: bool = True,
    output_file: str = None
) -> dict:
    """Rank the pairings, build the three plans and report them."""
    logger = logging.getLogger(__name__)

    logger.info(
        f"Ranking {len(pairings)} pairings with {len(preferences)} preferences..."
    )
    ranked = rank_pairings(pairings, preferences)

    if verbose:
        print_pairing_summary(pairings)
        print(f"TOP {min(top, len(ranked))} PAIRINGS:")
        print("-" * 60)
        for scored in ranked[:top]:
            tags = ", ".join(scored.matches)
            print(
                f"  {scored.pairing_number:<8} score {scored.score:>5}  "
                f"{scored.pairing.details}  {tags}"
            )

    logger.info("Building schedules...")
    builder = ScheduleBuilder(rules)
    schedules = builder.generate(pairings, preferences)

    blocked = blocked_dates(preferences)
    for schedule in schedules:
        if verbose:
            schedule.print_summary()

        verification = schedule.verify_constraints(rules, blocked)
        if not all(verification.values()):
            failed = [name for name, ok in verification.items() if not ok]
            logger.error(f"{schedule.id} violates: {', '.join(failed)}")

    result = {
        "ranking": [s.to_dict() for s in ranked],
        "schedules": [s.to_dict() for s in schedules],
        "comparison": builder.compare(schedules),
    }

    # Save results if requested
    if output_file:
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(result, f, indent=2)
        logger.info(f"Results saved to {output_file}")

    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rank monthly pairings and build candidate bid schedules"
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--input",
        type=str,
        default=None,
        help="Pairing CSV export to load"
    )
    source.add_argument(
        "--instance",
        type=str,
        default="sample_month",
        choices=["sample_month"],
        help="Built-in instance when no --input is given (default: sample_month)"
    )

    parser.add_argument(
        "--pref",
        dest="prefs",
        type=parse_preference,
        action="append",
        default=[],
        metavar="TYPE=VALUE",
        help="Preference, repeatable (e.g. ROUTE=MIA, TIME_WINDOW=6-14)"
    )
    parser.add_argument(
        "--preferences",
        type=str,
        default=None,
        help="JSON file with a list of preferences"
    )

    filters = parser.add_argument_group("filters")
    filters.add_argument("--max-duration", type=int, default=10)
    filters.add_argument("--min-duration", type=int, default=1)
    filters.add_argument(
        "--aircraft", action="append", default=[],
        help="Aircraft type to keep, repeatable"
    )
    filters.add_argument("--search", type=str, default="")
    filters.add_argument("--start-date", type=parse_date, default=None)
    filters.add_argument("--end-date", type=parse_date, default=None)
    filters.add_argument("--min-block-hours", type=float, default=0.0)

    parser.add_argument(
        "--max-block-hours",
        type=float,
        default=None,
        help="Monthly block-hour ceiling (default: 88)"
    )
    parser.add_argument(
        "--rest-hours",
        type=float,
        default=None,
        help="Minimum rest between trips in hours (default: 10)"
    )
    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="Number of ranked pairings to print (default: 10)"
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output file for results JSON"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)"
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Log file path"
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress verbose output"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)

    # Setup logging
    setup_logging(args.log_level, args.log_file)
    logger = logging.getLogger(__name__)

    if args.input:
        try:
            pairings = load_pairings(args.input)
        except PairingFileError as e:
            logger.error(str(e))
            print(
                "Error parsing CSV. Please ensure it follows the correct format.",
                file=sys.stderr
            )
            return 1
    else:
        logger.info("Generating sample-month instance...")
        pairings = generate_sample_month()

    preferences = list(args.prefs)
    if args.preferences:
        try:
            preferences.extend(load_preferences(args.preferences))
        except (OSError, ValueError) as e:
            logger.error(str(e))
            print(f"Error reading preferences: {e}", file=sys.stderr)
            return 1

    pairing_filter = PairingFilter(
        min_duration=args.min_duration,
        max_duration=args.max_duration,
        aircraft_types=args.aircraft,
        search_query=args.search,
        start_date=args.start_date,
        end_date=args.end_date,
        min_block_hours=args.min_block_hours
    )
    filtered = pairing_filter.apply(pairings)
    logger.info(f"{len(filtered)} of {len(pairings)} pairings pass the filters")

    rules = ScheduleRules.with_overrides(args.max_block_hours, args.rest_hours)

    run_planner(
        filtered,
        preferences,
        rules,
        top=args.top,
        verbose=not args.quiet,
        output_file=args.output
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
