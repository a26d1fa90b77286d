"""Integration tests for greedy schedule construction."""

import pytest
from datetime import date, datetime, timedelta
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from models import Preference, PreferenceType, ScheduleRules, blocked_dates
from optimization.rules import ScoreWeights
from optimization.schedule_builder import ScheduleBuilder, generate_schedules
from optimization.strategies import (
    LifestyleStrategy,
    MaxEarningsStrategy,
    WeekendsFreeStrategy,
)


def numbers(schedule):
    return [p.pairing_number for p in schedule.pairings]


@pytest.fixture
def spaced_trips(make_pairing):
    """Ten 10-hour day trips, three days apart from Oct 1."""
    return [
        make_pairing(
            number=f"T{i:02d}",
            departure=datetime(2025, 10, 1, 8, 0) + timedelta(days=3 * i),
            block_hours=10.0
        )
        for i in range(10)
    ]


class TestStrategies:
    """Tests for strategy preference augmentation."""

    def test_money_added_once(self):
        strategy = MaxEarningsStrategy()
        assert [p.type for p in strategy.augment([])] == [PreferenceType.STRATEGY_MONEY]
        own = [Preference.create("STRATEGY_MONEY")]
        assert strategy.augment(own) == own

    def test_lifestyle_respects_user_duration(self):
        strategy = LifestyleStrategy()
        added = strategy.augment([])
        assert added[0].type == PreferenceType.MAX_DURATION
        assert added[0].value == "3"
        own = [Preference.create("MAX_DURATION", "5")]
        assert strategy.augment(own) == own

    def test_weekends_always_added(self):
        own = [Preference.create("DAY_OF_WEEK_OFF", "0")]
        effective = WeekendsFreeStrategy().augment(own)
        assert len(effective) == 3
        assert [p.value for p in effective[1:]] == ["0", "6"]

    def test_augment_leaves_input_untouched(self):
        own = [Preference.create("ROUTE", "MIA")]
        MaxEarningsStrategy().augment(own)
        LifestyleStrategy().augment(own)
        WeekendsFreeStrategy().augment(own)
        assert len(own) == 1

    def test_schedule_ids(self):
        assert MaxEarningsStrategy().schedule_id == "plan-a:-max-earnings"
        assert LifestyleStrategy().schedule_id == "plan-b:-lifestyle-&-comfort"
        assert WeekendsFreeStrategy().schedule_id == "plan-c:-weekends-free"


class TestScheduleBuilder:
    """Tests for the greedy builder."""

    def test_empty_pairings(self):
        """No pairings yields no schedules at all."""
        assert generate_schedules([], [Preference.create("STRATEGY_MONEY")]) == []

    def test_three_plans(self, sample_month):
        schedules = generate_schedules(sample_month, [])
        assert [s.name for s in schedules] == [
            "Plan A: Max Earnings",
            "Plan B: Lifestyle & Comfort",
            "Plan C: Weekends Free",
        ]

    def test_rest_buffer_keeps_higher_score(self, rest_clash_pair):
        """Only the better trip survives a rest-buffer clash."""
        prefs = [Preference.create("STRATEGY_MONEY")]
        for schedule in generate_schedules(list(rest_clash_pair), prefs):
            assert numbers(schedule) == ["A"]

    def test_block_hour_ceiling(self, spaced_trips):
        """Ten 10-hour trips stop at eight under the 88-hour ceiling."""
        for schedule in generate_schedules(spaced_trips, []):
            assert schedule.statistics.flight_count == 8
            assert schedule.statistics.total_block_hours == 80.0
            assert schedule.statistics.total_days_off == 22

    def test_ceiling_skips_rather_than_stops(self, make_pairing):
        """A too-large trip is skipped and smaller ones still fit."""
        big = make_pairing(number="BIG", block_hours=90.0)
        small = make_pairing(
            number="SMALL",
            departure=datetime(2025, 10, 5, 8, 0),
            block_hours=5.0
        )
        schedules = generate_schedules([big, small], [Preference.create("STRATEGY_MONEY")])
        assert numbers(schedules[0]) == ["SMALL"]

    def test_blocked_date_is_hard(self, three_day_trip, make_pairing):
        """Even with no date penalty, a blocked day is never flown."""
        other = make_pairing(number="FREE", departure=datetime(2025, 10, 20, 8, 0))
        builder = ScheduleBuilder(weights=ScoreWeights(specific_date=0))
        prefs = [Preference.create("SPECIFIC_DATE_OFF", "2025-10-11")]
        for schedule in builder.generate([three_day_trip, other], prefs):
            assert numbers(schedule) == ["FREE"]

    def test_synthetic_weekend_does_not_block(self, make_pairing):
        """Plan C still flies a Saturday trip when nothing else exists."""
        saturday = make_pairing(number="SAT", departure=datetime(2025, 10, 11, 8, 0))
        weekend_plan = generate_schedules([saturday], [])[2]
        assert numbers(weekend_plan) == ["SAT"]
        assert weekend_plan.pairings[0].score == -30

    def test_score_floor_excludes_everywhere(self, make_pairing):
        """Combined penalties below -100 keep a trip out of every plan."""
        bad = make_pairing(
            number="BAD",
            departure=datetime(2025, 10, 1, 20, 0),
            arrival=datetime(2025, 10, 2, 5, 0),
            details="PTY-JFK-PTY",
            block_hours=5.0
        )
        prefs = [
            Preference.create("AVOID_AIRPORT", "JFK"),
            Preference.create("AVOID_RED_EYE"),
        ]
        schedules = generate_schedules([bad], prefs)
        assert len(schedules) == 3
        for schedule in schedules:
            assert schedule.pairings == ()
            assert schedule.statistics.flight_count == 0

    def test_score_at_floor_is_kept(self, make_pairing):
        """Exactly -100 is not below the floor."""
        trip = make_pairing(number="JFK", details="PTY-JFK-PTY", duration=5)
        builder = ScheduleBuilder(strategies=[LifestyleStrategy()])
        schedule = builder.generate([trip], [Preference.create("AVOID_AIRPORT", "JFK")])[0]
        assert schedule.pairings[0].score == -100
        assert numbers(schedule) == ["JFK"]

    def test_over_constrained(self, three_day_trip):
        """Every candidate blocked gives an empty but valid schedule."""
        prefs = [Preference.create("SPECIFIC_DATE_OFF", "2025-10-10")]
        for schedule in generate_schedules([three_day_trip], prefs):
            assert schedule.is_empty
            assert schedule.statistics.total_block_hours == 0.0
            assert schedule.statistics.total_days_off == 30

    def test_output_chronological(self, sample_month):
        for schedule in generate_schedules(sample_month, []):
            departures = [p.departure_time for p in schedule.pairings]
            assert departures == sorted(departures)

    def test_max_earnings_sample_month(self, sample_month):
        """Greedy fill of the sample month by block hours."""
        plan_a = generate_schedules(sample_month, [])[0]
        assert numbers(plan_a) == ["P1003", "P1006", "P1007", "P1008", "P1010"]
        assert plan_a.statistics.total_block_hours == 87.92
        assert plan_a.statistics.total_days_off == 12
        assert plan_a.statistics.flight_count == 5

    def test_custom_rules(self, spaced_trips):
        builder = ScheduleBuilder(rules=ScheduleRules(max_monthly_block_hours=30.0))
        schedule = builder.build(spaced_trips, MaxEarningsStrategy(), [])
        assert schedule.statistics.flight_count == 3

    def test_deterministic(self, sample_month):
        prefs = [Preference.create("ROUTE", "LIM"), Preference.create("AVOID_RED_EYE")]
        first = [s.to_dict() for s in generate_schedules(sample_month, prefs)]
        second = [s.to_dict() for s in generate_schedules(sample_month, prefs)]
        assert first == second

    @pytest.mark.parametrize("prefs", [
        [],
        [Preference.create("STRATEGY_MONEY")],
        [Preference.create("SPECIFIC_DATE_OFF", "2025-10-08")],
        [
            Preference.create("SPECIFIC_DATE_OFF", "2025-10-18"),
            Preference.create("AVOID_AIRPORT", "MAD"),
            Preference.create("TIME_WINDOW", "6-10"),
            Preference.create("MAX_LEGS_PER_DAY", "1"),
        ],
    ])
    def test_hard_constraints_hold(self, sample_month, default_rules, prefs):
        blocked = blocked_dates(prefs)
        for schedule in generate_schedules(sample_month, prefs):
            verification = schedule.verify_constraints(default_rules, blocked)
            assert all(verification.values()), verification
            assert 0 <= schedule.statistics.total_days_off <= 30

    def test_blocked_sample_date(self, sample_month):
        """Blocking Oct 8 keeps P1003 and P1004 out of every plan."""
        prefs = [Preference.create("SPECIFIC_DATE_OFF", "2025-10-08")]
        for schedule in generate_schedules(sample_month, prefs):
            assert date(2025, 10, 8) not in schedule.work_days
            assert "P1003" not in numbers(schedule)
            assert "P1004" not in numbers(schedule)

    def test_compare(self, sample_month):
        builder = ScheduleBuilder()
        schedules = builder.generate(sample_month, [])
        comparison = builder.compare(schedules)
        assert set(comparison) == {s.id for s in schedules}
        assert comparison["plan-a:-max-earnings"]["flight_count"] == 5
