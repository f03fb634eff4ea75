"""
Tests for plan prompt construction.
"""

from datetime import date

import pytest

from app.features.plans import (
    AthleteIntake,
    build_prompt,
    calculate_phases,
    calculate_priorities,
    estimate_target_5k,
    get_race_weights,
    weeks_until_race,
)
from app.features.results import StationKey


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def intake():
    return AthleteIntake(
        race_location="Berlin",
        race_date=date(2026, 12, 14),
        race_division="mens-open",
        age_group="30-34",
        current_time_s=5400,  # 1:30:00
        current_5k_s=1500,  # 25:00
        target_time_s=4800,  # 1:20:00
        station_times={
            StationKey.SKI_ERG: 300,
            StationKey.WALL_BALLS: 480,
        },
        run_days=3,
        strength_days=2,
        gym_days=1,
        equipment=["Dumbbells", "Rower"],
    )


# =============================================================================
# Helpers
# =============================================================================

class TestWeeksUntilRace:

    def test_rounds_up(self):
        assert weeks_until_race(date(2026, 11, 1), today=date(2026, 10, 19)) == 2

    def test_exact_weeks(self):
        assert weeks_until_race(date(2026, 11, 2), today=date(2026, 10, 19)) == 2

    def test_past_race_is_one_week(self):
        assert weeks_until_race(date(2026, 1, 1), today=date(2026, 10, 19)) == 1


class TestCalculatePhases:

    def test_twelve_weeks(self):
        p = calculate_phases(12)
        assert (p.foundation_end, p.build_start, p.build_end) == (3, 4, 7)
        assert (p.intensity_start, p.intensity_end) == (8, 10)
        assert (p.peak_start, p.peak_end, p.taper_week) == (11, 11, 12)

    def test_short_plan_keeps_two_foundation_weeks(self):
        assert calculate_phases(4).foundation_end == 2


class TestEstimateTarget5k:

    def test_derived_from_race_improvement(self):
        intake = AthleteIntake(
            race_location="x",
            race_date=date(2026, 12, 1),
            race_division="mens-open",
            current_time_s=6000,
            target_time_s=5400,  # 10% faster
            current_5k_s=1500,
        )
        assert estimate_target_5k(intake) == 1455  # 3% faster

    def test_unknown_without_inputs(self, intake):
        intake.current_5k_s = 0
        assert estimate_target_5k(intake) == 0


# =============================================================================
# Test build_prompt
# =============================================================================

class TestBuildPrompt:

    def test_contains_athlete_data(self, intake):
        prompt = build_prompt(
            intake, 8, calculate_priorities(intake.station_times), get_race_weights("mens-open")
        )
        assert "**Race Location:** Berlin" in prompt
        assert "Men's Open (Age Group: 30-34)" in prompt
        assert "**Current Race Time:** 1:30:00 (5400 seconds)" in prompt
        assert "**Time to Find:** 10:00 (600 seconds)" in prompt
        assert "Farmers Carry: 24kg each (2x = 48kg total)" in prompt
        assert "Dumbbells, Rower" in prompt
        assert "**Rest Days per Week:** 1" in prompt

    def test_station_times_with_unknowns(self, intake):
        prompt = build_prompt(intake, 8, [], get_race_weights("mens-open"))
        assert "  - 1000m SkiErg: 5:00" in prompt
        assert "  - 100 Wall Balls: 8:00" in prompt
        assert "  - 1000m Row: N/A" in prompt

    def test_priorities_ranked_with_focus(self, intake):
        priorities = calculate_priorities(intake.station_times)
        prompt = build_prompt(intake, 8, priorities, get_race_weights("mens-open"))
        assert "1. **Wall Balls** - Current: 8:00, Target: 3:30, Potential Savings: 4:30" in prompt
        assert "2. **SkiErg**" in prompt
        assert "- **Wall Balls:** Practice 2-3x per week" in prompt
        assert "- **SkiErg:** Dedicate extra training time" in prompt

    def test_no_priorities(self, intake):
        prompt = build_prompt(intake, 8, [], get_race_weights("mens-open"))
        assert "No previous race data provided" in prompt

    def test_phases(self, intake):
        prompt = build_prompt(intake, 12, [], get_race_weights("mens-open"))
        assert "**Weeks 1-3 (Foundation Phase):**" in prompt
        assert "**Week 12 (Taper Week):**" in prompt
        assert "complete 12-week training plan" in prompt

    def test_body_composition_only_with_target(self, intake):
        weights = get_race_weights("mens-open")
        assert "Body Composition Goals" not in build_prompt(intake, 8, [], weights)

        intake.current_weight_kg = 85.0
        intake.current_body_fat = 20.0
        intake.target_weight_kg = 80.0
        prompt = build_prompt(intake, 8, [], weights)
        assert "Body Composition Goals" in prompt
        assert "Lose 5.0kg fat" in prompt

    def test_estimated_target_5k_used(self, intake):
        prompt = build_prompt(intake, 8, [], get_race_weights("mens-open"))
        # 1500 * (1 - 600/5400 * 0.3) = 1450
        assert "**Target 5K Time:** 24:10 (1450 seconds)" in prompt
