"""
Prompt builder for LLM training plan generation.

Turns the athlete intake, ranked priorities and division weights into
the markdown prompt sent to the model. The model answers with HTML
following the week/day card structure described at the end.
"""

from __future__ import annotations

import math
from datetime import date

from app.features.results.models import StationKey
from app.features.results.time_codec import format_duration

from .models import AthleteIntake, Priority, RaceWeights, TrainingPhases
from .priorities import STATION_DISTANCE_LABELS, station_target
from .weights import format_division_name

MIN_FOUNDATION_WEEKS = 2
TOP_PRIORITIES_WITH_FOCUS = 3

# 5K improves at ~30% of the relative race-time improvement
FIVE_K_IMPROVEMENT_RATIO = 0.3

# Keyword in priority name → focus line
PRIORITY_FOCUS: list[tuple[tuple[str, ...], str]] = [
    (
        ("Wall Balls",),
        "- **Wall Balls:** Practice 2-3x per week. Work up to sets of 25-30 "
        "unbroken. Always practice after running to simulate race fatigue.",
    ),
    (
        ("Burpee",),
        "- **Burpee Broad Jumps:** Practice 3x per week at home. Focus on "
        "efficiency: chest-to-ground, explosive jump forward. Target: 3.1 sec/burpee.",
    ),
    (
        ("Sled Pull",),
        "- **Sled Pull:** Weekly practice at gym. Focus on powerful arm pulls, "
        "driving with legs. Find optimal weight.",
    ),
    (
        ("Sandbag", "Lunges"),
        "- **Sandbag Lunges:** Heavy DB walking lunges 2x/week at home. Build "
        "quad/glute endurance. Practice keeping upright posture.",
    ),
]

STATION_TARGET_NOTES: dict[StationKey, str] = {
    StationKey.SKI_ERG: " (pace ~2:22/500m)",
    StationKey.BURPEE: " (aim for 3.1 sec/burpee)",
    StationKey.ROW: " (pace ~2:22/500m)",
    StationKey.WALL_BALLS: " (sets of 25-30 unbroken)",
}

OUTPUT_FORMAT = """```html
<section class="week-section">
    <div class="week-header">
        <h2>Week {weekNumber}: {phaseName}</h2>
        <p>Focus: {focusDescription}</p>
    </div>

    <div class="day-card">
        <div class="day-header">
            <span class="day-title">{dayName}</span>
            <span class="day-type">{sessionType}</span>
        </div>
        <ul class="exercise-list">
            <li class="exercise-item">
                <div class="exercise-name">{exerciseName}</div>
                <div class="exercise-details">{sets}x{reps} <span class="weight-badge">{weight}</span></div>
            </li>
        </ul>
    </div>
</section>
```"""

KEY_PRINCIPLES = """1. **Progressive Overload:** Gradually increase intensity, volume, or weight each week
2. **Specificity:** Train movements and energy systems specific to Hyrox
3. **Recovery:** Ensure adequate rest days
4. **Periodization:** Structure training in phases
5. **Individualization:** Adapt to athlete's schedule, equipment, and priorities
6. **Technique First:** Emphasize proper form before intensity
7. **Race Simulation:** Include full race simulations in later phases
8. **Transition Practice:** Dedicate time to practicing transitions"""


def weeks_until_race(race_date: date, today: date | None = None) -> int:
    """Whole weeks until race day, rounded up, at least 1."""
    today = today or date.today()
    days = (race_date - today).days
    return max(1, math.ceil(days / 7))


def calculate_phases(weeks: int) -> TrainingPhases:
    """Split the plan into foundation/build/intensity/peak/taper weeks."""
    foundation_end = max(MIN_FOUNDATION_WEEKS, math.floor(weeks * 0.25))
    build_end = math.floor(weeks * 0.6)
    intensity_end = math.floor(weeks * 0.85)
    return TrainingPhases(
        foundation_end=foundation_end,
        build_start=foundation_end + 1,
        build_end=build_end,
        intensity_start=build_end + 1,
        intensity_end=intensity_end,
        peak_start=intensity_end + 1,
        peak_end=weeks - 1,
        taper_week=weeks,
    )


def estimate_target_5k(intake: AthleteIntake) -> int:
    """Target 5K derived from the race-time improvement, or 0 if unknown."""
    if not (intake.current_5k_s and intake.current_time_s and intake.target_time_s):
        return 0
    improvement = (intake.current_time_s - intake.target_time_s) / intake.current_time_s
    return round(intake.current_5k_s * (1 - improvement * FIVE_K_IMPROVEMENT_RATIO))


def _division_label(intake: AthleteIntake) -> str:
    label = format_division_name(intake.race_division)
    if intake.age_group:
        label += f" (Age Group: {intake.age_group})"
    return label


def _time_with_seconds(seconds: int) -> str:
    return f"{format_duration(seconds)} ({seconds} seconds)"


def _priority_focus(priority: Priority) -> str:
    for keywords, focus in PRIORITY_FOCUS:
        if any(k in priority.name for k in keywords):
            return focus
    return (
        f"- **{priority.name}:** Dedicate extra training time to improve "
        "technique and efficiency."
    )


def format_priorities(priorities: list[Priority]) -> str:
    if not priorities:
        return "No previous race data provided. Focus on building all-around fitness."
    return "\n".join(
        f"{i}. **{p.name}** - Current: {format_duration(p.current_s)}, "
        f"Target: {format_duration(p.target_s)}, "
        f"Potential Savings: {format_duration(p.savings_s)}"
        for i, p in enumerate(priorities, start=1)
    )


def format_priority_focus(priorities: list[Priority]) -> str:
    if not priorities:
        return "- Build all-around fitness with focus on Hyrox-specific movements"
    return "\n".join(
        _priority_focus(p) for p in priorities[:TOP_PRIORITIES_WITH_FOCUS]
    )


def _body_composition(intake: AthleteIntake) -> str:
    if not intake.target_weight_kg:
        return ""
    target_bf = intake.target_body_fat if intake.target_body_fat is not None else "N/A"
    lines = [
        "### Body Composition Goals",
        f"- **Current:** {intake.current_weight_kg}kg, {intake.current_body_fat}% body fat",
        f"- **Target:** {intake.target_weight_kg}kg, {target_bf}% body fat",
    ]
    if intake.current_weight_kg:
        loss = intake.current_weight_kg - intake.target_weight_kg
        lines.append(f"- **Goal:** Lose {loss:.1f}kg fat")
    return "\n".join(lines) + "\n\n"


def build_prompt(
    intake: AthleteIntake,
    weeks: int,
    priorities: list[Priority],
    weights: RaceWeights,
) -> str:
    """Build the full plan-generation prompt."""
    phases = calculate_phases(weeks)
    division = _division_label(intake)
    equipment = (
        ", ".join(intake.equipment)
        if intake.equipment
        else "Limited equipment - bodyweight and basic movements"
    )
    target_5k = intake.target_5k_s or estimate_target_5k(intake)

    station_lines = "\n".join(
        f"  - {STATION_DISTANCE_LABELS[key]}: "
        f"{format_duration(intake.station_times.get(key))}"
        for key in StationKey.stations()
    )
    target_lines = "\n".join(
        f"- **{STATION_DISTANCE_LABELS[key]}:** Target "
        f"{format_duration(station_target(key))}{STATION_TARGET_NOTES.get(key, '')}"
        for key in StationKey.stations()
    )

    return f"""# Generate Hyrox Training Plan

## Athlete Information

### Race Information
- **Race Location:** {intake.race_location}
- **Race Date:** {intake.race_date.isoformat()}
- **Weeks Until Race:** {weeks}
- **Race Division:** {division}
- **Race Weights:**
  - Sled Push: {weights.sled_push}kg (including sled)
  - Sled Pull: {weights.sled_pull}kg (including sled)
  - Farmers Carry: {weights.farmers_carry}kg each (2x = {weights.farmers_carry * 2}kg total)
  - Sandbag Lunges: {weights.sandbag_lunges}kg
  - Wall Balls: {weights.wall_balls}kg

### Current Performance
- **Current Race Time:** {_time_with_seconds(intake.current_time_s)}
- **Current 5K Time:** {_time_with_seconds(intake.current_5k_s)}
- **Previous Race Station Times:**
{station_lines}

### Target Goals
- **Target Race Time:** {_time_with_seconds(intake.target_time_s)}
- **Target 5K Time:** {_time_with_seconds(target_5k)}
- **Time to Find:** {_time_with_seconds(intake.time_to_find_s)}

{_body_composition(intake)}### Training Priorities (ranked by improvement potential)
{format_priorities(priorities)}

### Training Schedule Constraints
- **Running Days per Week:** {intake.run_days}
- **Strength Days per Week:** {intake.strength_days}
- **Gym/Hyrox Equipment Days per Week:** {intake.gym_days}
- **Rest Days per Week:** {intake.rest_days}

### Available Equipment
{equipment}

## Training Plan Structure

Generate a complete {weeks}-week training plan with these phases:

1. **Weeks 1-{phases.foundation_end} (Foundation Phase):** Learn equipment, build base fitness, establish routine
2. **Weeks {phases.build_start}-{phases.build_end} (Build Phase):** Increase volume and intensity, improve station efficiency
3. **Weeks {phases.intensity_start}-{phases.intensity_end} (Intensity Phase):** Race pace simulations, high intensity, full dress rehearsals
4. **Weeks {phases.peak_start}-{phases.peak_end} (Peak Phase):** Maintain fitness while reducing fatigue, perfect race pace
5. **Week {phases.taper_week} (Taper Week):** Light technique work, stay fresh, trust your training

## Priority-Based Training Focus

{format_priority_focus(priorities)}

## Station-Specific Targets

{target_lines}

## Instructions

Generate a complete {weeks}-week Hyrox training plan in HTML format for {division}. The plan should:

1. Be structured week-by-week with daily workouts
2. Include specific exercises, sets, reps, and weights
3. Progressively increase intensity and volume
4. Focus on identified priorities
5. Adapt to available equipment: {equipment}
6. Include proper periodization (foundation → build → intensity → peak → taper)
7. Account for training schedule: {intake.run_days} runs, {intake.strength_days} strength, {intake.gym_days} gym sessions per week
8. Include transition practice
9. Provide race-specific station work in gym sessions

### Output Format

Generate HTML that matches this structure for each week:

{OUTPUT_FORMAT}

### Key Principles

{KEY_PRINCIPLES}

Generate the complete training plan now."""
