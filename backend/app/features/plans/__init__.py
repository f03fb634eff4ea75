"""Plans feature module: priorities, prompts and LLM plan generation."""

from .models import AthleteIntake, Priority, RaceWeights, TrainingPhases
from .weights import get_race_weights, format_division_name, DIVISIONS
from .priorities import calculate_priorities, STATION_TARGETS, STATION_NAMES
from .prompt_builder import (
    build_prompt,
    calculate_phases,
    estimate_target_5k,
    weeks_until_race,
)
from .llm_client import (
    GeminiClient,
    GeminiConfig,
    PlanGenerationError,
    LLMAuthError,
    LLMRateLimitError,
    LLMModelUnavailableError,
    LLMResponseError,
)
from .repository import TrainingPlanRepository
from .service import PlanService, PlanDraft

__all__ = [
    "AthleteIntake",
    "Priority",
    "RaceWeights",
    "TrainingPhases",
    "get_race_weights",
    "format_division_name",
    "DIVISIONS",
    "calculate_priorities",
    "STATION_TARGETS",
    "STATION_NAMES",
    "build_prompt",
    "calculate_phases",
    "estimate_target_5k",
    "weeks_until_race",
    "GeminiClient",
    "GeminiConfig",
    "PlanGenerationError",
    "LLMAuthError",
    "LLMRateLimitError",
    "LLMModelUnavailableError",
    "LLMResponseError",
    "TrainingPlanRepository",
    "PlanService",
    "PlanDraft",
]
