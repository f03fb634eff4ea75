"""PlanService: athlete intake → prompt → LLM → stored plan."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from app.models.training_plan import TrainingPlan

from .models import AthleteIntake, Priority, RaceWeights
from .priorities import calculate_priorities
from .prompt_builder import build_prompt, weeks_until_race
from .repository import TrainingPlanRepository
from .weights import get_race_weights

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Anything that turns a prompt into generated text."""

    async def generate(self, prompt: str) -> str: ...


@dataclass
class PlanDraft:
    """Everything derived from the intake before calling the model."""

    weeks: int
    weights: RaceWeights
    prompt: str
    priorities: list[Priority] = field(default_factory=list)


class PlanService:
    """Builds prompts and generates training plans."""

    def __init__(
        self,
        generator: TextGenerator,
        repository: TrainingPlanRepository,
        model_name: str,
    ):
        self.generator = generator
        self.repository = repository
        self.model_name = model_name

    @staticmethod
    def draft(intake: AthleteIntake, today: date | None = None) -> PlanDraft:
        """Compute weeks, weights, priorities and the prompt."""
        weeks = weeks_until_race(intake.race_date, today)
        weights = get_race_weights(intake.race_division)
        priorities = calculate_priorities(intake.station_times)
        prompt = build_prompt(intake, weeks, priorities, weights)
        return PlanDraft(
            weeks=weeks, weights=weights, prompt=prompt, priorities=priorities
        )

    async def generate(
        self,
        intake: AthleteIntake,
        intake_json: dict,
        today: date | None = None,
    ) -> TrainingPlan:
        """Generate a plan and store it.

        Raises:
            PlanGenerationError: LLM call failed; nothing is stored.
        """
        draft = self.draft(intake, today)
        html = await self.generator.generate(draft.prompt)
        plan = await self.repository.save_generated(
            intake=intake_json,
            weeks=draft.weeks,
            prompt=draft.prompt,
            html=html,
            model_name=self.model_name,
        )
        logger.info(f"Generated {draft.weeks}-week plan {plan.id}")
        return plan

    async def regenerate(
        self,
        plan: TrainingPlan,
        intake: AthleteIntake,
        today: date | None = None,
    ) -> TrainingPlan:
        """Re-run generation for a stored plan, replacing its HTML."""
        draft = self.draft(intake, today)
        html = await self.generator.generate(draft.prompt)
        plan = await self.repository.replace_html(
            plan,
            weeks=draft.weeks,
            prompt=draft.prompt,
            html=html,
            model_name=self.model_name,
        )
        logger.info(f"Regenerated plan {plan.id}")
        return plan
