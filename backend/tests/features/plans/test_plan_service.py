"""
Tests for PlanService: draft computation, generation and regeneration.
"""

from datetime import date

import pytest
from sqlalchemy import func, select

from app.features.plans import (
    AthleteIntake,
    LLMRateLimitError,
    PlanService,
    TrainingPlanRepository,
)
from app.features.results import StationKey
from app.models import TrainingPlan

TODAY = date(2026, 10, 19)


class FakeGenerator:
    """Records prompts and returns canned HTML."""

    def __init__(self, html="<section>plan</section>", error=None):
        self.html = html
        self.error = error
        self.prompts = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.html


@pytest.fixture
def intake():
    return AthleteIntake(
        race_location="London",
        race_date=date(2026, 12, 14),  # 8 weeks from TODAY
        race_division="womens-pro",
        current_time_s=5400,
        target_time_s=5100,
        station_times={StationKey.WALL_BALLS: 400},
    )


class TestDraft:

    def test_draft(self, intake):
        draft = PlanService.draft(intake, TODAY)
        assert draft.weeks == 8
        assert draft.weights.wall_balls == 6
        assert [p.key for p in draft.priorities] == [StationKey.WALL_BALLS]
        assert "**Race Location:** London" in draft.prompt
        assert "Women's Pro" in draft.prompt


class TestGenerate:

    def test_generate_stores_plan(self, intake, run_db):
        generator = FakeGenerator()

        async def scenario(session):
            service = PlanService(generator, TrainingPlanRepository(session), "gemini-test")
            plan = await service.generate(intake, {"race_location": "London"}, TODAY)
            return await TrainingPlanRepository(session).get_by_id(plan.id)

        plan = run_db(scenario)
        assert plan.html == "<section>plan</section>"
        assert plan.weeks == 8
        assert plan.model_name == "gemini-test"
        assert plan.prompt == generator.prompts[0]

    def test_failed_generation_stores_nothing(self, intake, run_db):
        generator = FakeGenerator(error=LLMRateLimitError("API quota exceeded"))

        async def scenario(session):
            repo = TrainingPlanRepository(session)
            service = PlanService(generator, repo, "gemini-test")
            with pytest.raises(LLMRateLimitError):
                await service.generate(intake, {}, TODAY)
            return await session.scalar(select(func.count()).select_from(TrainingPlan))

        assert run_db(scenario) == 0

    def test_regenerate_replaces_html(self, intake, run_db):
        async def scenario(session):
            repo = TrainingPlanRepository(session)
            first = PlanService(FakeGenerator("old"), repo, "m1")
            plan = await first.generate(intake, {}, TODAY)
            second = PlanService(FakeGenerator("new"), repo, "m2")
            return await second.regenerate(plan, intake, date(2026, 11, 2))

        plan = run_db(scenario)
        assert plan.html == "new"
        assert plan.model_name == "m2"
        assert plan.weeks == 6
