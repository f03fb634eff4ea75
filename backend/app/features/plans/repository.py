"""Training plan repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.training_plan import TrainingPlan
from app.shared.repository import BaseRepository


class TrainingPlanRepository(BaseRepository[TrainingPlan]):
    """Stores generated plans keyed by plan id."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, TrainingPlan)

    async def save_generated(
        self,
        intake: dict,
        weeks: int,
        prompt: str,
        html: str,
        model_name: str,
    ) -> TrainingPlan:
        plan = await self.create(
            intake=intake,
            weeks=weeks,
            prompt=prompt,
            html=html,
            model_name=model_name,
        )
        await self.db.commit()
        return plan

    async def replace_html(
        self,
        plan: TrainingPlan,
        weeks: int,
        prompt: str,
        html: str,
        model_name: str,
    ) -> TrainingPlan:
        plan = await self.update(
            plan, weeks=weeks, prompt=prompt, html=html, model_name=model_name
        )
        await self.db.commit()
        return plan
