"""
Training Plan Routes

Endpoints for priority ranking and LLM plan generation.
"""

from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.db.session import get_async_db
from app.features.plans import (
    GeminiClient,
    GeminiConfig,
    PlanGenerationError,
    PlanService,
    TrainingPlanRepository,
    calculate_priorities,
)
from app.schemas.plans import (
    PlanRequest,
    PlanResponse,
    PriorityItem,
    PriorityRequest,
    PriorityResponse,
)

router = APIRouter()


@lru_cache
def get_gemini_client() -> GeminiClient:
    """Dependency: Gemini client configured from settings."""
    return GeminiClient(
        GeminiConfig(
            api_key=settings.gemini_api_key,
            model_name=settings.gemini_model,
            temperature=settings.gemini_temperature,
            top_k=settings.gemini_top_k,
            top_p=settings.gemini_top_p,
            max_output_tokens=settings.gemini_max_output_tokens,
        )
    )


def get_plan_service(
    db: AsyncSession = Depends(get_async_db),
    client: GeminiClient = Depends(get_gemini_client),
) -> PlanService:
    return PlanService(
        generator=client,
        repository=TrainingPlanRepository(db),
        model_name=settings.gemini_model,
    )


def _generation_failed(e: PlanGenerationError) -> HTTPException:
    return HTTPException(status_code=e.status_code, detail=e.to_dict())


@router.post("/priorities", response_model=PriorityResponse)
async def rank_priorities(request: PriorityRequest):
    """Rank stations by potential time savings against targets."""
    priorities = calculate_priorities(request.station_times)
    return PriorityResponse(
        priorities=[PriorityItem.from_priority(p) for p in priorities]
    )


@router.post("", response_model=PlanResponse)
async def create_plan(
    request: PlanRequest,
    service: PlanService = Depends(get_plan_service),
):
    """Generate a training plan from the intake form and store it."""
    try:
        plan = await service.generate(
            request.to_intake(), request.model_dump(mode="json")
        )
    except PlanGenerationError as e:
        raise _generation_failed(e)

    return PlanResponse.model_validate(plan)


@router.get("/{plan_id}", response_model=PlanResponse)
async def get_plan(
    plan_id: str,
    service: PlanService = Depends(get_plan_service),
):
    """Get a stored plan by ID."""
    plan = await service.repository.get_by_id(plan_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Plan not found")
    return PlanResponse.model_validate(plan)


@router.post("/{plan_id}/regenerate", response_model=PlanResponse)
async def regenerate_plan(
    plan_id: str,
    service: PlanService = Depends(get_plan_service),
):
    """Run generation again for a stored plan's intake."""
    plan = await service.repository.get_by_id(plan_id)
    if not plan:
        raise HTTPException(status_code=404, detail="Plan not found")

    intake = PlanRequest.model_validate(plan.intake).to_intake()
    try:
        plan = await service.regenerate(plan, intake)
    except PlanGenerationError as e:
        raise _generation_failed(e)

    return PlanResponse.model_validate(plan)
