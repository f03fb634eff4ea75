"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from app.api.v1.routes import plans, results

api_router = APIRouter()

api_router.include_router(results.router, prefix="/results", tags=["Results"])
api_router.include_router(plans.router, prefix="/plans", tags=["Plans"])
