"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy.
"""

from app.models.base import Base
from app.models.training_plan import TrainingPlan

__all__ = ["Base", "TrainingPlan"]
