"""
Training Plan Model

Stores the athlete intake, the prompt sent to the model and the generated HTML.
"""

from datetime import datetime
import uuid

from sqlalchemy import Column, String, DateTime, Integer, JSON, Text

from app.models.base import Base


class TrainingPlan(Base):
    """Model for storing generated training plans."""

    __tablename__ = "training_plans"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Input
    intake = Column(JSON, nullable=False)  # PlanRequest as JSON
    weeks = Column(Integer, nullable=False)
    prompt = Column(Text, nullable=False)

    # Output
    html = Column(Text, nullable=True)
    model_name = Column(String(100), nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<TrainingPlan {self.id} ({self.weeks} weeks)>"
