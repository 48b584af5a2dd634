"""
Parser Models

Pydantic models for the structured workout records that the plan parser
emits. Serialised keys are camelCase so storage and UI consumers can take
the records as-is.
"""

from datetime import datetime
from typing import List, Optional, Literal
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


CategoryName = Literal[
    "Warmup",
    "Buy-in",
    "Block 1",
    "Block 2",
    "Block 3",
    "Block 4",
    "Main",
    "Cooldown",
]

# Segmentation order; exercises of a workout follow this order
CATEGORY_ORDER: tuple = (
    "Warmup",
    "Buy-in",
    "Block 1",
    "Block 2",
    "Block 3",
    "Block 4",
    "Main",
    "Cooldown",
)


class PlanRecord(BaseModel):
    """Base for immutable parser records"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        frozen = True


class PlanMetadata(PlanRecord):
    """Program/phase/week header shared by every workout of a document"""
    program: Optional[str] = None
    phase: Optional[str] = None
    week: Optional[str] = None  # e.g. "Week 11"


class DaySpan(PlanRecord):
    """Text owned by one weekday marker, or the whole document"""
    day_label: Optional[str] = Field(default=None, description="MONDAY..SUNDAY")
    workout_type: Optional[str] = Field(default=None, description="Text inside the day parentheses")
    text: str


class CategorySpan(PlanRecord):
    """Text owned by one training category within a day"""
    category: CategoryName
    text: str


class ParsedExercise(PlanRecord):
    """A single exercise line"""
    id: str
    name: str = Field(..., min_length=3)
    sets: int = Field(default=1, ge=1)
    reps: str = Field(..., description="Free-form: '10', '10-12', 'AMRAP', '30 sec'")
    category: str
    notes: Optional[str] = None
    created_at: datetime


class ParsedWorkout(PlanRecord):
    """One workout per day of the plan"""
    id: str
    file_name: str
    upload_date: datetime
    workout_name: Optional[str] = None
    workout_day: Optional[str] = None  # e.g. "MONDAY - Hinge/Push"
    program: Optional[str] = None
    phase: Optional[str] = None
    week: Optional[str] = None
    equipment: List[str] = Field(default_factory=list)
    exercises: List[ParsedExercise] = Field(default_factory=list)


class FileInfo(BaseModel):
    """Information about the document being parsed"""
    filename: str
    extension: str
    size_bytes: int = 0
    content_type: Optional[str] = None
