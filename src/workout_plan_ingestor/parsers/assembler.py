"""
Record Assembler

Runs the plan pipeline over decoded text and assembles one ParsedWorkout
per day: metadata -> days -> categories/equipment -> exercise lines.
Days without a single exercise are dropped.
"""

import logging
from typing import List, Optional

from .exercise_lines import parse_exercise_lines
from .identity import Clock, IdentifierSource, new_identifier, utc_now, workout_id
from .models import DaySpan, ParsedWorkout, PlanMetadata
from .sections import extract_equipment, extract_metadata, segment_categories, segment_days

logger = logging.getLogger(__name__)

DEFAULT_FILE_NAME = "Workout"


def assemble_workout(
    day: DaySpan,
    metadata: PlanMetadata,
    file_name: str,
    new_id: IdentifierSource = new_identifier,
    clock: Clock = utc_now,
) -> Optional[ParsedWorkout]:
    """Build the workout for one day, or None when it has no exercises."""
    owner_id = workout_id(new_id)

    exercises = []
    for span in segment_categories(day.text):
        exercises.extend(parse_exercise_lines(
            span.text, span.category, owner_id=owner_id, new_id=new_id, clock=clock
        ))

    label = day.day_label
    if day.day_label and day.workout_type:
        label = f"{day.day_label} - {day.workout_type}"

    if not exercises:
        logger.debug(f"Dropping {label or 'workout'}: no exercises")
        return None

    logger.debug(f"Total parsed {len(exercises)} exercises for {label or 'workout'}")
    return ParsedWorkout(
        id=owner_id,
        file_name=file_name,
        upload_date=clock(),
        workout_name=label,
        workout_day=label,
        program=metadata.program,
        phase=metadata.phase,
        week=metadata.week,
        equipment=extract_equipment(day.text),
        exercises=exercises,
    )


def parse_plan_text(
    text: str,
    file_name: Optional[str] = None,
    new_id: IdentifierSource = new_identifier,
    clock: Clock = utc_now,
) -> List[ParsedWorkout]:
    """
    Parse decoded plan text into workouts.

    Never raises for malformed content; an empty list means nothing in the
    text looked like a workout.

    Args:
        text: Decoded document text
        file_name: Source document name
        new_id: Source of fresh unique ids
        clock: Source of timestamps

    Returns:
        Workouts in day order
    """
    logger.info(f"Plan text length: {len(text)}")
    file_name = file_name or DEFAULT_FILE_NAME
    metadata = extract_metadata(text)

    workouts = []
    for day in segment_days(text):
        workout = assemble_workout(day, metadata, file_name, new_id=new_id, clock=clock)
        if workout is not None:
            workouts.append(workout)

    logger.info(f"Parsed {len(workouts)} workouts from {file_name}")
    return workouts
