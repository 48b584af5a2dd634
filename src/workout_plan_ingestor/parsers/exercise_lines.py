"""
Exercise Lines

Turns one category's text into ParsedExercise records. Only lines shaped
like "<name> x <reps>" become exercises; headers, round counts and rest
notations are skipped. Skipping is silent: a missed exercise is preferable
to a bogus one.
"""

import re
import logging
from typing import List, Optional, Tuple

from .identity import Clock, IdentifierSource, exercise_id, new_identifier, utc_now
from .models import ParsedExercise

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 3

# Set count from a block header: "x 2", "E2MOM x 4 Rounds", 'E90" x 5'
HEADER_SETS_PATTERN = re.compile(
    r'^(?:x\s*(\d+)|E2MOM\s*x?\s*(\d+)|E90\s*"?\s*x?\s*(\d+))',
    re.IGNORECASE
)

# "Back Squat x 5", "Clean + Hang Clean X 3"
STANDALONE_SEPARATOR_PATTERN = re.compile(r'^(.+?)\s+[xX×]\s+(.+)$')
# PDF extraction glue: "Pigeon Push Upx 30 sec", "Bikex 10/8 Cal"
GLUED_SEPARATOR_PATTERN = re.compile(r'^(.+?)[xX×]\s+(\d.*)$')

# Names starting with a structural word are headers, not exercises
STRUCTURAL_PREFIX_PATTERN = re.compile(
    r'^(?:warm\s*-?\s*up|buy\s*-?\s*in|block|cool\s*-?\s*down|score|equipment|'
    r'rounds?|min\s+amrap|minute\s+amrap|alternate|repeat|rest)\b',
    re.IGNORECASE
)
STRUCTURAL_NAME_PATTERN = re.compile(
    r'^(?:main|E2MOM|E90"?|x|min|minute|tour\s*de\s*france)$',
    re.IGNORECASE
)
REST_REPS_PATTERN = re.compile(r'^(?:rest|sec\s+rest)$', re.IGNORECASE)

# "Goblet Squat (tempo 3010)"
TRAILING_NOTE_PATTERN = re.compile(r'^(.+?)\s*\(([^)]+)\)$')


def default_sets(text: str) -> int:
    """Set count announced at the start of a block, 1 when there is none."""
    match = HEADER_SETS_PATTERN.match(text.lstrip())
    if not match:
        return 1
    count = int(next(group for group in match.groups() if group))
    return max(count, 1)


def split_exercise_line(line: str) -> Optional[Tuple[str, str]]:
    """Split a line into (name, reps), or None if it has no 'x' separator."""
    match = STANDALONE_SEPARATOR_PATTERN.match(line) or GLUED_SEPARATOR_PATTERN.match(line)
    if not match:
        return None
    return match.group(1).strip(), match.group(2).strip()


def is_structural(name: str, reps: str) -> bool:
    """True for header, round and rest lines that look like exercises."""
    return bool(
        STRUCTURAL_PREFIX_PATTERN.match(name)
        or STRUCTURAL_NAME_PATTERN.match(name)
        or REST_REPS_PATTERN.match(reps)
    )


def split_notes(name: str) -> Tuple[str, Optional[str]]:
    """Move a trailing parenthesised remark out of the name."""
    match = TRAILING_NOTE_PATTERN.match(name)
    if not match:
        return name, None
    return match.group(1).strip(), match.group(2).strip()


def parse_exercise_lines(
    text: str,
    category: str,
    owner_id: str = "",
    new_id: IdentifierSource = new_identifier,
    clock: Clock = utc_now,
) -> List[ParsedExercise]:
    """
    Parse every exercise line of a category block.

    Args:
        text: The category's text
        category: Category name stored on each exercise
        owner_id: Id of the workout the exercises belong to
        new_id: Source of fresh unique ids
        clock: Source of creation timestamps

    Returns:
        Exercises in line order
    """
    sets = default_sets(text)
    exercises = []

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        parts = split_exercise_line(line)
        if parts is None:
            continue

        name, reps = parts
        name, notes = split_notes(name)
        if is_structural(name, reps):
            logger.debug(f"Skipping structural line: {line!r}")
            continue

        if len(name) < MIN_NAME_LENGTH:
            logger.debug(f"Skipping short name: {line!r}")
            continue

        exercises.append(ParsedExercise(
            id=exercise_id(owner_id, new_id),
            name=name,
            sets=sets,
            reps=reps,
            category=category,
            notes=notes,
            created_at=clock(),
        ))

    logger.debug(f"Extracted {len(exercises)} exercises from {category}")
    return exercises
