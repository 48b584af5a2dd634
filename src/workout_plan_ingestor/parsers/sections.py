"""
Plan Sections

Splits plan text into the pieces the exercise tokenizer works on:
- Plan header metadata ("GYM DAILY - IN SEASON WEEK 11")
- Day spans ("MONDAY (Hinge/Push)")
- Category spans (Warmup, Buy-in, Block 1-4, Main, Cool Down)
- Equipment lists ("Equipment: Barbell, Bands")

Every function is pure: it takes text and returns records, holding no state
between calls.
"""

import re
import logging
from typing import List, Optional, Tuple

from .models import CATEGORY_ORDER, CategorySpan, DaySpan, PlanMetadata

logger = logging.getLogger(__name__)

# "GYM DAILY - IN SEASON WEEK 11"
METADATA_PATTERN = re.compile(
    r'([A-Za-z][A-Za-z ]*?)[ \t]*-[ \t]*([A-Za-z][A-Za-z ]*?)[ \t]+WEEK[ \t]+(\d+)',
    re.IGNORECASE
)

# "MONDAY (Hinge/Push)", "TUESDAY ( Sprint Conditioning)"
DAY_PATTERN = re.compile(
    r'(MONDAY|TUESDAY|WEDNESDAY|THURSDAY|FRIDAY|SATURDAY|SUNDAY)\s*\(([^)]+)\)',
    re.IGNORECASE
)

EQUIPMENT_PATTERN = re.compile(r'Equipment[:\s]+([^\n]+)', re.IGNORECASE)
EQUIPMENT_SEPARATOR = re.compile(r'[,;]')

# Category start markers. The capture begins after the trailing ':'/whitespace.
CATEGORY_MARKERS: Tuple[Tuple[str, re.Pattern], ...] = (
    ("Warmup", re.compile(r'Warm\s*-?\s*up[:\s]+', re.IGNORECASE)),
    ("Buy-in", re.compile(r'BUY\s*-?\s*IN[:\s]+', re.IGNORECASE)),
    ("Block 1", re.compile(r'BLOCK\s*1[:\s]+', re.IGNORECASE)),
    ("Block 2", re.compile(r'BLOCK\s*2[:\s]+', re.IGNORECASE)),
    ("Block 3", re.compile(r'BLOCK\s*3[:\s]+', re.IGNORECASE)),
    ("Block 4", re.compile(r'BLOCK\s*4[:\s]+', re.IGNORECASE)),
    ("Main", re.compile(r'(?:TOUR\s*DE\s*FRANCE|24\s*Min\s*AMRAP)[:\s]+', re.IGNORECASE)),
    ("Cooldown", re.compile(r'Cool\s*-?\s*Down[:\s]+', re.IGNORECASE)),
)
MARKERS_BY_CATEGORY = dict(CATEGORY_MARKERS)

# Boundaries that end any category, beyond the other categories' markers.
# ANY_BLOCK also catches "BLOCK 5" and up, whose content is dropped.
ANY_BLOCK = re.compile(r'BLOCK\s*\d', re.IGNORECASE)
SCORE_MARKER = re.compile(r'SCORE', re.IGNORECASE)
REPEAT_MARKER = re.compile(r'REPEAT', re.IGNORECASE)

NUMBERED_BLOCKS = frozenset({"Block 1", "Block 2", "Block 3", "Block 4"})


def extract_metadata(text: str) -> PlanMetadata:
    """Find the plan header line; absent fields when there is none."""
    match = METADATA_PATTERN.search(text)
    if not match:
        logger.debug("No plan header found")
        return PlanMetadata()

    return PlanMetadata(
        program=match.group(1).strip(),
        phase=match.group(2).strip(),
        week=f"Week {match.group(3)}",
    )


def segment_days(text: str) -> List[DaySpan]:
    """
    Split text at every weekday marker.

    Each span runs from its marker up to the next marker (or end of text).
    Text before the first marker belongs to no span. Without any marker the
    whole text becomes a single unlabelled span.
    """
    matches = list(DAY_PATTERN.finditer(text))
    logger.info(f"Found {len(matches)} workout days")

    if not matches:
        return [DaySpan(text=text)]

    spans = []
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        spans.append(DaySpan(
            day_label=match.group(1).upper(),
            workout_type=match.group(2).strip() or None,
            text=text[match.start():end],
        ))
    return spans


def _boundary_patterns(category: str) -> List[re.Pattern]:
    patterns = [marker for name, marker in CATEGORY_MARKERS if name != category]
    patterns.extend([ANY_BLOCK, SCORE_MARKER])
    if category in NUMBERED_BLOCKS:
        patterns.append(REPEAT_MARKER)
    return patterns


def _nearest_boundary(text: str, start: int, patterns: List[re.Pattern]) -> int:
    end = len(text)
    for pattern in patterns:
        match = pattern.search(text, start)
        if match and match.start() < end:
            end = match.start()
    return end


def find_category(text: str, category: str) -> Optional[CategorySpan]:
    """Capture one category's text, bounded by the nearest later structural keyword."""
    match = MARKERS_BY_CATEGORY[category].search(text)
    if not match:
        return None

    start = match.end()
    end = _nearest_boundary(text, start, _boundary_patterns(category))
    return CategorySpan(category=category, text=text[start:end])


def segment_categories(text: str) -> List[CategorySpan]:
    """Return the categories present in a day's text, in segmentation order."""
    spans = []
    for category in CATEGORY_ORDER:
        span = find_category(text, category)
        if span is None:
            continue
        logger.debug(f"Found {category} section with {len(span.text)} chars")
        spans.append(span)
    return spans


def extract_equipment(text: str) -> List[str]:
    """Split the 'Equipment:' line on commas/semicolons; empty when absent."""
    match = EQUIPMENT_PATTERN.search(text)
    if not match:
        return []

    items = (item.strip() for item in EQUIPMENT_SEPARATOR.split(match.group(1)))
    return [item for item in items if item]
