"""Plan document parsers."""
import os
from typing import List, Optional

from .assembler import parse_plan_text
from .base import BasePlanParser, PlanTextUnavailableError
from .identity import Clock, IdentifierSource, new_identifier, utc_now
from .models import (
    CATEGORY_ORDER,
    CategorySpan,
    DaySpan,
    FileInfo,
    ParsedExercise,
    ParsedWorkout,
    PlanMetadata,
)
from .pdf_parser import PdfPlanParser
from .text_parser import TextPlanParser


class PlanParserFactory:
    """Pick a parser for an uploaded document."""

    @staticmethod
    def parsers(new_id: IdentifierSource = new_identifier, clock: Clock = utc_now) -> List[BasePlanParser]:
        return [PdfPlanParser(new_id, clock), TextPlanParser(new_id, clock)]

    @staticmethod
    def file_info(filename: str, size_bytes: int = 0, content_type: Optional[str] = None) -> FileInfo:
        return FileInfo(
            filename=filename,
            extension=os.path.splitext(filename)[1].lower(),
            size_bytes=size_bytes,
            content_type=content_type,
        )

    @classmethod
    def get_parser(
        cls,
        file_info: FileInfo,
        new_id: IdentifierSource = new_identifier,
        clock: Clock = utc_now,
    ) -> Optional[BasePlanParser]:
        """First parser accepting the file, or None when unsupported."""
        for parser in cls.parsers(new_id, clock):
            if parser.can_parse(file_info):
                return parser
        return None


__all__ = [
    "BasePlanParser",
    "CATEGORY_ORDER",
    "CategorySpan",
    "DaySpan",
    "FileInfo",
    "ParsedExercise",
    "ParsedWorkout",
    "PdfPlanParser",
    "PlanMetadata",
    "PlanParserFactory",
    "PlanTextUnavailableError",
    "TextPlanParser",
    "parse_plan_text",
]
