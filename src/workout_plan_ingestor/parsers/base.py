"""
Base Parser

Abstract base class for plan document parsers. Subclasses only decode the
document into text; the shared plan pipeline does the rest.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from .assembler import parse_plan_text
from .identity import Clock, IdentifierSource, new_identifier, utc_now
from .models import FileInfo, ParsedWorkout

logger = logging.getLogger(__name__)


class PlanTextUnavailableError(RuntimeError):
    """Raised when a document cannot be decoded into text."""


class BasePlanParser(ABC):
    """Abstract base class for plan document parsers"""

    def __init__(self, new_id: IdentifierSource = new_identifier, clock: Clock = utc_now):
        self.new_id = new_id
        self.clock = clock

    @abstractmethod
    def can_parse(self, file_info: FileInfo) -> bool:
        """
        Check if this parser can handle the given file.

        Args:
            file_info: Information about the file

        Returns:
            True if this parser can handle the file
        """
        pass

    @abstractmethod
    def extract_text(self, content: bytes, file_info: FileInfo) -> str:
        """
        Decode file content into plan text.

        Raises:
            PlanTextUnavailableError: If the content cannot be decoded
        """
        pass

    def parse(self, content: bytes, file_info: FileInfo) -> List[ParsedWorkout]:
        """
        Decode a document and parse its workouts.

        Args:
            content: Raw file bytes
            file_info: Information about the file

        Returns:
            Workouts in day order, possibly empty

        Raises:
            PlanTextUnavailableError: If the content cannot be decoded
        """
        text = self.extract_text(content, file_info)
        return parse_plan_text(text, file_info.filename, new_id=self.new_id, clock=self.clock)
