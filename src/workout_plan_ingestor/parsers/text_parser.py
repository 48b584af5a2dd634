"""
Text Parser

Parses plain text exports of training plans.
"""

import logging

from .base import BasePlanParser
from .models import FileInfo

logger = logging.getLogger(__name__)

ENCODINGS = ['utf-8', 'utf-8-sig', 'cp1252']


class TextPlanParser(BasePlanParser):
    """Parser for plain text files"""

    def can_parse(self, file_info: FileInfo) -> bool:
        """Check if this parser can handle the file"""
        return file_info.extension.lower() in ['.txt', '.text', '']

    def extract_text(self, content: bytes, file_info: FileInfo) -> str:
        """Decode bytes to string"""
        for encoding in ENCODINGS:
            try:
                text = content.decode(encoding)
            except UnicodeDecodeError:
                continue
            logger.debug(f"Decoded {file_info.filename} as {encoding}")
            return text

        # latin-1 maps every byte
        return content.decode('latin-1')
