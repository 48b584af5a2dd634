"""
PDF Parser

Extracts the text layer of printed training plans with pdfplumber.
"""

import io
import logging

import pdfplumber

from .base import BasePlanParser, PlanTextUnavailableError
from .models import FileInfo

logger = logging.getLogger(__name__)


class PdfPlanParser(BasePlanParser):
    """Parser for PDF plan documents"""

    def can_parse(self, file_info: FileInfo) -> bool:
        """Check if this parser can handle the file"""
        return file_info.extension.lower() == '.pdf'

    def extract_text(self, content: bytes, file_info: FileInfo) -> str:
        """Join the text of every page, one page after another"""
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as e:
            logger.exception(f"Failed to read PDF {file_info.filename}: {e}")
            raise PlanTextUnavailableError(f"Failed to parse PDF: {e}") from e

        text = "\n".join(page for page in pages if page)
        logger.info(f"PDF {file_info.filename}: {len(pages)} pages, {len(text)} chars")
        return text
