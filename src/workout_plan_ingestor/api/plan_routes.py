"""
Plan upload endpoint

Provides POST /plans/upload: decode an uploaded training plan (PDF or text)
and return the structured workouts it contains.

The parser returns an empty list when nothing looks like a workout; turning
that into a user-facing error is decided here.
"""

import asyncio
import logging
from typing import List, Optional

from fastapi import APIRouter, File as FastAPIFile, HTTPException, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from workout_plan_ingestor.config import settings
from workout_plan_ingestor.parsers import (
    ParsedWorkout,
    PlanParserFactory,
    PlanTextUnavailableError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/plans", tags=["Plans"])

NO_WORKOUTS_MESSAGE = (
    "Failed to parse workout data from plan. Make sure the document contains "
    "workout information with exercises, sets, and reps."
)


class PlanUploadResponse(BaseModel):
    """Response model for POST /plans/upload"""
    message: str
    workouts: List[ParsedWorkout]


@router.post("/upload")
async def upload_plan(file: Optional[UploadFile] = FastAPIFile(default=None)) -> JSONResponse:
    """
    Parse an uploaded training plan into workouts.

    Accepts multipart/form-data with a `file` field:
    - PDF (.pdf)
    - Text (.txt)

    Returns the workouts with camelCase keys, one per plan day.
    """
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="No file uploaded")

    if len(content) > settings.MAX_UPLOAD_BYTES:
        logger.warning(f"Rejected upload {file.filename}: {len(content)} bytes")
        raise HTTPException(status_code=413, detail="File too large")

    file_info = PlanParserFactory.file_info(
        file.filename or "upload.pdf",
        size_bytes=len(content),
        content_type=file.content_type,
    )
    parser = PlanParserFactory.get_parser(file_info)
    if parser is None:
        logger.warning(f"Rejected upload {file_info.filename}: unsupported type")
        raise HTTPException(status_code=415, detail="Only PDF or text files are allowed")

    logger.info(f"Processing plan {file_info.filename} ({file_info.size_bytes} bytes)")

    try:
        workouts = await asyncio.to_thread(parser.parse, content, file_info)
    except PlanTextUnavailableError as e:
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to process plan", "details": str(e)},
        )

    if not workouts:
        logger.warning(f"No workouts parsed from {file_info.filename}")
        raise HTTPException(status_code=400, detail=NO_WORKOUTS_MESSAGE)

    response = PlanUploadResponse(
        message=f"Successfully parsed {len(workouts)} workouts from plan",
        workouts=workouts,
    )
    return JSONResponse(response.model_dump(mode="json", by_alias=True))
