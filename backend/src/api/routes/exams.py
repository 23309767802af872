"""Exam archive routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, StreamingResponse

from api.models.exams import SubjectResponse
from api.utils.serializers import encode_subjects, iter_chunks
from exams.aggregator import aggregate
from exams.config import ExamArchiveSettings, get_settings
from exams.errors import ExamArchiveError, ExamSerializationError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["exams"])


def _settings_for(request: Request) -> ExamArchiveSettings:
    return getattr(request.app.state, "settings", None) or get_settings()


@router.get(
    "/exams",
    responses={
        200: {"model": list[SubjectResponse], "description": "Exams grouped by subject"},
        500: {"content": {"text/plain": {}}, "description": "Exam files could not be read or encoded"},
    },
)
def get_exams(request: Request):
    """Return every exam file under the archive root, grouped by subject."""
    settings = _settings_for(request)

    try:
        subjects = aggregate(settings.exams_root)
    except ExamArchiveError as exc:
        logger.error("Failed to read exam files: %s", exc)
        return PlainTextResponse(f"Failed to read exam files: {exc}", status_code=500)

    try:
        payload = encode_subjects(subjects)
    except ExamSerializationError as exc:
        logger.error("Failed to encode response: %s", exc)
        return PlainTextResponse(f"Failed to encode response: {exc}", status_code=500)

    # Streamed so the gzip middleware drops Content-Length for compressed bodies
    return StreamingResponse(iter_chunks(payload), media_type="application/json")
