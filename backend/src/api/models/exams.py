"""Response schemas for the exams endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ExamEntryResponse(BaseModel):
    name: str
    content: Any


class SubjectResponse(BaseModel):
    name: str
    exams: list[ExamEntryResponse]
