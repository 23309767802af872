"""Settings for the exam archive server."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field


DEFAULT_PORT = 8080
DEFAULT_EXAMS_ROOT = Path("json")
DEFAULT_GZIP_MINIMUM_SIZE = 1000


class ExamArchiveSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    exams_root: Path = DEFAULT_EXAMS_ROOT
    static_root: Path = Path(".")
    gzip_minimum_size: int = Field(default=DEFAULT_GZIP_MINIMUM_SIZE, ge=0)  # Only applies to non-streamed responses


@lru_cache
def get_settings() -> ExamArchiveSettings:
    return ExamArchiveSettings(
        host=os.getenv("HOST") or "0.0.0.0",
        port=int(os.getenv("PORT") or DEFAULT_PORT),
        exams_root=Path(os.getenv("EXAMS_ROOT") or DEFAULT_EXAMS_ROOT),
        static_root=Path(os.getenv("STATIC_ROOT") or "."),
        gzip_minimum_size=int(os.getenv("GZIP_MINIMUM_SIZE") or DEFAULT_GZIP_MINIMUM_SIZE),
    )
