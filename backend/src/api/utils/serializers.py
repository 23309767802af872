"""Serialization utilities for API responses."""
from __future__ import annotations

import json
from typing import Iterable, Iterator

from exams.errors import ExamSerializationError
from exams.models import Subject


STREAM_CHUNK_SIZE = 64 * 1024


def encode_subjects(subjects: Iterable[Subject]) -> bytes:
    """Encode subjects as the ``/api/exams`` JSON payload.

    Args:
        subjects: Aggregated subjects in response order

    Returns:
        UTF-8 JSON array terminated by a newline

    Raises:
        ExamSerializationError: If any exam content is not representable as
            strict JSON (for example ``NaN`` read from a relaxed file)
    """
    try:
        text = json.dumps(
            [subject.to_dict() for subject in subjects],
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError) as exc:
        raise ExamSerializationError(f"json: {exc}") from exc
    return (text + "\n").encode("utf-8")


def iter_chunks(payload: bytes, chunk_size: int = STREAM_CHUNK_SIZE) -> Iterator[bytes]:
    """Split an encoded payload into chunks for a streaming response."""
    for offset in range(0, len(payload), chunk_size):
        yield payload[offset:offset + chunk_size]
