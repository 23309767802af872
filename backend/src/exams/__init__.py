"""Exam archive aggregation: walk a JSON/JSONC tree and group files by subject."""

from .aggregator import aggregate, iter_exam_files  # noqa: F401
from .config import ExamArchiveSettings, get_settings  # noqa: F401
from .errors import (  # noqa: F401
    ExamArchiveError,
    ExamParseError,
    ExamReadError,
    ExamSerializationError,
)
from .models import ExamEntry, Subject  # noqa: F401
from .parser import ContentFormat, parse_content  # noqa: F401
