"""Domain types produced by the aggregator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ExamEntry:
    name: str
    content: Any


@dataclass(frozen=True)
class Subject:
    name: str
    exams: tuple[ExamEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "exams": [{"name": exam.name, "content": exam.content} for exam in self.exams],
        }
