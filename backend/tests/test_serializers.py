from __future__ import annotations

import pytest

from api.utils.serializers import encode_subjects, iter_chunks
from exams.errors import ExamSerializationError
from exams.models import ExamEntry, Subject


def test_encode_subjects_is_compact_utf8_with_newline() -> None:
    subjects = [Subject(name="música", exams=(ExamEntry(name="a.json", content={"q": "ñ"}),))]

    payload = encode_subjects(subjects)

    assert payload == '[{"name":"música","exams":[{"name":"a.json","content":{"q":"ñ"}}]}]\n'.encode("utf-8")


def test_encode_empty_result_is_empty_array() -> None:
    assert encode_subjects([]) == b"[]\n"


def test_encode_rejects_non_finite_numbers() -> None:
    subjects = [Subject(name="math", exams=(ExamEntry(name="a.jsonc", content=float("inf")),))]

    with pytest.raises(ExamSerializationError):
        encode_subjects(subjects)


def test_iter_chunks_reassembles_payload() -> None:
    payload = b"x" * 10 + b"y" * 5

    chunks = list(iter_chunks(payload, chunk_size=4))

    assert [len(chunk) for chunk in chunks] == [4, 4, 4, 3]
    assert b"".join(chunks) == payload
