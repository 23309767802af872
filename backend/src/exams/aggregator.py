"""Filesystem walk that groups exam files by subject."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Iterator

from .errors import ExamReadError
from .models import ExamEntry, Subject
from .parser import ContentFormat, parse_content


logger = logging.getLogger(__name__)


def _extension(name: str) -> str:
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _walk(path: Path) -> Iterator[Path]:
    """Yield every non-directory entry below ``path`` in lexical order, depth first.

    Symlinked directories are reported as entries rather than descended into.
    """
    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        raise ExamReadError(path, exc) from exc

    for entry in entries:
        child = path / entry.name
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            raise ExamReadError(child, exc) from exc
        if is_dir:
            yield from _walk(child)
        else:
            yield child


def _subject_name(path: Path) -> str:
    parent = path.parent
    if parent.name in ("", ".", ".."):
        return parent.resolve().name
    return parent.name


def iter_exam_files(root: str | Path) -> Iterator[tuple[Path, ContentFormat]]:
    """Yield ``(path, format)`` for every ``.json``/``.jsonc`` file under ``root``."""
    root = Path(root)
    try:
        is_dir = stat.S_ISDIR(root.stat().st_mode)
    except OSError as exc:
        raise ExamReadError(root, exc) from exc

    candidates = _walk(root) if is_dir else iter([root])
    for path in candidates:
        fmt = ContentFormat.from_extension(_extension(path.name))
        if fmt is None:
            logger.debug("Ignoring %s: unrecognised extension", path)
            continue
        yield path, fmt


def aggregate(root: str | Path) -> list[Subject]:
    """Read and parse every exam file under ``root``, grouped by parent directory.

    Subjects are returned in the order their first file was encountered and
    exams keep traversal order within each subject. Empty files are logged and
    skipped. Any unreadable entry or unparseable file aborts the whole pass
    with an :class:`~exams.errors.ExamArchiveError`.
    """
    grouped: dict[str, list[ExamEntry]] = {}

    for path, fmt in iter_exam_files(root):
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise ExamReadError(path, exc) from exc

        if not data:
            logger.warning("Skipping empty file %s", path)
            continue

        content = parse_content(data, fmt, path)
        grouped.setdefault(_subject_name(path), []).append(ExamEntry(name=path.name, content=content))

    return [Subject(name=name, exams=tuple(exams)) for name, exams in grouped.items()]
