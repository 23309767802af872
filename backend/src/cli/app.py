"""Typer application entrypoint."""

from __future__ import annotations

import typer
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from api.utils.serializers import encode_subjects
from exams.aggregator import aggregate, iter_exam_files
from exams.config import get_settings
from exams.errors import ExamArchiveError, ExamSerializationError
from logging_config import configure_logging


configure_logging()


app = typer.Typer(help="Exam archive server and maintenance commands")


@app.command()
def serve() -> None:
    """Start the HTTP server on $PORT."""
    from api.server import main

    main()


@app.command()
def check() -> None:
    """Parse every exam file under $EXAMS_ROOT and summarise the subjects."""

    root = get_settings().exams_root
    try:
        matched = sum(1 for _ in iter_exam_files(root))
        subjects = aggregate(root)
    except ExamArchiveError as exc:
        rprint(f"[red]Failed to read exam files: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    table = Table(title=f"Exams in {escape(str(root))}")
    table.add_column("Subject")
    table.add_column("Exams", justify="right")
    table.add_column("Files")
    for subject in subjects:
        table.add_row(
            escape(subject.name),
            str(len(subject.exams)),
            escape(", ".join(exam.name for exam in subject.exams)),
        )
    rprint(table)

    loaded = sum(len(subject.exams) for subject in subjects)
    typer.echo(f"{loaded} exam(s) loaded from {matched} matching file(s); {matched - loaded} empty file(s) skipped")


@app.command()
def dump() -> None:
    """Print the payload GET /api/exams would return."""

    try:
        payload = encode_subjects(aggregate(get_settings().exams_root))
    except ExamArchiveError as exc:
        typer.echo(f"Failed to read exam files: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    except ExamSerializationError as exc:
        typer.echo(f"Failed to encode response: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(payload.decode("utf-8"), nl=False)


if __name__ == "__main__":
    app()
