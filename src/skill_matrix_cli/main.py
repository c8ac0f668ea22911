"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from skill_matrix_agents.observability import configure_logging
from skill_matrix_agents.service import ExtractionOutcome, SkillMatrixService
from skill_matrix_core import __version__
from skill_matrix_core.config.settings import Settings
from skill_matrix_core.exceptions import NoStrategySucceededError
from skill_matrix_core.models.skill_matrix import SKILL_CATEGORIES, SkillMatrix
from skill_matrix_core.validation import validate

app = typer.Typer(
    name="skill-matrix",
    help="Turn job descriptions into validated skill matrices",
)
console = Console()
err_console = Console(stderr=True)

_STRATEGIES = ("auto", "heuristic", "remote")


def _read_document(path: Path | None, text: str | None) -> str:
    """Resolve the document from --text, a file, or stdin, in that order."""
    if text is not None:
        return text
    if path is not None:
        return path.read_text(encoding="utf-8")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return ""


@app.command()
def extract(
    path: Path | None = typer.Argument(
        None, help="Job description file (reads stdin when omitted)", exists=True, dir_okay=False
    ),
    text: str | None = typer.Option(None, "--text", help="Job description text"),
    strategy: str | None = typer.Option(
        None, "--strategy", help="Strategy: auto, heuristic or remote"
    ),
    as_json: bool = typer.Option(True, "--json/--pretty", help="Print JSON or a table"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Extract a skill matrix from a job description."""
    if strategy is not None and strategy not in _STRATEGIES:
        err_console.print(
            f"[red]Error:[/red] --strategy must be one of {', '.join(_STRATEGIES)}",
        )
        raise typer.Exit(code=2)

    document = _read_document(path, text)
    if not document.strip():
        err_console.print("[red]Error:[/red] Job description is required.", style="bold")
        raise typer.Exit(code=1)

    settings = Settings()
    if strategy is not None:
        settings.strategy = strategy  # type: ignore[assignment]
    if verbose:
        settings.log_level = "DEBUG"

    configure_logging(settings)

    try:
        outcome = asyncio.run(SkillMatrixService(settings).extract(document))
    except NoStrategySucceededError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if outcome.warning:
        err_console.print(
            f"[yellow]Warning:[/yellow] remote extraction failed, used fallback: "
            f"{outcome.warning}"
        )

    if as_json:
        typer.echo(json.dumps(outcome.matrix.to_payload(), indent=2, ensure_ascii=False))
    else:
        _print_table(outcome)


@app.command(name="validate")
def validate_command(
    path: Path = typer.Argument(..., help="JSON file with a candidate skill matrix", exists=True),
) -> None:
    """Validate a candidate skill matrix JSON file against the schema."""
    try:
        candidate = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        console.print(f"[red]Invalid JSON:[/red] {exc.msg} (line {exc.lineno})")
        raise typer.Exit(code=1) from exc

    result = validate(candidate)
    if result.ok:
        console.print("[bold green]Valid[/bold green] skill matrix")
        return

    console.print(f"[bold red]Invalid:[/bold red] {len(result.violations)} violation(s)")
    for violation in result.violations:
        console.print(f"  {violation.path}: {violation.message}")
    raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"skill-matrix-extractor v{__version__}")


def _print_table(outcome: ExtractionOutcome) -> None:
    """Render a SkillMatrix as a rich table."""
    matrix: SkillMatrix = outcome.matrix
    table = Table(title=matrix.title, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("Seniority", matrix.seniority)
    for category in SKILL_CATEGORIES:
        values = getattr(matrix.skills, category)
        table.add_row(f"Skills: {category}", ", ".join(values) or "-")
    table.add_row("Must have", "\n".join(matrix.must_have) or "-")
    table.add_row("Nice to have", "\n".join(matrix.nice_to_have) or "-")
    if matrix.salary is not None:
        bounds = "-".join(
            str(v) for v in (matrix.salary.min, matrix.salary.max) if v is not None
        )
        table.add_row("Salary", f"{matrix.salary.currency} {bounds}".strip())
    table.add_row("Summary", matrix.summary)
    table.add_row("Strategy", outcome.strategy)

    console.print(table)


if __name__ == "__main__":
    app()
