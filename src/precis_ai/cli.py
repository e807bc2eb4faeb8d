from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

try:
    from dotenv import load_dotenv
except ImportError:  # pragma: no cover - optional dependency
    load_dotenv = None

from precis_ai.data_models import SummaryLength
from precis_ai.errors import PrecisError
from precis_ai.extraction import describe_file, preview_text
from precis_ai.pipeline import SummarizationPipeline
from precis_ai.state import RunStatus
from precis_ai.utils import load_submitted_file, result_to_markdown, share_text, share_title

app = typer.Typer(help="Summarise PDFs, images and text files with Gemini.")
console = Console()

if load_dotenv:
    for env_path in (Path.cwd() / ".env", Path.cwd() / ".env.local"):
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, override=False)


def _load_pipeline(config: Optional[Path], api_key: Optional[str]) -> SummarizationPipeline:
    """Instantiate the pipeline with optional config path and API key."""
    return SummarizationPipeline.from_config(config, api_key=api_key)


@app.command()
def summarise(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    length: str = typer.Option("medium", help="Summary length: short, medium or long."),
    media_type: Optional[str] = typer.Option(None, help="Override the guessed media type."),
    config: Optional[Path] = typer.Option(None, help="Path to configuration YAML."),
    api_key: Optional[str] = typer.Option(None, help="Gemini API key."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    show_text: bool = typer.Option(False, help="Also print the extracted text."),
    share: bool = typer.Option(False, help="Print a share title and message instead of markdown."),
):
    """
    Extract the text of a file and print its summary and key points.

    Exits with status 1 and the failure message when extraction, configuration,
    or the Gemini call fails.
    """
    pipeline = _load_pipeline(config, api_key)
    submitted = load_submitted_file(path, media_type)
    if not as_json:
        console.print(f"[dim]{describe_file(submitted)}[/dim]")

    run = pipeline.run(submitted, SummaryLength.coerce(length))
    if run.status is RunStatus.FAILED:
        console.print(f"[bold red]Error:[/bold red] {run.error}")
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(json.dumps(run.result.model_dump()))
        return

    if share:
        console.print(share_title(run.file_name), style="bold", markup=False, highlight=False)
        console.print(share_text(run.result), markup=False, highlight=False)
        return

    console.print(result_to_markdown(run.result), markup=False, highlight=False)
    if show_text:
        console.print("\n[bold]Extracted text[/bold]")
        console.print(
            preview_text(run.extracted_text, pipeline.settings.extraction.preview_chars),
            markup=False,
            highlight=False,
        )


@app.command()
def extract(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    media_type: Optional[str] = typer.Option(None, help="Override the guessed media type."),
    config: Optional[Path] = typer.Option(None, help="Path to configuration YAML."),
):
    """Print the text that would be sent for summarisation, without calling Gemini."""
    pipeline = _load_pipeline(config, api_key=None)
    submitted = load_submitted_file(path, media_type)
    try:
        text = pipeline.dispatcher.extract(submitted)
    except PrecisError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from exc
    console.print(text, markup=False, highlight=False)


if __name__ == "__main__":
    app()
