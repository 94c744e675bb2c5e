"""CLI for kisan-ai: interpret / diagnose commands."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from kisan_ai.core.config import ObservabilityConfig, VisionConfig
from kisan_ai.core.logging_config import setup_logging
from kisan_ai.exceptions import KisanError
from kisan_ai.formatters.console_formatter import ConsoleFormatter
from kisan_ai.formatters.json_formatter import JSONFormatter
from kisan_ai.interpretation.pipeline import interpret as interpret_report
from kisan_ai.models import DiagnosisResult, ImageInput, InterpretedReport
from kisan_ai.providers.vision.client import VisionClient
from kisan_ai.services.diagnosis_service import DiagnosisService

app = typer.Typer(name="kisan-ai", help="Plant disease diagnosis from photos")
console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    setup_logging(ObservabilityConfig(log_level="DEBUG" if verbose else "WARNING"))


def _build_vision_config(model: Optional[str], api_key: Optional[str]) -> VisionConfig:
    """Build vision config, overriding env defaults with CLI flags."""
    overrides: dict = {}
    if model:
        overrides["model"] = model
    if api_key:
        overrides["api_key"] = api_key
    return VisionConfig(**overrides)


def _read_report(report_file: Path) -> str:
    if str(report_file) == "-":
        return sys.stdin.read()
    if not report_file.is_file():
        raise typer.BadParameter(f"No such file: {report_file}")
    return report_file.read_text(encoding="utf-8")


def _emit(report: InterpretedReport, as_json: bool, output: Optional[Path]) -> None:
    if output:
        formatter = JSONFormatter() if as_json else ConsoleFormatter()
        formatter.format_to_file(report, output)
        console.print(f"[green]Report saved to {output}[/green]")
    elif as_json:
        # Plain echo keeps long lines unwrapped so the output stays parseable
        typer.echo(JSONFormatter().format(report).decode())
    else:
        ConsoleFormatter().render(report, console)


@app.command()
def interpret(
    report_file: Path = typer.Argument(..., help="Text file with a diagnosis report, or '-' for stdin"),
    as_json: bool = typer.Option(False, "--json", help="Print the interpreted report as JSON"),
    output: Optional[Path] = typer.Option(None, help="Write the rendering to this path"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Structure an existing diagnosis text into report cards."""
    _configure_logging(verbose)
    report = interpret_report(_read_report(report_file))
    _emit(report, as_json, output)


@app.command()
def diagnose(
    image_file: Path = typer.Argument(..., help="Plant photo (JPEG, PNG, WebP, ...)"),
    as_json: bool = typer.Option(False, "--json", help="Print the interpreted report as JSON"),
    output: Optional[Path] = typer.Option(None, help="Write the rendering to this path"),
    model: Optional[str] = typer.Option(None, "--model", help="LiteLLM model id"),
    api_key: Optional[str] = typer.Option(None, "--api-key", help="Vision provider API key"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Send a plant photo to the vision model and show the diagnosis."""
    _configure_logging(verbose)
    if not image_file.is_file():
        raise typer.BadParameter(f"No such file: {image_file}")

    config = _build_vision_config(model, api_key)
    service = DiagnosisService(
        VisionClient(config),
        max_image_bytes=config.max_image_bytes,
    )
    image = ImageInput.from_path(image_file)

    async def _run() -> DiagnosisResult:
        return await service.diagnose(image)

    if not as_json:
        console.print(f"[bold]Analyzing {image.filename} with {config.model}...[/bold]")
    try:
        result = asyncio.run(_run())
    except KisanError as e:
        err_console.print(f"[red]Failed to analyze plant: {e}[/red]")
        raise typer.Exit(code=1) from e

    _emit(result.report, as_json, output)


if __name__ == "__main__":
    app()
