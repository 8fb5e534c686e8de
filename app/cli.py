from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.filesystem.relation_repository import FileSystemRelationRepository
from adapters.layout.force_directed import ForceDirectedLayoutEngine
from app.config import AppSettings, load_settings
from domain.errors import RelationParseError
from domain.services.convert_relations_to_text import RelationsToTextConverter
from domain.services.parse_relations import parse_relations

app = typer.Typer(no_args_is_help=True)
console = Console()
logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def build_converter(settings: AppSettings) -> RelationsToTextConverter:
    layout = ForceDirectedLayoutEngine(settings.layout.to_layout_config())
    return RelationsToTextConverter(layout, settings.render.to_render_config())


def _prepare(config: Optional[Path], verbose: bool) -> AppSettings:
    settings = load_settings(config)
    configure_logging("DEBUG" if verbose else settings.log_level)
    return settings


@app.command("render")
def render(
    text: Optional[str] = typer.Argument(None, help='Relations such as "A -> B", one per line.'),
    input_path: Optional[Path] = typer.Option(
        None, "--input", "-i", help="Read relations from a file instead of the argument.",
    ),
    attraction: Optional[float] = typer.Option(None, help="Override layout attraction strength."),
    repulsion: Optional[float] = typer.Option(None, help="Override layout repulsion strength."),
    config: Optional[Path] = typer.Option(None, help="YAML settings file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline details."),
) -> None:
    settings = _prepare(config, verbose)
    overrides = {
        key: value
        for key, value in (("attraction_strength", attraction), ("repulsion_strength", repulsion))
        if value is not None
    }
    if overrides:
        settings = settings.model_copy(
            update={"layout": settings.layout.model_copy(update=overrides)}
        )

    if input_path is not None:
        if not input_path.exists():
            console.print(f"[red]File not found:[/] {input_path}")
            raise typer.Exit(code=1)
        text = input_path.read_text(encoding="utf-8")
    if text is None:
        console.print('[yellow]Example usage:[/] render "A -> B"')
        raise typer.Exit(code=1)

    try:
        document = parse_relations(text)
    except RelationParseError as exc:
        console.print(f"[red]Error:[/] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc

    picture = build_converter(settings).convert(document)
    typer.echo(picture, nl=False)


@app.command("convert")
def convert(
    input_dir: Path = typer.Option(
        Path("data/relations"), help="Directory with relation files (*.txt, *.rel).",
    ),
    output_dir: Path = typer.Option(
        Path("data/pictures"), help="Directory to write rendered pictures.",
    ),
    config: Optional[Path] = typer.Option(None, help="YAML settings file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline details."),
) -> None:
    settings = _prepare(config, verbose)
    repository = FileSystemRelationRepository()
    converter = build_converter(settings)

    try:
        pairs = repository.load_all_with_paths(input_dir)
    except RelationParseError as exc:
        console.print(f"[red]Error:[/] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc
    if not pairs:
        console.print(f"[yellow]No relation files found in {input_dir}[/]")
        raise typer.Exit(code=0)

    output_dir.mkdir(parents=True, exist_ok=True)
    for path, document in pairs:
        target_path = output_dir / f"{path.stem}.txt"
        repository.save_picture(converter.convert(document), target_path)
        logger.debug("Rendered %s", path)
        console.print(f"[green]Wrote[/] {target_path}")


@app.command("validate")
def validate(input_path: Path = typer.Argument(..., help="Relation file to validate.")) -> None:
    if not input_path.exists():
        console.print(f"[red]File not found:[/] {input_path}")
        raise typer.Exit(code=1)

    try:
        document = FileSystemRelationRepository().load_by_path(input_path)
    except RelationParseError as exc:
        console.print(f"[red]Validation failed:[/] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc
    console.print(
        f"[green]Valid relation file:[/] {input_path} "
        f"({len(document.relations)} relations, {len(document.node_names())} nodes)"
    )


if __name__ == "__main__":
    app()
