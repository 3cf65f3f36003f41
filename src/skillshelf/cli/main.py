"""CLI interface for skillshelf using Typer."""

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from skillshelf.cli.skills import install_command, list_command, show_command
from skillshelf.core.skill_def import DocumentRole
from skillshelf.core.skill_store import SkillStore
from skillshelf.utils.config import Config
from skillshelf.utils.logging import setup_logging

app = typer.Typer(
    name="skillshelf",
    help="Skillshelf: install AI assistant instruction skills into projects",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    workspace: Annotated[
        Path,
        typer.Option(
            "--workspace",
            "-w",
            help="Path to workspace directory",
        ),
    ] = Path.home() / ".skillshelf",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Echo log records to stderr"),
    ] = False,
) -> None:
    """
    Skillshelf: install AI assistant instruction skills into projects.

    Configuration and user skills are read from ~/.skillshelf/ by default.
    Use --workspace to specify a custom workspace directory.
    """
    try:
        config = Config.load(workspace)
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Error loading config: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    setup_logging(config, verbose=verbose)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["store"] = SkillStore.from_config(config)


@app.command("list")
def list_skills(ctx: typer.Context) -> None:
    """List all available skills."""
    list_command(ctx)


@app.command()
def show(
    ctx: typer.Context,
    skill_id: Annotated[str, typer.Argument(help="ID of the skill")],
) -> None:
    """Show detailed information about a skill."""
    show_command(ctx, skill_id)


@app.command()
def install(
    ctx: typer.Context,
    skill_id: Annotated[str, typer.Argument(help="ID of the skill to install")],
    lite: Annotated[
        bool,
        typer.Option("--lite", help="Install the lite instructions"),
    ] = False,
    role: Annotated[
        DocumentRole | None,
        typer.Option("--role", "-r", help="Install a specific document role"),
    ] = None,
    dest: Annotated[
        Path | None,
        typer.Option(
            "--dest",
            "-d",
            help="Destination file (default: <project>/.github/copilot-instructions.md)",
        ),
    ] = None,
    project: Annotated[
        Path,
        typer.Option("--project", "-p", help="Target project root"),
    ] = Path("."),
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite without asking"),
    ] = False,
) -> None:
    """Copy a skill's instructions into a project."""
    install_command(
        ctx,
        skill_id,
        lite=lite,
        role=role,
        dest=dest,
        project=project,
        force=force,
    )


if __name__ == "__main__":
    app()
