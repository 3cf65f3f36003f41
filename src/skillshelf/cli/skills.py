"""Skill commands for the skillshelf CLI."""

from pathlib import Path

import questionary
import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from skillshelf.core.exceptions import MissingRoleError, SkillStoreError
from skillshelf.core.skill_def import DocumentRole
from skillshelf.core.skill_store import SkillStore
from skillshelf.utils.config import Config

console = Console()


def _context(ctx: typer.Context) -> tuple[Config, SkillStore]:
    return ctx.obj["config"], ctx.obj["store"]


def list_command(ctx: typer.Context) -> None:
    """Print every known skill with its description."""
    _, store = _context(ctx)
    skills = store.list()

    console.print(f"[bold cyan]Available Skills: {len(skills)}[/bold cyan]")
    for skill_id, description in skills:
        console.print(f"\n[bold cyan]{escape(skill_id)}[/bold cyan]")
        if description:
            console.print(f"  {description}", markup=False)


def show_command(ctx: typer.Context, skill_id: str) -> None:
    """Print a skill's description and the documents it carries."""
    _, store = _context(ctx)

    try:
        skill = store.get(skill_id)
    except SkillStoreError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        console.print("\nAvailable skills:")
        for known_id, _ in store.list():
            console.print(f"  - {escape(known_id)}")
        raise typer.Exit(1)

    description = escape(skill.description) or "(none)"
    lines = [f"Description: {description}", "", "Documents:"]
    lines.extend(f"  - {role.value}" for role in skill.roles)
    console.print(
        Panel("\n".join(lines), title=escape(skill.id), border_style="cyan")
    )


def install_command(
    ctx: typer.Context,
    skill_id: str,
    lite: bool = False,
    role: DocumentRole | None = None,
    dest: Path | None = None,
    project: Path = Path("."),
    force: bool = False,
) -> None:
    """Install one of a skill's documents into a project."""
    config, store = _context(ctx)

    if lite and role is not None:
        console.print("[red]--lite and --role can't be used together[/red]")
        raise typer.Exit(1)

    if role is None:
        role = DocumentRole.INSTRUCTIONS_LITE if lite else config.default_role
    destination = dest if dest is not None else config.install_destination(project)

    try:
        if store.get(skill_id).document(role) is None:
            raise MissingRoleError(skill_id, role.value)
    except SkillStoreError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if destination.exists() and not force:
        overwrite = questionary.confirm(
            f"{destination} already exists. Overwrite?",
            default=False,
        ).ask()
        if not overwrite:
            console.print("[yellow]Install cancelled.[/yellow]")
            raise typer.Exit(1)

    try:
        path = store.install(skill_id, role, destination)
    except OSError as e:
        console.print(
            f"[red]Could not write {escape(str(destination))}: {escape(str(e))}[/red]"
        )
        raise typer.Exit(1)

    console.print(
        f"[green]Installed {escape(skill_id)} ({role.value}) to {escape(str(path))}[/green]"
    )
