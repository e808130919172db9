"""gitfit command line."""

from __future__ import annotations

from pathlib import Path

import typer

from gitfit.config import Settings, get_settings
from gitfit.console import Renderer
from gitfit.errors import GitfitError
from gitfit.logging_utils import configure_logging
from gitfit.provision import Provisioner, resolve_profile_path

app = typer.Typer(
    name="gitfit",
    help="Provision global Git aliases and a branch-aware shell prompt.",
    add_completion=False,
    no_args_is_help=True,
)


def _load_settings(**overrides: object) -> Settings:
    settings = get_settings(**overrides)
    configure_logging(settings.log_level)
    return settings


def _fail(renderer: Renderer, exc: Exception) -> typer.Exit:
    renderer.error(str(exc))
    return typer.Exit(1)


@app.command()
def install(
    source: str | None = typer.Option(None, "--source", "-s", help="URL or path of the alias file"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would change without writing"),
    prompt: bool | None = typer.Option(None, "--prompt/--no-prompt", help="Patch the shell startup file"),
    profile: Path | None = typer.Option(None, "--profile", help="Shell startup file to patch"),  # noqa: B008
) -> None:
    """Install aliases into the global Git configuration."""

    renderer = Renderer()
    try:
        settings = _load_settings(source=source, profile_path=profile)
        Provisioner(settings, renderer=renderer).run(dry_run=dry_run, customize_prompt=prompt)
    except GitfitError as exc:
        raise _fail(renderer, exc) from exc


@app.command()
def show(
    source: str | None = typer.Option(None, "--source", "-s", help="URL or path of the alias file"),
) -> None:
    """Parse the alias file and print the result without applying it."""

    renderer = Renderer()
    try:
        settings = _load_settings(source=source)
        records, _ = Provisioner(settings, renderer=renderer).load()
    except GitfitError as exc:
        raise _fail(renderer, exc) from exc
    renderer.alias_table(records)


@app.command()
def prompt(
    profile: Path | None = typer.Option(None, "--profile", help="Shell startup file to patch"),  # noqa: B008
) -> None:
    """Only patch the shell startup file with the branch-aware prompt."""

    renderer = Renderer()
    try:
        settings = _load_settings(profile_path=profile)
        Provisioner(settings, renderer=renderer).patch_prompt(resolve_profile_path(settings))
    except GitfitError as exc:
        raise _fail(renderer, exc) from exc


if __name__ == "__main__":
    app()
