"""Typer-based command line interface for crosspath."""
from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
import yaml
from pydantic import ValidationError

from .coercion import ensure_posix
from .schema import ParsedPath
from .utils.config import CONFIG_ENV_VAR, AppConfig, load_config
from .utils.logging import configure_logging
from .views import PlatformView, get_view

app = typer.Typer(add_completion=False, help="Normalize paths to POSIX form.")


class ViewName(str, Enum):
    posix = "posix"
    win32 = "win32"
    native = "native"


VIEW_OPTION = typer.Option(None, "--view", case_sensitive=False, help="Rule set to apply (defaults to the configured view).")


def _select_view(ctx: typer.Context, view: Optional[ViewName]) -> PlatformView:
    config: AppConfig = ctx.obj if isinstance(ctx.obj, AppConfig) else AppConfig()
    return get_view(view.value if view is not None else config.default_view)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
    config: Optional[Path] = typer.Option(
        None, "--config", envvar=CONFIG_ENV_VAR, help="YAML configuration file."
    ),
) -> None:
    try:
        settings = load_config(config) if config is not None else AppConfig()
    except (ValueError, yaml.YAMLError) as exc:
        # ValidationError is a ValueError
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@app.command()
def coerce(path: str = typer.Argument(..., help="Path to rewrite.")) -> None:
    """Rewrite backslashes to forward slashes without normalizing."""

    typer.echo(ensure_posix(path))


@app.command()
def normalize(ctx: typer.Context, path: str = typer.Argument(...), view: Optional[ViewName] = VIEW_OPTION) -> None:
    typer.echo(_select_view(ctx, view).normalize(path))


@app.command()
def join(
    ctx: typer.Context,
    paths: List[str] = typer.Argument(..., help="Segments to join."),
    view: Optional[ViewName] = VIEW_OPTION,
) -> None:
    typer.echo(_select_view(ctx, view).join(*paths))


@app.command()
def resolve(
    ctx: typer.Context,
    paths: Optional[List[str]] = typer.Argument(None, help="Segments to resolve; none means the working directory."),
    view: Optional[ViewName] = VIEW_OPTION,
) -> None:
    typer.echo(_select_view(ctx, view).resolve(*(paths or [])))


@app.command()
def relative(
    ctx: typer.Context,
    from_: str = typer.Argument(..., metavar="FROM"),
    to: str = typer.Argument(..., metavar="TO"),
    view: Optional[ViewName] = VIEW_OPTION,
) -> None:
    typer.echo(_select_view(ctx, view).relative(from_, to))


@app.command()
def dirname(ctx: typer.Context, path: str = typer.Argument(...), view: Optional[ViewName] = VIEW_OPTION) -> None:
    typer.echo(_select_view(ctx, view).dirname(path))


@app.command()
def basename(
    ctx: typer.Context,
    path: str = typer.Argument(...),
    suffix: Optional[str] = typer.Option(None, "--suffix", help="Suffix to strip, e.g. .js"),
    view: Optional[ViewName] = VIEW_OPTION,
) -> None:
    typer.echo(_select_view(ctx, view).basename(path, suffix))


@app.command()
def extname(ctx: typer.Context, path: str = typer.Argument(...), view: Optional[ViewName] = VIEW_OPTION) -> None:
    typer.echo(_select_view(ctx, view).extname(path))


@app.command()
def parse(ctx: typer.Context, path: str = typer.Argument(...), view: Optional[ViewName] = VIEW_OPTION) -> None:
    """Print the parsed fields of PATH as JSON."""

    parsed = _select_view(ctx, view).parse(path)
    typer.echo(json.dumps(parsed.as_dict(), indent=2))


@app.command("format")
def format_(
    ctx: typer.Context,
    record: Optional[str] = typer.Option(None, "--json", help="Parsed record as a JSON object."),
    root: str = typer.Option("", "--root"),
    dir_: str = typer.Option("", "--dir"),
    base: str = typer.Option("", "--base"),
    name: str = typer.Option("", "--name"),
    ext: str = typer.Option("", "--ext"),
    view: Optional[ViewName] = VIEW_OPTION,
) -> None:
    """Build a path from parsed fields."""

    try:
        if record is not None:
            parsed = ParsedPath.model_validate_json(record)
        else:
            parsed = ParsedPath(root=root, dir=dir_, base=base, name=name, ext=ext)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--json") from exc
    typer.echo(_select_view(ctx, view).format(parsed))


@app.command("is-absolute")
def is_absolute(ctx: typer.Context, path: str = typer.Argument(...), view: Optional[ViewName] = VIEW_OPTION) -> None:
    """Print true/false; the exit status is 1 for relative paths."""

    result = _select_view(ctx, view).is_absolute(path)
    typer.echo("true" if result else "false")
    raise typer.Exit(code=0 if result else 1)


@app.command("to-namespaced-path")
def to_namespaced_path(ctx: typer.Context, path: str = typer.Argument(...), view: Optional[ViewName] = VIEW_OPTION) -> None:
    typer.echo(_select_view(ctx, view).to_namespaced_path(path))


if __name__ == "__main__":
    app()
