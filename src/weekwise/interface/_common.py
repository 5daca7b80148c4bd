"""Shared helpers for CLI command modules."""

from pathlib import Path

import typer

from weekwise.application.config import AppConfig, resolve_config
from weekwise.application.factory import get_planner_service
from weekwise.application.planner_service import PlannerService
from weekwise.domain.errors import InvalidSlotError


def _resolve_with_overrides(ctx: typer.Context | None = None, **kwargs) -> AppConfig:
    """Resolve config, folding in global options stashed on the Typer context."""
    overrides = dict(kwargs)
    if ctx is not None and ctx.obj:
        data_dir: Path | None = ctx.obj.get("data_dir")
        if data_dir is not None:
            overrides.setdefault("data_dir", data_dir)
        overrides.setdefault("verbose", ctx.obj.get("verbose_bonus"))
    return resolve_config({k: v for k, v in overrides.items() if v is not None})


def _planner(ctx: typer.Context | None = None, **kwargs) -> PlannerService:
    return get_planner_service(_resolve_with_overrides(ctx, **kwargs))


def fail(error: InvalidSlotError) -> typer.Exit:
    """Print a user-facing error and return the exit to raise."""
    typer.secho(f"Error: {error}", fg="red", err=True)
    return typer.Exit(1)
