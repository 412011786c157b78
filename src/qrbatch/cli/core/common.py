#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import importlib.metadata
from collections.abc import Callable
from dataclasses import replace
from typing import Any

import typer
from rich.traceback import install as install_rich_traceback

from ...config import AppConfig, load_app_config
from ...render.layout import LayoutConfig
from ..ui import configure_ui, console_err


def _run_cli(func: Callable[[], Any], *, debug: bool) -> None:
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        result = func()
    except (OSError, RuntimeError, ValueError, TypeError, LookupError) as exc:
        if debug:
            raise
        console_err.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2)
    if isinstance(result, int) and result != 0:
        raise typer.Exit(code=result)


def _ctx_value(ctx: typer.Context, key: str) -> Any:
    if ctx.obj is None:
        return None
    return ctx.obj.get(key)


def _load_config(ctx: typer.Context) -> AppConfig:
    app_config = load_app_config(_ctx_value(ctx, "config"))
    if app_config.ui.no_color and not _ctx_value(ctx, "no_color"):
        configure_ui(
            no_color=True,
            no_animations=bool(_ctx_value(ctx, "no_animations")),
        )
    return app_config


def _layout_overrides(
    base: LayoutConfig,
    *,
    code_size: float | None,
    gap: float | None,
    margin: float | None,
    caption: bool | None,
    caption_field: str | None,
) -> LayoutConfig:
    changes: dict[str, object] = {}
    if code_size is not None:
        changes["code_size_mm"] = code_size
    if gap is not None:
        changes["gap_mm"] = gap
    if margin is not None:
        changes["margin_mm"] = margin
    if caption is not None:
        changes["show_caption"] = caption
    if caption_field is not None:
        changes["caption_field"] = caption_field.strip() or None
    if not changes:
        return base
    return replace(base, **changes)


def _get_version() -> str:
    try:
        return importlib.metadata.version("qrbatch")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
