#!/usr/bin/env python3
from __future__ import annotations

from collections.abc import Sequence
from contextlib import contextmanager

from rich import box
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from .prompts import print_prompt_header, prompt_optional, prompt_yes_no
from .state import THEME, UIContext, get_context, hint_text, stream_is_terminal

DEFAULT_CONTEXT = get_context()
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def configure_ui(
    *,
    no_color: bool,
    no_animations: bool = False,
    context: UIContext | None = None,
) -> None:
    _resolve_context(context).apply(no_color=no_color, no_animations=no_animations)


@contextmanager
def progress(*, quiet: bool, context: UIContext | None = None):
    context = _resolve_context(context)
    if quiet:
        yield None
        return
    force_render = stream_is_terminal("stdout")
    if context.animations_enabled:
        progress_bar = Progress(
            SpinnerColumn(style="accent"),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=context.console,
            transient=True,
            disable=not force_render,
        )
    else:
        progress_bar = Progress(
            TextColumn("[progress.description]{task.description}"),
            console=context.console,
            transient=True,
            refresh_per_second=2,
            disable=not force_render,
        )
    with progress_bar:
        yield progress_bar


def build_kv_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    table = Table(title=title, show_header=False, box=box.SIMPLE, show_lines=False)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value")
    for key, value in rows:
        table.add_row(str(key), str(value))
    return table


def build_placement_table(rows: Sequence[tuple[int, int, float, float, str]]) -> Table:
    table = Table(box=box.SIMPLE_HEAD, show_lines=False)
    table.add_column("#", justify="right", style="muted")
    table.add_column("Page", justify="right")
    table.add_column("X (mm)", justify="right")
    table.add_column("Y (mm)", justify="right")
    table.add_column("Caption")
    for number, page, x, y, caption in rows:
        table.add_row(str(number), str(page), f"{x:.1f}", f"{y:.1f}", caption)
    return table


def build_action_list(items: Sequence[str]) -> Table:
    table = Table.grid(padding=(0, 1))
    table.add_column(no_wrap=True)
    table.add_column()
    for item in items:
        table.add_row("-", Text(item))
    return table


def panel(title: str, renderable, *, style: str = "panel") -> Panel:
    return Panel(
        renderable,
        title=title,
        title_align="left",
        border_style=style,
        box=box.ROUNDED,
        padding=(1, 2),
    )


def print_completion_panel(
    title: str,
    items: Sequence[str],
    *,
    quiet: bool,
    use_err: bool = False,
) -> None:
    if quiet:
        return
    output = console_err if use_err else console
    output.print(panel(title, build_action_list(items), style="success"))


__all__ = [
    "THEME",
    "build_action_list",
    "build_kv_table",
    "build_placement_table",
    "configure_ui",
    "console",
    "console_err",
    "hint_text",
    "panel",
    "print_completion_panel",
    "print_prompt_header",
    "progress",
    "prompt_optional",
    "prompt_yes_no",
]
