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

from pathlib import Path

import typer

from ...core.models import DEFAULT_MANUAL_FIELDS, FieldSchema
from ...core.session import SessionState
from ..core.common import _ctx_value, _layout_overrides, _load_config, _run_cli
from ..core.log import _warn
from ..core.options import (
    CAPTION_FIELD_OPTION,
    CAPTION_OPTION,
    CODE_SIZE_OPTION,
    GAP_OPTION,
    MARGIN_OPTION,
    OUTPUT_OPTION,
)
from ..flows.batch import run_batch
from ..ui import console, console_err, prompt_optional, prompt_yes_no

_MANUAL_HELP = (
    "Type records in by hand, then build the PDF.\n\n"
    "Starts with the fields ID and Name; add more with --field or at the prompt.\n\n"
    "Examples:\n"
    "  qrbatch manual\n"
    "  qrbatch manual --field SKU --field Location -o shelf.pdf\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_MANUAL_HELP)(manual)


def manual(
    ctx: typer.Context,
    field: list[str] | None = typer.Option(
        None,
        "--field",
        "-f",
        help="Extra field name (repeatable).",
        rich_help_panel="Inputs",
    ),
    output: Path | None = OUTPUT_OPTION,
    code_size: float | None = CODE_SIZE_OPTION,
    gap: float | None = GAP_OPTION,
    margin: float | None = MARGIN_OPTION,
    caption: bool | None = CAPTION_OPTION,
    caption_field: str | None = CAPTION_FIELD_OPTION,
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> int:
        app_config = _load_config(ctx)
        quiet_value = bool(_ctx_value(ctx, "quiet")) or app_config.ui.quiet
        layout = _layout_overrides(
            app_config.layout,
            code_size=code_size,
            gap=gap,
            margin=margin,
            caption=caption,
            caption_field=caption_field,
        )
        state = SessionState(manual_fields=FieldSchema(DEFAULT_MANUAL_FIELDS), config=layout)
        for name in field or ():
            state = state.add_field(name)
        try:
            state = collect_manual_records(state, quiet=quiet_value)
        except KeyboardInterrupt:
            console_err.print("[yellow]Aborted.[/yellow]")
            return 1
        result = run_batch(
            state,
            app_config,
            output_path=output or Path(app_config.output_filename),
            quiet=quiet_value,
        )
        if result is not None and quiet_value:
            console.print(str(result.output_path))
        return 0

    _run_cli(_run, debug=debug_value)


def collect_manual_records(state: SessionState, *, quiet: bool) -> SessionState:
    if not quiet:
        console.print(f"[subtitle]Fields:[/subtitle] {', '.join(state.manual_fields)}")
    while prompt_yes_no("Add another field?", default=False):
        name = prompt_optional(
            "New field name (e.g. SKU):",
            help_text="Blank names and names already in the list are ignored.",
        )
        state = state.add_field(name or "")

    while True:
        values = {name: prompt_optional(f"{name}:") for name in state.manual_fields}
        updated = state.add_record(values)
        if updated is state:
            _warn("empty entry skipped; fill in at least one field", quiet=quiet)
        state = updated
        if not prompt_yes_no(
            f"Add another record? ({len(state.records)} so far)",
            default=True,
        ):
            return state
