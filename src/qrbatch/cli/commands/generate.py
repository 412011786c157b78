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

from ...core.session import SessionState
from ..core.common import _ctx_value, _layout_overrides, _load_config, _run_cli
from ..core.options import (
    CAPTION_FIELD_OPTION,
    CAPTION_OPTION,
    CODE_SIZE_OPTION,
    GAP_OPTION,
    MARGIN_OPTION,
    OUTPUT_OPTION,
)
from ..flows.batch import run_batch
from ..ui import console

_GENERATE_HELP = (
    "Build a printable A4 PDF with one QR code per table row.\n\n"
    "The first row of the table is the header. With a single column each code holds\n"
    "the plain cell value; with more columns it holds the row as a JSON object.\n\n"
    "Examples:\n"
    "  qrbatch generate inventory.xlsx\n"
    "  qrbatch generate skus.csv --no-caption -o labels.pdf\n"
    "  qrbatch generate items.csv --code-size 25 --gap 3 --caption-field Name\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_GENERATE_HELP)(generate)


def generate(
    ctx: typer.Context,
    input: Path = typer.Argument(..., help="CSV or XLSX file with a header row."),
    output: Path | None = OUTPUT_OPTION,
    code_size: float | None = CODE_SIZE_OPTION,
    gap: float | None = GAP_OPTION,
    margin: float | None = MARGIN_OPTION,
    caption: bool | None = CAPTION_OPTION,
    caption_field: str | None = CAPTION_FIELD_OPTION,
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))

    def _run() -> None:
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
        state = SessionState(config=layout).load_table(input)
        result = run_batch(
            state,
            app_config,
            output_path=output or Path(app_config.output_filename),
            quiet=quiet_value,
        )
        if result is not None and quiet_value:
            console.print(str(result.output_path))

    _run_cli(_run, debug=debug_value)
