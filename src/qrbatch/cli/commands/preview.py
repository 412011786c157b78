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
from ...render.assembler import plan_batch
from ...render.layout import A4_PORTRAIT, compute_geometry, page_count
from ...render.pdf_writer import FpdfDocumentWriter
from ..core.common import _ctx_value, _layout_overrides, _load_config, _run_cli
from ..core.log import _notice
from ..core.options import (
    CAPTION_FIELD_OPTION,
    CAPTION_OPTION,
    CODE_SIZE_OPTION,
    GAP_OPTION,
    MARGIN_OPTION,
)
from ..flows.batch import EMPTY_INPUT_NOTICE, check_caption_field
from ..ui import build_kv_table, build_placement_table, console

_PREVIEW_HELP = (
    "Show where every QR code would be placed, without writing a PDF.\n\n"
    "Examples:\n"
    "  qrbatch preview inventory.xlsx\n"
    "  qrbatch preview skus.csv --code-size 50 --no-caption\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_PREVIEW_HELP)(preview)


def preview(
    ctx: typer.Context,
    input: Path = typer.Argument(..., help="CSV or XLSX file with a header row."),
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
        if not state.records:
            _notice(EMPTY_INPUT_NOTICE, quiet=quiet_value)
            return
        check_caption_field(state, quiet=quiet_value)

        writer = FpdfDocumentWriter(A4_PORTRAIT)
        items = plan_batch(
            state.records,
            state.schema,
            state.config,
            measure_width=writer.measure_text,
            page=A4_PORTRAIT,
        )
        geometry = compute_geometry(state.config, A4_PORTRAIT)
        console.print(
            build_kv_table(
                [
                    ("Records", str(len(items))),
                    ("Fields", ", ".join(state.schema) or "-"),
                    ("Columns", str(geometry.columns)),
                    ("Row height (mm)", f"{geometry.item_height:g}"),
                    ("Pages", str(page_count([item.placement for item in items]))),
                ],
                title="Layout",
            )
        )
        console.print(
            build_placement_table(
                [
                    (
                        item.placement.record_index + 1,
                        item.placement.page_index + 1,
                        item.placement.x,
                        item.placement.y,
                        item.caption or "-",
                    )
                    for item in items
                ]
            )
        )

    _run_cli(_run, debug=debug_value)
