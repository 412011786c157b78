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

from ...config import AppConfig
from ...core.session import SessionState
from ...render.assembler import BatchInputs, BatchResult, DocumentAssembler
from ..core.log import _notice, _warn
from ..ui import print_completion_panel, progress

EMPTY_INPUT_NOTICE = "No records to print."


def check_caption_field(state: SessionState, *, quiet: bool) -> None:
    config = state.config
    if not config.show_caption or not config.caption_field:
        return
    if config.caption_field not in state.schema:
        _warn(
            f"caption field {config.caption_field!r} is not one of the input fields; "
            "codes will be printed without labels",
            quiet=quiet,
        )


def run_batch(
    state: SessionState,
    app_config: AppConfig,
    *,
    output_path: Path,
    quiet: bool,
    assembler: DocumentAssembler | None = None,
) -> BatchResult | None:
    if not state.records:
        _notice(EMPTY_INPUT_NOTICE, quiet=quiet)
        return None
    check_caption_field(state, quiet=quiet)

    assembler = assembler or DocumentAssembler(render_jobs=app_config.render_jobs)
    inputs = BatchInputs(
        records=state.records,
        schema=state.schema,
        layout=state.config,
        output_path=output_path,
        qr_config=app_config.qr_config,
    )
    with progress(quiet=quiet) as progress_bar:
        task_id = (
            progress_bar.add_task("Drawing QR codes...", total=len(state.records))
            if progress_bar is not None
            else None
        )

        def _on_progress(done: int, total: int) -> None:
            if progress_bar is None or task_id is None:
                return
            progress_bar.update(task_id, completed=done, total=total)

        result = assembler.generate(inputs, on_progress=_on_progress)

    if result is not None:
        print_completion_panel(
            "PDF ready",
            [
                f"Saved {result.output_path}",
                f"{result.record_count} QR codes on {result.page_count} page(s)",
            ],
            quiet=quiet,
        )
    return result
