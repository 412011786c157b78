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

import concurrent.futures
import os
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from ..core.errors import GenerationInProgressError, RasterizationError
from ..core.models import FieldSchema, Record
from ..encoding.payload import encode_payload
from ..qr.codec import QrConfig, rasterize
from .caption import format_caption
from .layout import A4_PORTRAIT, LayoutConfig, PageSize, Placement, compute_layout, page_count
from .pdf_writer import DocumentWriter, FpdfDocumentWriter

DEFAULT_OUTPUT_FILENAME = "bulk-qr-codes.pdf"
RENDER_JOBS_ENV = "QRBATCH_RENDER_JOBS"
# Caption baseline sits this far below the bottom edge of its code.
CAPTION_BASELINE_OFFSET_MM = 4.0
_DEFAULT_QR_WORKERS_CAP = 8
_MIN_QR_TASKS_PER_WORKER = 4

Rasterizer = Callable[[str, QrConfig], bytes]
WriterFactory = Callable[[PageSize], DocumentWriter]
ProgressCallback = Callable[[int, int], None]
RenderJobs = int | Literal["auto"] | None


@dataclass(frozen=True)
class BatchInputs:
    records: Sequence[Record]
    schema: FieldSchema
    layout: LayoutConfig
    output_path: str | Path = DEFAULT_OUTPUT_FILENAME
    page: PageSize = A4_PORTRAIT
    qr_config: QrConfig | None = None


@dataclass(frozen=True)
class PlannedItem:
    placement: Placement
    payload: str
    caption: str | None


@dataclass(frozen=True)
class BatchResult:
    output_path: Path
    record_count: int
    page_count: int


def plan_batch(
    records: Sequence[Record],
    schema: FieldSchema,
    config: LayoutConfig,
    *,
    measure_width: Callable[[str], float],
    page: PageSize = A4_PORTRAIT,
) -> tuple[PlannedItem, ...]:
    placements = compute_layout(len(records), config, page)
    caption_field = config.caption_field if config.show_caption else None
    items: list[PlannedItem] = []
    for placement in placements:
        record = records[placement.record_index]
        items.append(
            PlannedItem(
                placement=placement,
                payload=encode_payload(record, schema),
                caption=format_caption(
                    record,
                    caption_field,
                    config.code_size_mm,
                    measure_width,
                ),
            )
        )
    return tuple(items)


class DocumentAssembler:
    """Runs one generation at a time: encode, rasterize, place, draw, save."""

    def __init__(
        self,
        *,
        rasterizer: Rasterizer = rasterize,
        writer_factory: WriterFactory = FpdfDocumentWriter,
        render_jobs: RenderJobs = None,
    ) -> None:
        self._rasterizer = rasterizer
        self._writer_factory = writer_factory
        self._render_jobs = render_jobs
        self._in_flight = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._in_flight.locked()

    def generate(
        self,
        inputs: BatchInputs,
        *,
        on_progress: ProgressCallback | None = None,
    ) -> BatchResult | None:
        if not inputs.records:
            return None
        if not self._in_flight.acquire(blocking=False):
            raise GenerationInProgressError("a generation run is already in progress")
        try:
            return self._generate(inputs, on_progress)
        finally:
            self._in_flight.release()

    def _generate(
        self,
        inputs: BatchInputs,
        on_progress: ProgressCallback | None,
    ) -> BatchResult:
        writer = self._writer_factory(inputs.page)
        items = plan_batch(
            inputs.records,
            inputs.schema,
            inputs.layout,
            measure_width=writer.measure_text,
            page=inputs.page,
        )
        qr_config = inputs.qr_config or QrConfig()
        images = self._render_qr_images([item.payload for item in items], qr_config)

        code_size = float(inputs.layout.code_size_mm)
        total = len(items)
        current_page = -1
        for done, (item, image) in enumerate(zip(items, images), start=1):
            placement = item.placement
            while current_page < placement.page_index:
                writer.new_page()
                current_page += 1
            writer.draw_image(image, placement.x, placement.y, code_size, code_size)
            if item.caption:
                writer.draw_text(
                    item.caption,
                    placement.x + code_size / 2,
                    placement.y + code_size + CAPTION_BASELINE_OFFSET_MM,
                    align="center",
                )
            if on_progress is not None:
                on_progress(done, total)

        output_path = Path(inputs.output_path)
        writer.save(output_path)
        return BatchResult(
            output_path=output_path,
            record_count=total,
            page_count=page_count([item.placement for item in items]),
        )

    def _render_qr_images(self, payloads: list[str], config: QrConfig) -> list[bytes]:
        # Results come back in submission order regardless of completion order.
        if not payloads:
            return []

        def worker(indexed: tuple[int, str]) -> bytes:
            index, payload = indexed
            try:
                return self._rasterizer(payload, config)
            except Exception as exc:
                raise RasterizationError(index, exc) from exc

        tasks = list(enumerate(payloads))
        workers = resolve_qr_workers(len(tasks), self._render_jobs)
        if workers <= 1:
            return [worker(task) for task in tasks]
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(worker, tasks))


def resolve_qr_workers(task_count: int, configured: RenderJobs = None) -> int:
    raw = os.environ.get(RENDER_JOBS_ENV, "").strip().lower()
    explicit = False
    requested: int | None = None
    if raw and raw != "auto":
        try:
            parsed = int(raw)
        except ValueError:
            raise ValueError(f"{RENDER_JOBS_ENV} must be a positive integer or 'auto'") from None
        if parsed > 0:
            requested = parsed
            explicit = True
    elif not raw and isinstance(configured, int):
        requested = configured
        explicit = True

    cpu = os.cpu_count() or 1
    if requested is None:
        requested = min(cpu, _DEFAULT_QR_WORKERS_CAP)

    workers = max(1, min(requested, cpu, task_count))
    if not explicit:
        workers = min(workers, max(1, task_count // _MIN_QR_TASKS_PER_WORKER))
    return max(1, workers)


__all__ = [
    "BatchInputs",
    "BatchResult",
    "CAPTION_BASELINE_OFFSET_MM",
    "DEFAULT_OUTPUT_FILENAME",
    "DocumentAssembler",
    "PlannedItem",
    "RENDER_JOBS_ENV",
    "plan_batch",
    "resolve_qr_workers",
]
