"""Layout, captions and PDF assembly."""

from .assembler import (
    BatchInputs,
    BatchResult,
    DEFAULT_OUTPUT_FILENAME,
    DocumentAssembler,
    PlannedItem,
    plan_batch,
)
from .caption import format_caption
from .layout import (
    A4_PORTRAIT,
    LayoutConfig,
    PageGeometry,
    PageSize,
    Placement,
    compute_geometry,
    compute_layout,
    page_count,
)
from .pdf_writer import DocumentWriter, FpdfDocumentWriter

__all__ = [
    "A4_PORTRAIT",
    "BatchInputs",
    "BatchResult",
    "DEFAULT_OUTPUT_FILENAME",
    "DocumentAssembler",
    "DocumentWriter",
    "FpdfDocumentWriter",
    "LayoutConfig",
    "PageGeometry",
    "PageSize",
    "Placement",
    "PlannedItem",
    "compute_geometry",
    "compute_layout",
    "format_caption",
    "page_count",
    "plan_batch",
]
