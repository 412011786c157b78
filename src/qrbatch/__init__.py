"""Bulk QR code sheets from tabular records."""

from .core.models import FieldSchema, add_field, set_schema
from .encoding.payload import encode_payload
from .render.assembler import BatchInputs, BatchResult, DocumentAssembler
from .render.caption import format_caption
from .render.layout import A4_PORTRAIT, LayoutConfig, PageSize, Placement, compute_layout

__all__ = [
    "A4_PORTRAIT",
    "BatchInputs",
    "BatchResult",
    "DocumentAssembler",
    "FieldSchema",
    "LayoutConfig",
    "PageSize",
    "Placement",
    "add_field",
    "compute_layout",
    "encode_payload",
    "format_caption",
    "set_schema",
]
