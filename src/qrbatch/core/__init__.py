"""Records, field schemas and session state."""

from .errors import (
    FieldNameError,
    GenerationInProgressError,
    IngestError,
    QrBatchError,
    RasterizationError,
)
from .models import (
    DEFAULT_MANUAL_FIELDS,
    FieldSchema,
    Record,
    RecordSet,
    add_field,
    add_field_checked,
    append_record,
    clear_records,
    manual_record,
    set_schema,
)

__all__ = [
    "DEFAULT_MANUAL_FIELDS",
    "FieldNameError",
    "FieldSchema",
    "GenerationInProgressError",
    "IngestError",
    "QrBatchError",
    "RasterizationError",
    "Record",
    "RecordSet",
    "add_field",
    "add_field_checked",
    "append_record",
    "clear_records",
    "manual_record",
    "set_schema",
]
