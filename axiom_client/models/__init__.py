from .base import AxiomModel, ErrorEnvelope
from .dataset import (
    Dataset,
    DatasetCreateRequest,
    DatasetInfo,
    DatasetStats,
    DatasetTrimRequest,
    DatasetTrimResult,
    DatasetUpdateRequest,
)
from .field import Field, FieldUpdateRequest
from .ingest import (
    ContentEncoding,
    ContentType,
    IngestFailure,
    IngestOptions,
    IngestStatus,
)

__all__ = [
    "AxiomModel",
    "ErrorEnvelope",
    "Dataset",
    "DatasetCreateRequest",
    "DatasetInfo",
    "DatasetStats",
    "DatasetTrimRequest",
    "DatasetTrimResult",
    "DatasetUpdateRequest",
    "Field",
    "FieldUpdateRequest",
    "ContentEncoding",
    "ContentType",
    "IngestFailure",
    "IngestOptions",
    "IngestStatus",
]
