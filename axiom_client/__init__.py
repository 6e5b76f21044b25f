"""
Python client for the Axiom HTTP API.
"""

from .client import AxiomClient
from .config import CLOUD_URL, AxiomSettings, TokenType
from .exceptions import (
    AxiomAPIError,
    AxiomConfigurationError,
    AxiomConnectionError,
    AxiomDecodeError,
    AxiomError,
    AxiomTimeoutError,
)
from .http_client import AxiomHttpClient
from .models import (
    ContentEncoding,
    ContentType,
    Dataset,
    DatasetInfo,
    DatasetStats,
    DatasetTrimResult,
    Field,
    FieldUpdateRequest,
    IngestFailure,
    IngestOptions,
    IngestStatus,
)
from .services import AxiomDatasetService

__all__ = [
    "AxiomClient",
    "AxiomHttpClient",
    "AxiomDatasetService",
    "AxiomSettings",
    "TokenType",
    "CLOUD_URL",
    "AxiomError",
    "AxiomAPIError",
    "AxiomConfigurationError",
    "AxiomConnectionError",
    "AxiomDecodeError",
    "AxiomTimeoutError",
    "ContentEncoding",
    "ContentType",
    "Dataset",
    "DatasetInfo",
    "DatasetStats",
    "DatasetTrimResult",
    "Field",
    "FieldUpdateRequest",
    "IngestFailure",
    "IngestOptions",
    "IngestStatus",
]

__version__ = "0.1.0"
