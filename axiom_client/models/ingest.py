from datetime import datetime
from enum import Enum

from pydantic import Field

from .base import AxiomModel


class ContentType(str, Enum):
    """Content type of the data to ingest."""

    JSON = "application/json"
    # Newline delimited JSON objects, preferred format
    NDJSON = "application/x-ndjson"
    CSV = "text/csv"


class ContentEncoding(str, Enum):
    """Content encoding of the data to ingest."""

    IDENTITY = "identity"
    # Preferred compression format
    GZIP = "gzip"
    ZSTD = "zstd"


class IngestOptions(AxiomModel):
    """
    Optional overrides for an ingest call.

    Options left as None are not sent, so the server applies its defaults
    (the timestamp field defaults to `_time`).
    """

    timestamp_field: str | None = Field(
        None, description="Name of the field holding the event timestamp"
    )
    timestamp_format: str | None = Field(
        None, description="Format used to parse the timestamp field"
    )
    csv_delimiter: str | None = Field(
        None, description="Delimiter of CSV data, only used with text/csv"
    )


class IngestFailure(AxiomModel):
    """An event that failed to ingest."""

    timestamp: datetime | None = Field(None, description="Timestamp of the event")
    error: str = Field("", description="Reason the event was rejected")


class IngestStatus(AxiomModel):
    """Result of an ingest call."""

    ingested: int = Field(0, description="Number of ingested events")
    failed: int = Field(0, description="Number of rejected events")
    failures: list[IngestFailure] = Field(
        default_factory=list, description="Rejected events"
    )
    processed_bytes: int = Field(
        0, alias="processedBytes", description="Bytes processed by the server"
    )
    blocks_created: int = Field(0, alias="blocksCreated")
    wal_length: int = Field(
        0, alias="walLength", description="Write-ahead log length after the call"
    )
