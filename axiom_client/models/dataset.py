from datetime import datetime

from pydantic import Field

from .base import AxiomModel
from .field import Field as DatasetField


class Dataset(AxiomModel):
    """Dataset entity."""

    id: str = Field(..., description="Dataset ID")
    name: str = Field(..., description="Unique dataset name")
    description: str | None = Field(None, description="Dataset description")
    created_by: str | None = Field(
        None, alias="who", description="ID of the user who created the dataset"
    )
    created_at: datetime | None = Field(
        None, alias="created", description="Creation time"
    )


class DatasetInfo(AxiomModel):
    """
    Dataset details with storage counters.

    Returned by the info endpoint and, per dataset, as part of DatasetStats.
    """

    name: str = Field(..., description="Dataset name")
    num_blocks: int = Field(0, alias="numBlocks", description="Number of blocks")
    num_events: int = Field(0, alias="numEvents", description="Number of events")
    num_fields: int = Field(0, alias="numFields", description="Number of fields")
    input_bytes: int = Field(0, alias="inputBytes", description="Ingested bytes")
    input_bytes_human: str = Field(
        "", alias="inputBytesHuman", description="Ingested bytes, human readable"
    )
    compressed_bytes: int = Field(
        0, alias="compressedBytes", description="Bytes stored after compression"
    )
    compressed_bytes_human: str = Field(
        "",
        alias="compressedBytesHuman",
        description="Bytes stored after compression, human readable",
    )
    min_time: datetime | None = Field(
        None, alias="minTime", description="Timestamp of the oldest event"
    )
    max_time: datetime | None = Field(
        None, alias="maxTime", description="Timestamp of the newest event"
    )
    fields: list[DatasetField] = Field(
        default_factory=list, description="Fields of the dataset"
    )
    created_by: str | None = Field(
        None, alias="who", description="ID of the user who created the dataset"
    )
    created_at: datetime | None = Field(
        None, alias="created", description="Creation time"
    )


class DatasetStats(AxiomModel):
    """Aggregate counters across all datasets."""

    datasets: list[DatasetInfo] = Field(
        default_factory=list, description="Per dataset details"
    )
    num_blocks: int = Field(0, alias="numBlocks")
    num_events: int = Field(0, alias="numEvents")
    input_bytes: int = Field(0, alias="inputBytes")
    input_bytes_human: str = Field("", alias="inputBytesHuman")
    compressed_bytes: int = Field(0, alias="compressedBytes")
    compressed_bytes_human: str = Field("", alias="compressedBytesHuman")


class DatasetCreateRequest(AxiomModel):
    name: str
    description: str = ""


class DatasetUpdateRequest(AxiomModel):
    description: str


class DatasetTrimRequest(AxiomModel):
    max_duration: str = Field(..., alias="maxDuration")


class DatasetTrimResult(AxiomModel):
    blocks_deleted: int = Field(
        0, alias="numDeleted", description="Number of blocks deleted"
    )
