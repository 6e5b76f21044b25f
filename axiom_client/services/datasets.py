import logging
from collections.abc import Iterable
from datetime import timedelta
from typing import Any

from ..exceptions import AxiomError
from ..models import (
    ContentEncoding,
    ContentType,
    Dataset,
    DatasetCreateRequest,
    DatasetInfo,
    DatasetStats,
    DatasetTrimRequest,
    DatasetTrimResult,
    DatasetUpdateRequest,
    Field,
    FieldUpdateRequest,
    IngestOptions,
    IngestStatus,
)
from ..utils import (
    build_ingest_query,
    content_headers,
    encode_events,
    format_duration,
    path_segment,
)

logger = logging.getLogger(__name__)


class AxiomDatasetService:
    """
    Service for Axiom dataset management and ingestion.

    Errors are never handled here: every AxiomError raised by the HTTP client
    reaches the caller unchanged.
    """

    BASE_PATH = "/api/v1/datasets"

    def __init__(self, http_client):
        self.http_client = http_client

    def _path(self, dataset_id: str, *segments: str) -> str:
        parts = [self.BASE_PATH, path_segment(dataset_id)]
        parts.extend(path_segment(segment) for segment in segments)
        return "/".join(parts)

    def stats(self, timeout: float = None) -> DatasetStats:
        """Get usage statistics across all datasets."""
        return self.http_client.get(
            f"{self.BASE_PATH}/_stats", DatasetStats, timeout=timeout
        )

    def get(self, dataset_id: str, timeout: float = None) -> Dataset:
        """
        Get a dataset by ID.

        Args:
            dataset_id: Dataset ID
            timeout: Request timeout in seconds

        Returns:
            Dataset object

        Raises:
            AxiomAPIError: If the dataset does not exist (status 404)
        """
        logger.debug(f"Getting dataset: {dataset_id}")
        return self.http_client.get(self._path(dataset_id), Dataset, timeout=timeout)

    def list(self, timeout: float = None) -> list[Dataset]:
        """List all datasets."""
        datasets = self.http_client.get(self.BASE_PATH, list[Dataset], timeout=timeout)
        logger.debug(f"Retrieved {len(datasets)} datasets")
        return datasets

    def create(
        self, name: str, description: str = "", timeout: float = None
    ) -> Dataset:
        """
        Create a new dataset.

        Args:
            name: Unique dataset name
            description: Dataset description
            timeout: Request timeout in seconds

        Returns:
            The created Dataset

        Raises:
            AxiomAPIError: If creation fails, e.g. the name is already taken
        """
        logger.info(f"Creating dataset: {name}")

        payload = DatasetCreateRequest(name=name, description=description)
        try:
            dataset = self.http_client.post(
                self.BASE_PATH, Dataset, json_data=payload.to_payload(), timeout=timeout
            )
        except AxiomError as e:
            logger.error(f"Failed to create dataset '{name}': {e}")
            raise

        logger.info(f"Dataset created successfully: {dataset.id}")
        return dataset

    def update(
        self, dataset_id: str, description: str, timeout: float = None
    ) -> Dataset:
        """
        Update the description of a dataset.

        Returns:
            The updated Dataset as returned by the server
        """
        logger.info(f"Updating dataset: {dataset_id}")

        payload = DatasetUpdateRequest(description=description)
        return self.http_client.put(
            self._path(dataset_id), Dataset, json_data=payload.to_payload(), timeout=timeout
        )

    def update_field(
        self,
        dataset_id: str,
        field: str,
        request: FieldUpdateRequest,
        timeout: float = None,
    ) -> Field:
        """
        Update the metadata of a field.

        Args:
            dataset_id: Dataset ID
            field: Field name
            request: New description, unit and hidden flag
            timeout: Request timeout in seconds

        Returns:
            The updated Field
        """
        logger.info(f"Updating field '{field}' of dataset {dataset_id}")

        return self.http_client.put(
            self._path(dataset_id, "fields", field),
            Field,
            json_data=request.to_payload(),
            timeout=timeout,
        )

    def delete(self, dataset_id: str, timeout: float = None) -> None:
        """
        Delete a dataset.

        Raises:
            AxiomAPIError: If deletion fails
        """
        logger.info(f"Deleting dataset: {dataset_id}")

        try:
            self.http_client.delete(self._path(dataset_id), timeout=timeout)
        except AxiomError as e:
            logger.error(f"Failed to delete dataset '{dataset_id}': {e}")
            raise

        logger.info(f"Dataset deleted successfully: {dataset_id}")

    def info(self, dataset_id: str, timeout: float = None) -> DatasetInfo:
        """Get details and storage counters of a dataset."""
        return self.http_client.get(
            self._path(dataset_id, "info"), DatasetInfo, timeout=timeout
        )

    def ingest(
        self,
        dataset_id: str,
        data: Any,
        content_type: ContentType,
        content_encoding: ContentEncoding = ContentEncoding.IDENTITY,
        options: IngestOptions = None,
        timeout: float = None,
    ) -> IngestStatus:
        """
        Ingest raw data into a dataset.

        The data is sent as is; it must already be in the given format and
        encoding.

        Args:
            dataset_id: Dataset ID
            data: Body as bytes, a binary file-like object or an iterable of bytes
            content_type: Format of the data
            content_encoding: Compression of the data
            options: Timestamp field/format and CSV delimiter overrides
            timeout: Request timeout in seconds

        Returns:
            IngestStatus of the call

        Raises:
            ValueError: If content_type or content_encoding is not supported
            AxiomAPIError: If the server rejects the request
        """
        headers = content_headers(content_type, content_encoding)

        path = self._path(dataset_id, "ingest")
        query = build_ingest_query(options)
        if query:
            path = f"{path}?{query}"

        logger.info(
            f"Ingesting into dataset {dataset_id} "
            f"({headers['Content-Type']}, {headers.get('Content-Encoding', 'identity')})"
        )

        try:
            status = self.http_client.call(
                "POST",
                path,
                IngestStatus,
                content=data,
                headers=headers,
                timeout=timeout,
            )
        except AxiomError as e:
            logger.error(f"Failed to ingest into dataset '{dataset_id}': {e}")
            raise

        logger.info(
            f"Ingested {status.ingested} events into {dataset_id}, {status.failed} failed"
        )
        return status

    def ingest_events(
        self,
        dataset_id: str,
        events: Iterable[Any],
        options: IngestOptions = None,
        timeout: float = None,
    ) -> IngestStatus:
        """
        Ingest events, sent as gzip-compressed newline delimited JSON.

        Args:
            dataset_id: Dataset ID
            events: JSON-serializable values (dicts, pydantic models, ...)
            options: Timestamp field/format overrides
            timeout: Request timeout in seconds

        Returns:
            IngestStatus of the call
        """
        body = encode_events(events)
        return self.ingest(
            dataset_id,
            body,
            ContentType.NDJSON,
            ContentEncoding.GZIP,
            options=options,
            timeout=timeout,
        )

    def trim(
        self, dataset_id: str, duration: timedelta, timeout: float = None
    ) -> DatasetTrimResult:
        """
        Delete blocks of a dataset that are older than duration.

        Args:
            dataset_id: Dataset ID
            duration: Maximum age of the data to keep
            timeout: Request timeout in seconds

        Returns:
            DatasetTrimResult with the number of deleted blocks
        """
        payload = DatasetTrimRequest(max_duration=format_duration(duration))
        logger.info(f"Trimming dataset {dataset_id} to {payload.max_duration}")

        result = self.http_client.post(
            self._path(dataset_id, "trim"),
            DatasetTrimResult,
            json_data=payload.to_payload(),
            timeout=timeout,
        )
        logger.info(f"Trimmed dataset {dataset_id}: {result.blocks_deleted} blocks deleted")
        return result
