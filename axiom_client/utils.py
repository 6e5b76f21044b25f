"""
Encoding helpers for the dataset endpoints.
"""

import gzip
import json
from collections.abc import Iterable
from datetime import date, datetime, timedelta
from typing import Any
from urllib.parse import quote, quote_plus

from pydantic import BaseModel

from .models import ContentEncoding, ContentType, IngestOptions

# Query parameter names, in the order they are appended
INGEST_QUERY_PARAMS = (
    ("csv-delimiter", "csv_delimiter"),
    ("timestamp-field", "timestamp_field"),
    ("timestamp-format", "timestamp_format"),
)


def format_duration(duration: timedelta) -> str:
    """
    Format a duration the way the trim endpoint expects it, e.g. `1h1m30s`.

    Hours include whole days and are omitted when zero, minutes are omitted
    when zero, seconds are always present. Fractions of a second are dropped.

    Args:
        duration: Non-negative duration

    Returns:
        Go-style duration string

    Raises:
        ValueError: If the duration is negative
    """
    if duration < timedelta(0):
        raise ValueError(f"Duration must not be negative: {duration}")

    total = duration // timedelta(seconds=1)
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)

    result = f"{seconds}s"
    if minutes:
        result = f"{minutes}m{result}"
    if hours:
        result = f"{hours}h{result}"
    return result


def build_ingest_query(options: IngestOptions | None) -> str:
    """Build the URL-encoded query string for an ingest call, without `?`."""
    if options is None:
        return ""

    params = []
    for name, attr in INGEST_QUERY_PARAMS:
        value = getattr(options, attr)
        if value is not None:
            params.append(f"{name}={quote_plus(value)}")
    return "&".join(params)


def content_headers(
    content_type: ContentType | str, content_encoding: ContentEncoding | str
) -> dict:
    """
    Map an ingest content type and encoding to request headers.

    Raises:
        ValueError: If either value is not supported
    """
    try:
        content_type = ContentType(content_type)
    except ValueError as e:
        raise ValueError(f"Unsupported content type: {content_type!r}") from e
    try:
        content_encoding = ContentEncoding(content_encoding)
    except ValueError as e:
        raise ValueError(f"Unsupported content encoding: {content_encoding!r}") from e

    headers = {"Content-Type": content_type.value}
    if content_encoding is not ContentEncoding.IDENTITY:
        headers["Content-Encoding"] = content_encoding.value
    return headers


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize_event(event: Any) -> str:
    """Serialize one event to a compact JSON line."""
    if isinstance(event, BaseModel):
        return event.model_dump_json(by_alias=True)
    return json.dumps(event, separators=(",", ":"), default=_json_default)


def encode_events(events: Iterable[Any]) -> bytes:
    """
    Encode events as gzip-compressed newline delimited JSON.

    Every event, the last one included, is terminated by a newline. The gzip
    header carries no timestamp, so equal input gives equal output.
    """
    lines = "".join(f"{serialize_event(event)}\n" for event in events)
    return gzip.compress(lines.encode("utf-8"), mtime=0)


def path_segment(value: str) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(value, safe="")
