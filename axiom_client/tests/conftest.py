"""
Pytest configuration for Axiom client tests.

Clears the Axiom environment variables so tests never pick up a developer's
credentials, and provides an in-memory fake of the dataset endpoints served
through httpx.MockTransport.
"""

import gzip
import json

import httpx
import pytest

from axiom_client.http_client import AxiomHttpClient

TEST_URL = "http://localhost:8080"
API_TOKEN = "xaat-274dc2a2-5db4-4f8c-92a3-92e33bee92a8"
INGEST_TOKEN = "xait-274dc2a2-5db4-4f8c-92a3-92e33bee92a8"
PERSONAL_TOKEN = "xapt-274dc2a2-5db4-4f8c-92a3-92e33bee92a8"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove Axiom settings from the environment."""
    for name in ("AXIOM_URL", "AXIOM_TOKEN", "AXIOM_ORG_ID"):
        monkeypatch.delenv(name, raising=False)


class FakeAxiomServer:
    """
    Minimal in-memory implementation of the dataset endpoints.

    Every request is recorded in `requests` for later inspection.
    """

    CREATED = "2024-01-01T00:00:00Z"

    def __init__(self):
        self.datasets = {}
        self.events = {}
        self.field_meta = {}
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")

        if parts[:3] != ["api", "v1", "datasets"]:
            return self._error(404, "not found")

        rest = parts[3:]
        if not rest:
            if request.method == "GET":
                return httpx.Response(200, json=list(self.datasets.values()))
            if request.method == "POST":
                return self._create(json.loads(request.content))
        elif rest == ["_stats"] and request.method == "GET":
            return self._stats()
        else:
            dataset_id = rest[0]
            if dataset_id not in self.datasets:
                return self._error(404, "not found")
            return self._dataset_route(request, dataset_id, rest[1:])

        return self._error(405, "method not allowed")

    def _error(self, status: int, message: str) -> httpx.Response:
        return httpx.Response(status, json={"message": message})

    def _create(self, body: dict) -> httpx.Response:
        name = body["name"]
        if name in self.datasets:
            return self._error(409, "dataset exists")
        self.datasets[name] = {
            "id": name,
            "name": name,
            "description": body.get("description", ""),
            "who": "test-user",
            "created": self.CREATED,
        }
        self.events[name] = []
        return httpx.Response(200, json=self.datasets[name])

    def _dataset_route(self, request, dataset_id, rest) -> httpx.Response:
        method = request.method
        if not rest:
            if method == "GET":
                return httpx.Response(200, json=self.datasets[dataset_id])
            if method == "PUT":
                body = json.loads(request.content)
                self.datasets[dataset_id]["description"] = body["description"]
                return httpx.Response(200, json=self.datasets[dataset_id])
            if method == "DELETE":
                del self.datasets[dataset_id]
                del self.events[dataset_id]
                return httpx.Response(204)
        elif rest == ["info"] and method == "GET":
            return httpx.Response(200, json=self._info(dataset_id))
        elif rest == ["ingest"] and method == "POST":
            return self._ingest(request, dataset_id)
        elif rest == ["trim"] and method == "POST":
            return httpx.Response(200, json={"numDeleted": 0})
        elif len(rest) == 2 and rest[0] == "fields" and method == "PUT":
            return self._update_field(request, dataset_id, rest[1])
        return self._error(405, "method not allowed")

    def _ingest(self, request, dataset_id) -> httpx.Response:
        raw = request.read()
        if request.headers.get("Content-Encoding") == "gzip":
            raw = gzip.decompress(raw)
        text = raw.decode("utf-8")

        content_type = request.headers["Content-Type"]
        if content_type == "application/json":
            events = json.loads(text)
        elif content_type == "application/x-ndjson":
            events = [json.loads(line) for line in text.splitlines() if line]
        else:
            delimiter = request.url.params.get("csv-delimiter", ",")
            header, *rows = [line.split(delimiter) for line in text.splitlines() if line]
            events = [dict(zip(header, row)) for row in rows]

        self.events[dataset_id].extend(events)
        return httpx.Response(
            200,
            json={
                "ingested": len(events),
                "failed": 0,
                "failures": [],
                "processedBytes": len(raw),
                "blocksCreated": 0,
                "walLength": len(self.events[dataset_id]),
            },
        )

    def _fields(self, dataset_id) -> list[dict]:
        types = {}
        for event in self.events[dataset_id]:
            for name, value in event.items():
                types[name] = "integer" if isinstance(value, int) else "string"
        fields = []
        for name, kind in sorted(types.items()):
            meta = self.field_meta.get((dataset_id, name), {})
            fields.append(
                {
                    "name": name,
                    "description": meta.get("description") or "",
                    "type": kind,
                    "unit": meta.get("unit") or "",
                    "hidden": meta.get("hidden", False),
                }
            )
        return fields

    def _update_field(self, request, dataset_id, field) -> httpx.Response:
        self.field_meta[(dataset_id, field)] = json.loads(request.content)
        for item in self._fields(dataset_id):
            if item["name"] == field:
                return httpx.Response(200, json=item)
        return self._error(404, "field not found")

    def _info(self, dataset_id) -> dict:
        fields = self._fields(dataset_id)
        return {
            "name": dataset_id,
            "numBlocks": 1,
            "numEvents": len(self.events[dataset_id]),
            "numFields": len(fields),
            "inputBytes": 0,
            "inputBytesHuman": "0 B",
            "compressedBytes": 0,
            "compressedBytesHuman": "0 B",
            "minTime": None,
            "maxTime": None,
            "fields": fields,
            "who": "test-user",
            "created": self.CREATED,
        }

    def _stats(self) -> httpx.Response:
        infos = [self._info(dataset_id) for dataset_id in self.datasets]
        return httpx.Response(
            200,
            json={
                "datasets": infos,
                "numBlocks": len(infos),
                "numEvents": sum(info["numEvents"] for info in infos),
                "inputBytes": 0,
                "inputBytesHuman": "0 B",
                "compressedBytes": 0,
                "compressedBytesHuman": "0 B",
            },
        )


@pytest.fixture
def fake_server():
    """In-memory Axiom server."""
    return FakeAxiomServer()


@pytest.fixture
def mock_client_factory():
    """Create AxiomHttpClients that send requests to a handler function."""
    created = []

    def factory(handler, **kwargs):
        kwargs.setdefault("base_url", TEST_URL)
        kwargs.setdefault("access_token", API_TOKEN)
        transport_client = httpx.Client(transport=httpx.MockTransport(handler))
        created.append(transport_client)
        return AxiomHttpClient(client=transport_client, **kwargs)

    yield factory

    for transport_client in created:
        transport_client.close()


@pytest.fixture
def http_client(mock_client_factory, fake_server):
    """AxiomHttpClient backed by the fake server."""
    return mock_client_factory(fake_server, org_id="test-org")
