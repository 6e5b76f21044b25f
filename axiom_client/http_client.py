"""
Axiom HTTP client using httpx.

Provides a thin wrapper around httpx for making authenticated requests to the
Axiom API, mapping error responses to typed exceptions and decoding JSON
responses into pydantic models.
"""

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from .config import (
    CLOUD_URL,
    AxiomSettings,
    TokenType,
    is_cloud_url,
    resolve_setting,
    token_type,
)
from .exceptions import (
    AxiomAPIError,
    AxiomConfigurationError,
    AxiomConnectionError,
    AxiomDecodeError,
    AxiomTimeoutError,
)
from .models import ErrorEnvelope

logger = logging.getLogger(__name__)

USER_AGENT = "axiom-client-python"
ORG_ID_HEADER = "X-Axiom-Org-Id"


class AxiomHttpClient:
    """
    HTTP client for the Axiom API.

    Handles configuration, authentication and error mapping for all HTTP
    interactions with Axiom. Every call performs exactly one round-trip;
    nothing is retried.
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        client: httpx.Client | None = None,
        base_url: str | None = None,
        access_token: str | None = None,
        org_id: str | None = None,
        settings: AxiomSettings | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize AxiomHttpClient.

        Parameters left as None are taken from the environment:

        - AXIOM_URL (defaults to Axiom Cloud)
        - AXIOM_TOKEN
        - AXIOM_ORG_ID (required on Axiom Cloud with a personal token)

        Args:
            client: httpx.Client to send requests with. If omitted, one is
                created on first use and closed by close().
            base_url: Base URL of the Axiom deployment
            access_token: API, ingest or personal token
            org_id: Organization ID
            settings: Environment settings (read from the environment if omitted)
            timeout: Default timeout of an owned client, in seconds

        Raises:
            AxiomConfigurationError: If the token is missing or malformed, or
                the org id is missing where it is required
        """
        settings = settings or AxiomSettings()

        self.base_url = (resolve_setting(base_url, settings.url) or CLOUD_URL).rstrip("/")

        self.access_token = resolve_setting(access_token, settings.token)
        if self.access_token is None:
            raise AxiomConfigurationError(
                "Either access_token has to be set or environment variable AXIOM_TOKEN",
                config_key="AXIOM_TOKEN",
            )

        self.token_type = token_type(self.access_token)
        if self.token_type is None:
            raise AxiomConfigurationError(
                "Either access_token or environment variable AXIOM_TOKEN has the wrong format",
                config_key="AXIOM_TOKEN",
            )

        self.org_id = resolve_setting(org_id, settings.org_id)
        if (
            self.org_id is None
            and is_cloud_url(self.base_url)
            and self.token_type is TokenType.PERSONAL
        ):
            raise AxiomConfigurationError(
                "Either org_id has to be set or environment variable AXIOM_ORG_ID",
                config_key="AXIOM_ORG_ID",
            )

        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

        logger.info(
            f"AxiomHttpClient initialized with base_url: {self.base_url} "
            f"(token type: {self.token_type.name.lower()})"
        )

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - close client."""
        self.close()

    def close(self):
        """Close the underlying httpx client if it was created here."""
        if self._client and self._owns_client:
            self._client.close()
            self._client = None

    @property
    def client(self) -> httpx.Client:
        """Get or create the httpx client (lazy initialization)."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    @property
    def is_ingest_token(self) -> bool:
        return self.token_type is TokenType.INGEST

    def _get_headers(self, extra_headers: dict = None) -> dict:
        """
        Get request headers with authentication.

        The org id header is left out for ingest tokens, which are scoped to
        one organization already.

        Args:
            extra_headers: Additional headers to include

        Returns:
            Headers dictionary
        """
        headers = {
            "Authorization": f"Bearer {self.access_token}",
            "User-Agent": USER_AGENT,
        }

        if self.org_id is not None and not self.is_ingest_token:
            headers[ORG_ID_HEADER] = self.org_id

        if extra_headers:
            headers.update(extra_headers)

        return headers

    def _build_url(self, path: str) -> str:
        """
        Build full URL from path.

        Args:
            path: API path, optionally with a query string

        Returns:
            Full URL
        """
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.base_url}{path}"

    def build_request(
        self,
        method: str,
        path: str,
        params: dict = None,
        json_data: Any = None,
        content: Any = None,
        headers: dict = None,
        timeout: float = None,
    ) -> httpx.Request:
        """
        Build an authenticated request.

        Args:
            method: HTTP method
            path: API path (relative to base_url)
            params: Query parameters
            json_data: JSON body
            content: Raw body (bytes, file-like object or iterable of bytes)
            headers: Additional headers
            timeout: Timeout for this request, in seconds

        Returns:
            httpx.Request object
        """
        extra = {}
        if json_data is not None or content is not None:
            extra["Accept"] = "application/json"
        if headers:
            extra.update(headers)

        kwargs = {}
        if timeout is not None:
            kwargs["timeout"] = timeout

        return self.client.build_request(
            method,
            self._build_url(path),
            params=params,
            json=json_data,
            content=content,
            headers=self._get_headers(extra),
            **kwargs,
        )

    def _handle_error_response(self, response: httpx.Response):
        """
        Raise AxiomAPIError for an error response.

        The message is taken from the first of these that applies:

        1. no body, or a body that is not JSON: the HTTP reason phrase
        2. a JSON body that is not an error envelope: the raw body text
        3. an error envelope: its message

        Raises:
            AxiomAPIError: Always
        """
        status_code = response.status_code
        media_type = response.headers.get("Content-Type", "").split(";")[0].strip()

        if not response.content or media_type.lower() != "application/json":
            raise AxiomAPIError(status_code, response.reason_phrase)

        text = response.text
        try:
            envelope = ErrorEnvelope.model_validate_json(text)
        except ValidationError:
            raise AxiomAPIError(status_code, text, response_data=text) from None

        raise AxiomAPIError(status_code, envelope.message, response_data=text)

    def send(self, request: httpx.Request) -> httpx.Response:
        """
        Send a request and raise for error responses.

        Args:
            request: Request built by build_request()

        Returns:
            httpx.Response object with a status below 400

        Raises:
            AxiomTimeoutError: For timeout errors
            AxiomConnectionError: For connection errors
            AxiomAPIError: For responses with status >= 400
        """
        operation = f"{request.method} {request.url.raw_path.decode('ascii')}"
        logger.debug(f"Sending {operation}")

        try:
            response = self.client.send(request)
        except httpx.TimeoutException as e:
            raise AxiomTimeoutError(
                f"Request timeout: {operation}",
                timeout=request.extensions.get("timeout", {}).get("read"),
                operation=operation,
            ) from e
        except httpx.TransportError as e:
            raise AxiomConnectionError(
                f"Connection error: {operation}",
                base_url=self.base_url,
                cause=e,
            ) from e

        if response.status_code >= 400:
            logger.warning(f"{operation} failed with status {response.status_code}")
            self._handle_error_response(response)

        return response

    def decode(self, response: httpx.Response, result_type: Any) -> Any:
        """
        Decode a successful response body into result_type.

        Raises:
            AxiomDecodeError: If the body is not valid JSON, is null or does
                not match result_type
        """
        try:
            result = TypeAdapter(result_type).validate_json(response.content)
        except ValidationError as e:
            raise AxiomDecodeError(response.status_code, response.text) from e

        if result is None:
            raise AxiomDecodeError(response.status_code, response.text)
        return result

    def call(
        self,
        method: str,
        path: str,
        result_type: Any = None,
        params: dict = None,
        json_data: Any = None,
        content: Any = None,
        headers: dict = None,
        timeout: float = None,
    ) -> Any:
        """
        Build, send and decode one request.

        Args:
            method: HTTP method
            path: API path (relative to base_url)
            result_type: Type to decode the response into; None skips decoding
            params: Query parameters
            json_data: JSON body
            content: Raw body
            headers: Additional headers
            timeout: Timeout for this request, in seconds

        Returns:
            Decoded result, or None if result_type is None
        """
        request = self.build_request(
            method,
            path,
            params=params,
            json_data=json_data,
            content=content,
            headers=headers,
            timeout=timeout,
        )
        response = self.send(request)

        if result_type is None:
            return None
        return self.decode(response, result_type)

    def get(self, path: str, result_type: Any, timeout: float = None) -> Any:
        """Make a GET request."""
        return self.call("GET", path, result_type, timeout=timeout)

    def post(
        self, path: str, result_type: Any, json_data: Any = None, timeout: float = None
    ) -> Any:
        """Make a POST request with a JSON body."""
        return self.call("POST", path, result_type, json_data=json_data, timeout=timeout)

    def put(
        self, path: str, result_type: Any, json_data: Any = None, timeout: float = None
    ) -> Any:
        """Make a PUT request with a JSON body."""
        return self.call("PUT", path, result_type, json_data=json_data, timeout=timeout)

    def delete(self, path: str, timeout: float = None) -> None:
        """Make a DELETE request, ignoring the response body."""
        self.call("DELETE", path, timeout=timeout)
