"""
Axiom client.

Entry point of the library, composing the HTTP client with the services for
each group of endpoints.
"""

from .config import AxiomSettings
from .http_client import AxiomHttpClient
from .services import AxiomDatasetService, AxiomServiceBase


class AxiomClient(AxiomServiceBase):
    """
    Client for the Axiom HTTP API.

    Takes its configuration from the environment for every option that is not
    passed explicitly:

    To connect to Axiom Cloud:
     - AXIOM_TOKEN
     - AXIOM_ORG_ID (only when using a personal token)

    To connect to a self-hosted deployment:
     - AXIOM_URL
     - AXIOM_TOKEN

    Dataset operations are available via `client.datasets`.

    Example:
        with AxiomClient(httpx.Client(), access_token="xaat-...") as client:
            client.datasets.ingest_events("logs", [{"message": "hello"}])
    """

    def __init__(
        self,
        client=None,
        base_url: str | None = None,
        access_token: str | None = None,
        org_id: str | None = None,
        settings: AxiomSettings | None = None,
        timeout: float = AxiomHttpClient.DEFAULT_TIMEOUT,
        *,
        http_client: AxiomHttpClient | None = None,
    ):
        """
        Initialize AxiomClient.

        Args:
            client: httpx.Client to send requests with (optional)
            base_url: Base URL of the Axiom deployment
            access_token: API, ingest or personal token
            org_id: Organization ID
            settings: Environment settings (read from the environment if omitted)
            timeout: Default timeout of an owned httpx client, in seconds
            http_client: Preconfigured AxiomHttpClient, instead of the options above

        Raises:
            ValueError: If both client and http_client are given
            AxiomConfigurationError: If the configuration cannot be resolved
        """
        if client is not None and http_client is not None:
            raise ValueError("Pass either client or http_client, not both")

        if http_client is None:
            http_client = AxiomHttpClient(
                client=client,
                base_url=base_url,
                access_token=access_token,
                org_id=org_id,
                settings=settings,
                timeout=timeout,
            )

        super().__init__(http_client)
        self.datasets = AxiomDatasetService(self.http_client)
