from ..http_client import AxiomHttpClient


class AxiomServiceBase:
    """
    Base service for Axiom operations.
    """

    def __init__(self, http_client: AxiomHttpClient = None, **client_options):
        """
        Initialize AxiomServiceBase.

        Args:
            http_client: AxiomHttpClient instance (created if not provided)
            **client_options: Options for a new AxiomHttpClient (client,
                base_url, access_token, org_id, settings, timeout)

        Raises:
            ValueError: If both http_client and client_options are given
        """
        if http_client is not None and client_options:
            raise ValueError("Pass either http_client or client options, not both")
        self.http_client = http_client or AxiomHttpClient(**client_options)

    def close(self):
        """Close underlying HTTP client."""
        if self.http_client:
            self.http_client.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
