from pydantic import BaseModel, Field


class AxiomModel(BaseModel):
    """
    Base for records exchanged with the Axiom API.

    Records are immutable once decoded; attributes are snake_case and
    populated from the camelCase wire names through aliases.
    """

    model_config = {"populate_by_name": True, "frozen": True}

    def to_payload(self) -> dict:
        """Serialize to a JSON-ready dict using wire names."""
        return self.model_dump(mode="json", by_alias=True)


class ErrorEnvelope(BaseModel):
    """Error body returned by the API for failed requests."""

    message: str = Field(..., description="Error message")
