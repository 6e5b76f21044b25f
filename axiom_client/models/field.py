from .base import AxiomModel


class Field(AxiomModel):
    """A field of a dataset, as inferred from ingested events."""

    name: str
    description: str | None = None
    type: str | None = None
    unit: str | None = None
    hidden: bool = False


class FieldUpdateRequest(AxiomModel):
    """Body of a field metadata update."""

    description: str | None = None
    unit: str | None = None
    hidden: bool = False
