from .base import AxiomServiceBase
from .datasets import AxiomDatasetService

__all__ = [
    "AxiomServiceBase",
    "AxiomDatasetService",
]
