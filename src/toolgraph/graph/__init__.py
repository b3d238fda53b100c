"""Graph transformation engine value types."""

from .composed import ComposedKey, ComposedResult, compose
from .keys import ComputeKey, ComputeResult

__all__ = ["ComposedKey", "ComposedResult", "ComputeKey", "ComputeResult", "compose"]
