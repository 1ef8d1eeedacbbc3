from .base import ResourceKindRegistry
from .records import ResourceKind

__all__ = ["ResourceKind", "ResourceKindRegistry"]
