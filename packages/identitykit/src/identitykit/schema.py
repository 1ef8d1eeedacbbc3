# identitykit/schema.py
"""Host-facing identity schema derived from a descriptor."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

from .descriptors import IdentityAttribute, IdentityDescriptor

__all__ = ["IdentitySchemaAttribute", "build_identity_schema"]


@dataclass(frozen=True, slots=True)
class IdentitySchemaAttribute:
    """Schema entry for one identity attribute. Identity values are always strings."""

    required_for_import: bool = False
    optional_for_import: bool = False
    type: Literal["string"] = "string"

    @classmethod
    def from_attribute(cls, attribute: IdentityAttribute) -> IdentitySchemaAttribute:
        if attribute.required:
            return cls(required_for_import=True)
        return cls(optional_for_import=True)


def build_identity_schema(
        attributes: IdentityDescriptor | Iterable[IdentityAttribute],
) -> dict[str, IdentitySchemaAttribute]:
    """Map each identity attribute name to its schema entry, in declaration order."""
    if isinstance(attributes, IdentityDescriptor):
        attributes = attributes.attributes
    return {attr.name: IdentitySchemaAttribute.from_attribute(attr) for attr in attributes}
