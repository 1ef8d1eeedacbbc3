"""Resource kind records.

A :class:`ResourceKind` binds a resource type name to its identity descriptor
and Region configuration, and wires the descriptor into the schema builder,
the importer selection and the write-back interceptor.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..descriptors import IdentityDescriptor, RegionConfig
from ..importers import BaseImporter, importer_for
from ..interceptors import InterceptorInvocation, new_identity_interceptor
from ..schema import IdentitySchemaAttribute, build_identity_schema


@dataclass(frozen=True, slots=True)
class ResourceKind:
    """Immutable registration payload."""

    type_name: str
    identity: IdentityDescriptor
    region: RegionConfig = field(default_factory=RegionConfig.default)

    def __post_init__(self) -> None:
        if not isinstance(self.type_name, str) or not self.type_name.strip():
            raise ValueError("resource type name must be a non-empty string")

    def schema(self) -> dict[str, IdentitySchemaAttribute]:
        return build_identity_schema(self.identity)

    def importer(self) -> BaseImporter:
        return importer_for(self.identity, self.region)

    def interceptors(self) -> tuple[InterceptorInvocation, ...]:
        return (new_identity_interceptor(self.identity.attributes),)


__all__ = ["ResourceKind"]
