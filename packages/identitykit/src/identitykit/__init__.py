# identitykit/__init__.py
"""Resource identity write-back and import resolution.

Exports intentionally avoid wildcard imports to keep the surface explicit.
"""

from .ambient import AmbientContext, StaticAmbientContext
from .arn import ARN, is_arn, parse_arn
from .descriptors import (
    AttributeRole,
    IdentityAttribute,
    IdentityDescriptor,
    RegionConfig,
    global_arn_identity,
    global_parameterized_identity,
    global_singleton_identity,
    regional_arn_identity,
    regional_parameterized_identity,
    regional_singleton_identity,
)
from .exceptions import (
    AccountMismatchError,
    IdentityDescriptorError,
    IdentityKitError,
    IdentityResolutionError,
    IdentityWriteError,
    ImportCancelledError,
    InvalidARNError,
    MissingRequiredIdentityAttributeError,
    PartitionMismatchError,
    RegionMismatchError,
    StateWriteError,
    TypeMismatchError,
)
from .importers import ARNImporter, ParameterizedImporter, SingletonImporter, SingletonStrategy, importer_for
from .interceptors import When, Why, new_identity_interceptor, run_interceptors, write_identity
from .registry import ResourceKind, ResourceKindRegistry
from .schema import IdentitySchemaAttribute, build_identity_schema
from .state import IdentityData, IdentityRecord, ResourceData, ResourceState

__all__ = [
    # Descriptors
    "AttributeRole", "IdentityAttribute", "IdentityDescriptor", "RegionConfig",
    "global_arn_identity", "global_parameterized_identity", "global_singleton_identity",
    "regional_arn_identity", "regional_parameterized_identity", "regional_singleton_identity",
    # Schema
    "IdentitySchemaAttribute", "build_identity_schema",
    # Context and state
    "AmbientContext", "StaticAmbientContext",
    "IdentityData", "IdentityRecord", "ResourceData", "ResourceState",
    # ARN
    "ARN", "is_arn", "parse_arn",
    # Write-back
    "When", "Why", "new_identity_interceptor", "run_interceptors", "write_identity",
    # Import
    "ARNImporter", "ParameterizedImporter", "SingletonImporter", "SingletonStrategy", "importer_for",
    # Registry
    "ResourceKind", "ResourceKindRegistry",
    # Errors
    "AccountMismatchError", "IdentityDescriptorError", "IdentityKitError", "IdentityResolutionError",
    "IdentityWriteError", "ImportCancelledError", "InvalidARNError", "MissingRequiredIdentityAttributeError",
    "PartitionMismatchError", "RegionMismatchError", "StateWriteError", "TypeMismatchError",
]
