# identitykit/descriptors.py
"""Declarative identity descriptors.

A descriptor lists the attributes that make up a resource kind's identity and
flags the special kinds (global, singleton, ARN). Descriptors are immutable and
validated once, when the resource kind is declared.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Optional

from .constants import ATTR_ACCOUNT_ID, ATTR_ARN, ATTR_ID, ATTR_REGION
from .exceptions import IdentityDescriptorError

__all__ = [
    "AttributeRole",
    "IdentityAttribute",
    "IdentityDescriptor",
    "RegionConfig",
    "global_arn_identity",
    "global_parameterized_identity",
    "global_singleton_identity",
    "regional_arn_identity",
    "regional_parameterized_identity",
    "regional_singleton_identity",
]


class AttributeRole(enum.Enum):
    """How an identity attribute is resolved."""

    ACCOUNT_ID = "account_id"
    REGION = "region"
    PRIMARY_ID = "id"
    PLAIN = "plain"

    @classmethod
    def for_name(cls, name: str) -> "AttributeRole":
        return _ROLES_BY_NAME.get(name, cls.PLAIN)


_ROLES_BY_NAME = {
    ATTR_ACCOUNT_ID: AttributeRole.ACCOUNT_ID,
    ATTR_REGION: AttributeRole.REGION,
    ATTR_ID: AttributeRole.PRIMARY_ID,
}


@dataclass(frozen=True, slots=True)
class IdentityAttribute:
    name: str
    required: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise IdentityDescriptorError(f"identity attribute name must be a non-empty string (got {self.name!r})")

    @property
    def role(self) -> AttributeRole:
        return AttributeRole.for_name(self.name)

    @classmethod
    def require(cls, name: str) -> IdentityAttribute:
        return cls(name=name, required=True)

    @classmethod
    def optional(cls, name: str) -> IdentityAttribute:
        return cls(name=name, required=False)


@dataclass(frozen=True, slots=True)
class RegionConfig:
    """Per-resource Region information.

    ``override_enabled``: may a resource live outside the configured Region?
    ``validate_override_in_partition``: must such a Region belong to the configured partition?
    """

    override_enabled: bool = True
    validate_override_in_partition: bool = True

    @classmethod
    def default(cls) -> RegionConfig:
        return cls()

    @classmethod
    def disabled(cls) -> RegionConfig:
        return cls(override_enabled=False, validate_override_in_partition=False)


@dataclass(frozen=True, slots=True)
class IdentityDescriptor:
    """Immutable description of a resource kind's identity.

    ``id_shadow_attribute`` names the attribute whose resolved value is mirrored
    into the primary identifier. It is explicit rather than inferred from names.
    """

    attributes: tuple[IdentityAttribute, ...] = ()
    global_: bool = False
    singleton: bool = False
    is_arn: bool = False
    arn_attribute: str = ""
    id_shadow_attribute: Optional[str] = None

    # ------------------- Validation -------------------
    def __post_init__(self) -> None:
        # Accept any iterable of attributes but store a tuple.
        object.__setattr__(self, "attributes", tuple(self.attributes))

        seen: set[str] = set()
        for attr in self.attributes:
            if not isinstance(attr, IdentityAttribute):
                raise IdentityDescriptorError(f"expected IdentityAttribute, got {type(attr).__name__}")
            if attr.name in seen:
                raise IdentityDescriptorError(f"duplicate identity attribute {attr.name!r}")
            seen.add(attr.name)

        if self.is_arn and self.singleton:
            raise IdentityDescriptorError("an identity cannot be both ARN-based and a singleton")
        if self.is_arn:
            self._validate_arn()
        if self.singleton:
            self._validate_singleton()

        shadow = self.id_shadow_attribute
        if shadow is not None:
            if shadow not in seen:
                raise IdentityDescriptorError(
                    f"shadow attribute {shadow!r} is not one of the identity attributes {sorted(seen)!r}"
                )
            if AttributeRole.for_name(shadow) in (AttributeRole.ACCOUNT_ID, AttributeRole.REGION):
                raise IdentityDescriptorError(f"scope attribute {shadow!r} cannot shadow the primary identifier")

    def _validate_arn(self) -> None:
        if not self.arn_attribute:
            raise IdentityDescriptorError("ARN identities must name their ARN attribute")
        names = [a.name for a in self.attributes]
        if names != [self.arn_attribute]:
            raise IdentityDescriptorError(
                f"ARN identities must declare exactly the ARN attribute {self.arn_attribute!r} (got {names!r})"
            )
        if not self.attributes[0].required:
            raise IdentityDescriptorError(f"ARN attribute {self.arn_attribute!r} must be required")

    def _validate_singleton(self) -> None:
        if len(self.attributes) > 1:
            raise IdentityDescriptorError("singleton identities declare at most one scope attribute")
        scope = ATTR_ACCOUNT_ID if self.global_ else ATTR_REGION
        for attr in self.attributes:
            if attr.name != scope:
                raise IdentityDescriptorError(
                    f"singleton scope attribute must be {scope!r} (got {attr.name!r})"
                )

    # ------------------- Accessors -------------------
    @property
    def names(self) -> tuple[str, ...]:
        return tuple(a.name for a in self.attributes)

    @property
    def is_parameterized(self) -> bool:
        return not (self.is_arn or self.singleton)

    def get(self, name: str) -> IdentityAttribute | None:
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    def __contains__(self, name: object) -> bool:
        return any(a.name == name for a in self.attributes)


# -----------------------------------------------------------------------------
# Constructors
# -----------------------------------------------------------------------------

def _arn_identity(global_: bool, name: str) -> IdentityDescriptor:
    return IdentityDescriptor(
        attributes=(IdentityAttribute.require(name),),
        global_=global_,
        is_arn=True,
        arn_attribute=name,
        id_shadow_attribute=name,
    )


def global_arn_identity(name: str = ATTR_ARN) -> IdentityDescriptor:
    return _arn_identity(True, name)


def regional_arn_identity(name: str = ATTR_ARN) -> IdentityDescriptor:
    return _arn_identity(False, name)


def global_singleton_identity() -> IdentityDescriptor:
    return IdentityDescriptor(
        attributes=(IdentityAttribute.optional(ATTR_ACCOUNT_ID),),
        global_=True,
        singleton=True,
    )


def regional_singleton_identity() -> IdentityDescriptor:
    return IdentityDescriptor(
        attributes=(IdentityAttribute.optional(ATTR_REGION),),
        global_=False,
        singleton=True,
    )


def _coerce_attributes(attributes: Iterable[IdentityAttribute | str]) -> list[IdentityAttribute]:
    # Bare names are required attributes.
    return [a if isinstance(a, IdentityAttribute) else IdentityAttribute.require(a) for a in attributes]


def global_parameterized_identity(
        *attributes: IdentityAttribute | str,
        id_shadow_attribute: Optional[str] = None,
) -> IdentityDescriptor:
    """Account-scoped identity: ``account_id`` (optional) followed by ``attributes``."""
    return IdentityDescriptor(
        attributes=(IdentityAttribute.optional(ATTR_ACCOUNT_ID), *_coerce_attributes(attributes)),
        global_=True,
        id_shadow_attribute=id_shadow_attribute,
    )


def regional_parameterized_identity(
        *attributes: IdentityAttribute | str,
        id_shadow_attribute: Optional[str] = None,
) -> IdentityDescriptor:
    """Region-scoped identity: ``account_id`` and ``region`` (optional) followed by ``attributes``."""
    return IdentityDescriptor(
        attributes=(
            IdentityAttribute.optional(ATTR_ACCOUNT_ID),
            IdentityAttribute.optional(ATTR_REGION),
            *_coerce_attributes(attributes),
        ),
        global_=False,
        id_shadow_attribute=id_shadow_attribute,
    )
