# identitykit/importers/parameterized.py
"""Attribute-by-attribute import for parameterized identities.

Each identity attribute is resolved by the handler registered for its
:class:`~identitykit.descriptors.AttributeRole`:

- ``ACCOUNT_ID``: validated against the ambient account, never written.
- ``REGION``: copied to ``state["region"]`` when present; no default.
- ``PRIMARY_ID`` / ``PLAIN``: required check, then copied to state.

After an attribute resolves to a value, it is mirrored into the primary
identifier when it is the descriptor's shadow attribute.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

from ..ambient import AmbientContext
from ..constants import ATTR_REGION
from ..descriptors import AttributeRole, IdentityAttribute, IdentityDescriptor
from ..exceptions import MissingRequiredIdentityAttributeError
from ..state import IdentityRecord, ResourceState
from .base import BaseImporter, check_account, raise_if_cancelled, require_text, set_attribute

logger = logging.getLogger(__name__)

__all__ = ["ParameterizedImporter"]

# (attribute, raw value, present, state, ambient) -> resolved value or None
RoleHandler = Callable[[IdentityAttribute, Any, bool, ResourceState, AmbientContext], Optional[str]]


def _resolve_account_id(attr, raw, present, state, ambient) -> Optional[str]:
    if present:
        check_account(attr.name, raw, ambient)
    return None


def _resolve_region(attr, raw, present, state, ambient) -> Optional[str]:
    if not present:
        return None
    region = require_text(attr.name, raw)
    state.set(ATTR_REGION, region)
    return region


def _resolve_value(attr, raw, present, state, ambient) -> Optional[str]:
    if not present:
        if attr.required:
            raise MissingRequiredIdentityAttributeError(attr.name)
        return None
    value = require_text(attr.name, raw)
    set_attribute(state, attr.name, value)
    return value


_ROLE_HANDLERS: dict[AttributeRole, RoleHandler] = {
    AttributeRole.ACCOUNT_ID: _resolve_account_id,
    AttributeRole.REGION: _resolve_region,
    AttributeRole.PRIMARY_ID: _resolve_value,
    AttributeRole.PLAIN: _resolve_value,
}

_unhandled = set(AttributeRole) - set(_ROLE_HANDLERS)
if _unhandled:  # pragma: no cover
    raise RuntimeError(f"no import handler for attribute roles: {sorted(r.name for r in _unhandled)}")


class ParameterizedImporter(BaseImporter):
    span_name = "identitykit.import.parameterized"

    def __init__(self, descriptor: IdentityDescriptor) -> None:
        self.descriptor = descriptor

    def span_attributes(self) -> dict[str, Any]:
        return {"identitykit.attributes": list(self.descriptor.names)}

    def _resolve(
            self,
            import_id: str,
            *,
            state: ResourceState,
            identity: IdentityRecord,
            ambient: AmbientContext,
            cancel: Optional[threading.Event],
    ) -> None:
        shadow = self.descriptor.id_shadow_attribute
        if import_id:
            state.set_id(import_id)
            if shadow is not None and AttributeRole.for_name(shadow) is not AttributeRole.PRIMARY_ID:
                state.set(shadow, import_id)
            logger.debug("identity.import.legacy id=%s shadow=%s", import_id, shadow)
            return

        for attr in self.descriptor.attributes:
            raise_if_cancelled(cancel)
            raw, present = identity.get(attr.name)
            value = _ROLE_HANDLERS[attr.role](attr, raw, present, state, ambient)
            if value is not None and attr.name == shadow:
                state.set_id(value)
            logger.debug("identity.import.attribute name=%s present=%s", attr.name, present)
