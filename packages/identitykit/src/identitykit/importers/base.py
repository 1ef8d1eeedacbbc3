# identitykit/importers/base.py
"""Shared importer plumbing: the import entry point and value checks."""
from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from asgiref.sync import sync_to_async

from ..ambient import AmbientContext
from ..constants import normalize_region, partition_for_region
from ..descriptors import AttributeRole, RegionConfig
from ..exceptions import (
    AccountMismatchError,
    ImportCancelledError,
    RegionMismatchError,
    TypeMismatchError,
)
from ..state import IdentityRecord, ResourceState
from ..tracing import identity_span

logger = logging.getLogger(__name__)

__all__ = [
    "BaseImporter",
    "check_account",
    "raise_if_cancelled",
    "require_text",
    "set_attribute",
    "validate_region",
]


def raise_if_cancelled(cancel: Optional[threading.Event]) -> None:
    if cancel is not None and cancel.is_set():
        raise ImportCancelledError("import cancelled before resolution completed")


def require_text(attribute: str, value: Any) -> str:
    """Return ``value`` if it is a string, else raise :class:`TypeMismatchError`."""
    if not isinstance(value, str):
        raise TypeMismatchError(attribute, value)
    return value


def set_attribute(state: ResourceState, name: str, value: str) -> None:
    if AttributeRole.for_name(name) is AttributeRole.PRIMARY_ID:
        state.set_id(value)
    else:
        state.set(name, value)


def check_account(attribute: str, value: Any, ambient: AmbientContext) -> str:
    """Require ``value`` to be the configured account ID."""
    account_id = require_text(attribute, value)
    expected = ambient.account_id()
    if account_id != expected:
        logger.warning("identity.import.account_mismatch expected=%s actual=%s", expected, account_id)
        raise AccountMismatchError(expected, account_id, attribute=attribute)
    return account_id


def validate_region(
        attribute: str,
        value: str,
        ambient: AmbientContext,
        region_config: RegionConfig,
) -> str:
    """Normalize ``value`` and check it against the configured Region rules.

    A Region other than the configured one is accepted only when per-resource
    override is enabled and, if so configured, it lies in the configured partition.
    """
    expected = ambient.region()
    region = normalize_region(value)
    if region is None:
        raise RegionMismatchError(expected, value, attribute=attribute)
    if region == expected:
        return region
    if not region_config.override_enabled:
        logger.warning("identity.import.region_mismatch expected=%s actual=%s", expected, region)
        raise RegionMismatchError(expected, region, attribute=attribute)
    if region_config.validate_override_in_partition and partition_for_region(region) != ambient.partition():
        logger.warning(
            "identity.import.region_not_in_partition partition=%s region=%s", ambient.partition(), region
        )
        raise RegionMismatchError(expected, region, attribute=attribute)
    return region


class BaseImporter(ABC):
    """Reconstructs resource state from an import ID or an identity record.

    A non-empty ``import_id`` is the legacy import string; an empty one means
    the identity record is the input. Resolution stops at the first error and
    is not transactional: writes made before the error stay in ``state``.
    """

    span_name: ClassVar[str] = "identitykit.import"

    def import_state(
            self,
            import_id: str,
            *,
            state: ResourceState,
            identity: IdentityRecord,
            ambient: AmbientContext,
            cancel: Optional[threading.Event] = None,
    ) -> ResourceState:
        import_id = import_id or ""
        attrs = {"identitykit.import.legacy": bool(import_id), **self.span_attributes()}
        with identity_span(self.span_name, attributes=attrs):
            raise_if_cancelled(cancel)
            self._resolve(import_id, state=state, identity=identity, ambient=ambient, cancel=cancel)
            raise_if_cancelled(cancel)
        return state

    async def aimport_state(
            self,
            import_id: str,
            *,
            state: ResourceState,
            identity: IdentityRecord,
            ambient: AmbientContext,
            cancel: Optional[threading.Event] = None,
    ) -> ResourceState:
        """Async wrapper around :meth:`import_state`."""
        return await sync_to_async(self.import_state)(
            import_id, state=state, identity=identity, ambient=ambient, cancel=cancel
        )

    def span_attributes(self) -> dict[str, Any]:
        return {}

    @abstractmethod
    def _resolve(
            self,
            import_id: str,
            *,
            state: ResourceState,
            identity: IdentityRecord,
            ambient: AmbientContext,
            cancel: Optional[threading.Event],
    ) -> None:
        ...
