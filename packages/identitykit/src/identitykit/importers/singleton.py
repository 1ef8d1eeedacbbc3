# identitykit/importers/singleton.py
"""Import for singleton resources: one instance per account, or per account and Region."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Optional

from ..ambient import AmbientContext
from ..constants import ATTR_ACCOUNT_ID, ATTR_REGION
from ..descriptors import RegionConfig
from ..exceptions import MissingRequiredIdentityAttributeError
from ..state import IdentityRecord, ResourceState
from .base import BaseImporter, check_account, require_text, validate_region

logger = logging.getLogger(__name__)

__all__ = ["SingletonImporter", "SingletonStrategy", "GLOBAL_SINGLETON", "REGIONAL_SINGLETON"]


@dataclass(frozen=True, slots=True)
class SingletonStrategy:
    """Scope of a singleton and whether a missing scope falls back to the ambient one."""

    global_: bool
    requires_scope_default: bool = True

    @property
    def scope_attribute(self) -> str:
        return ATTR_ACCOUNT_ID if self.global_ else ATTR_REGION

    def ambient_scope(self, ambient: AmbientContext) -> str:
        return ambient.account_id() if self.global_ else ambient.region()


GLOBAL_SINGLETON = SingletonStrategy(global_=True)
REGIONAL_SINGLETON = SingletonStrategy(global_=False)


class SingletonImporter(BaseImporter):
    """Resolve the scope value and use it as the primary identifier.

    Uniqueness per scope is the caller's storage concern; this importer cannot
    tell whether the singleton was already imported.
    """

    span_name = "identitykit.import.singleton"

    def __init__(self, strategy: SingletonStrategy, *, region_config: Optional[RegionConfig] = None) -> None:
        self.strategy = strategy
        self.region_config = region_config or RegionConfig.default()

    def span_attributes(self) -> dict[str, Any]:
        return {"identitykit.global": self.strategy.global_}

    def _resolve(
            self,
            import_id: str,
            *,
            state: ResourceState,
            identity: IdentityRecord,
            ambient: AmbientContext,
            cancel: Optional[threading.Event],
    ) -> None:
        if import_id:
            self._resolve_import_id(import_id, state, ambient)
            return

        account_raw, present = identity.get(ATTR_ACCOUNT_ID)
        account_id = check_account(ATTR_ACCOUNT_ID, account_raw, ambient) if present else None

        if self.strategy.global_:
            scope = account_id
        else:
            region_raw, present = identity.get(ATTR_REGION)
            scope = None
            if present:
                scope = validate_region(ATTR_REGION, require_text(ATTR_REGION, region_raw), ambient, self.region_config)

        if scope is None:
            if not self.strategy.requires_scope_default:
                raise MissingRequiredIdentityAttributeError(self.strategy.scope_attribute)
            scope = self.strategy.ambient_scope(ambient)
            logger.debug("identity.import.singleton.default %s=%s", self.strategy.scope_attribute, scope)

        state.set(self.strategy.scope_attribute, scope)
        state.set_id(scope)

    def _resolve_import_id(self, import_id: str, state: ResourceState, ambient: AmbientContext) -> None:
        if self.strategy.global_:
            # Historically, Import ID values for global singletons have never been validated.
            state.set(ATTR_ACCOUNT_ID, import_id)
            state.set_id(import_id)
            return
        region = validate_region(ATTR_REGION, import_id, ambient, self.region_config)
        state.set(ATTR_REGION, region)
        state.set_id(region)
