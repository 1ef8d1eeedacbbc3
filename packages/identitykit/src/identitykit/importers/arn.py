# identitykit/importers/arn.py
"""Import for resources identified by an ARN."""
from __future__ import annotations

import logging
import threading
from typing import Any, Optional

from ..ambient import AmbientContext
from ..arn import ARN, parse_arn
from ..constants import ATTR_ARN, ATTR_REGION, normalize_region
from ..descriptors import RegionConfig
from ..exceptions import MissingRequiredIdentityAttributeError, PartitionMismatchError, RegionMismatchError
from ..state import IdentityRecord, ResourceState
from .base import BaseImporter, raise_if_cancelled, require_text, set_attribute, validate_region

logger = logging.getLogger(__name__)

__all__ = ["ARNImporter"]


class ARNImporter(BaseImporter):
    """Parse the ARN, check it against the ambient scope, and write it to state.

    Global ARNs must be in the configured partition. Regional ARNs must name a
    Region that either matches the Region already set on the resource or passes
    the :class:`RegionConfig` rules; the ARN's Region is then written to state.
    """

    span_name = "identitykit.import.arn"

    def __init__(
            self,
            *,
            global_: bool,
            arn_attribute: str = ATTR_ARN,
            region_config: Optional[RegionConfig] = None,
    ) -> None:
        self.global_ = global_
        self.arn_attribute = arn_attribute
        self.region_config = region_config or RegionConfig.default()

    def span_attributes(self) -> dict[str, Any]:
        return {"identitykit.global": self.global_, "identitykit.arn_attribute": self.arn_attribute}

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
            raw = import_id
        else:
            value, present = identity.get(self.arn_attribute)
            if not present:
                raise MissingRequiredIdentityAttributeError(self.arn_attribute)
            raw = require_text(self.arn_attribute, value)

        arn = parse_arn(raw)
        raise_if_cancelled(cancel)

        if self.global_:
            self._validate_partition(arn, ambient)
        else:
            region = self._validate_region(arn, state, ambient)
            state.set(ATTR_REGION, region)

        set_attribute(state, self.arn_attribute, raw)
        state.set_id(raw)
        logger.debug("identity.import.arn arn=%s global=%s", raw, self.global_)

    def _validate_partition(self, arn: ARN, ambient: AmbientContext) -> None:
        expected = ambient.partition()
        if arn.partition != expected:
            logger.warning("identity.import.partition_mismatch expected=%s actual=%s", expected, arn.partition)
            raise PartitionMismatchError(expected, arn.partition, attribute=self.arn_attribute)

    def _validate_region(self, arn: ARN, state: ResourceState, ambient: AmbientContext) -> str:
        # A Region set on the resource itself is the override the ARN has to match.
        raw, present = state.get(ATTR_REGION)
        if present:
            override = validate_region(ATTR_REGION, require_text(ATTR_REGION, raw), ambient, self.region_config)
            if normalize_region(arn.region) != override:
                logger.warning("identity.import.region_mismatch expected=%s actual=%s", override, arn.region)
                raise RegionMismatchError(override, arn.region, attribute=self.arn_attribute)
            return override
        return validate_region(self.arn_attribute, arn.region, ambient, self.region_config)
