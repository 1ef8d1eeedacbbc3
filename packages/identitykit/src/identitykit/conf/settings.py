"""Ambient configuration: the account, Region and partition identitykit resolves against."""
from __future__ import annotations

import os
import re
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ..constants import KNOWN_PARTITIONS, normalize_region

__all__ = ["AMBIENT_ENV_PREFIX", "AmbientSettings"]

AMBIENT_ENV_PREFIX = "IDENTITYKIT_AMBIENT"

_ACCOUNT_ID_RE = re.compile(r"^\d{12}$")


class AmbientSettings(BaseModel):
    """Validated ``AMBIENT_*`` settings.

    Every key is optional here; :meth:`StaticAmbientContext.from_settings`
    decides what is required to build a context.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    account_id: Optional[str] = None
    region: Optional[str] = None
    partition: Optional[str] = None

    @field_validator("account_id")
    @classmethod
    def _validate_account_id(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if not _ACCOUNT_ID_RE.match(value):
            raise ValueError(f"account ID must be 12 digits (got {value!r})")
        return value

    @field_validator("region")
    @classmethod
    def _validate_region(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        region = normalize_region(value)
        if region is None:
            raise ValueError(f"not a Region name: {value!r}")
        return region

    @field_validator("partition")
    @classmethod
    def _validate_partition(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        if value not in KNOWN_PARTITIONS:
            raise ValueError(f"unknown partition {value!r} (expected one of {sorted(KNOWN_PARTITIONS)})")
        return value

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], *, prefix: str = "AMBIENT") -> AmbientSettings:
        """Read ``<prefix>_ACCOUNT_ID``, ``<prefix>_REGION`` and ``<prefix>_PARTITION``.

        Empty values count as unset.
        """
        return cls(
            account_id=mapping.get(f"{prefix}_ACCOUNT_ID") or None,
            region=mapping.get(f"{prefix}_REGION") or None,
            partition=mapping.get(f"{prefix}_PARTITION") or None,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> AmbientSettings:
        """Read ``IDENTITYKIT_AMBIENT_*`` environment variables."""
        return cls.from_mapping(os.environ if environ is None else environ, prefix=AMBIENT_ENV_PREFIX)
