# identitykit/ambient.py
"""Ambient account/region context supplied by the caller's configuration."""
from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, field_validator

from .conf import AmbientSettings
from .constants import partition_for_region

__all__ = ["AmbientContext", "StaticAmbientContext"]


@runtime_checkable
class AmbientContext(Protocol):
    """Read-only capability exposing the configured account and region.

    Implementations are expected to be cheap and local; they are called on every
    resolution and never cached by identitykit.
    """

    def account_id(self) -> str: ...

    def region(self) -> str: ...

    def partition(self) -> str: ...


class StaticAmbientContext(BaseModel):
    """Ambient context built from already-resolved configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    account_id_: str
    region_: str
    partition_: Optional[str] = None

    def __init__(self, account_id: str, region: str, partition: Optional[str] = None, **data: Any) -> None:
        super().__init__(account_id_=account_id, region_=region, partition_=partition, **data)

    @field_validator("account_id_", "region_")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("ambient account ID and region cannot be empty")
        return value

    def account_id(self) -> str:
        return self.account_id_

    def region(self) -> str:
        return self.region_

    def partition(self) -> str:
        return self.partition_ or partition_for_region(self.region_)

    @classmethod
    def from_settings(cls, settings: AmbientSettings | Mapping[str, Any]) -> StaticAmbientContext:
        """Build from validated ambient settings, or the ``AMBIENT_*`` keys of a mapping.

        Account ID and Region are required here even though the settings allow them unset.
        """
        if not isinstance(settings, AmbientSettings):
            settings = AmbientSettings.from_mapping(settings)
        return cls(
            account_id=settings.account_id or "",
            region=settings.region or "",
            partition=settings.partition,
        )
