# identitykit/state.py
"""Per-instance state stores.

``ResourceState`` and ``IdentityRecord`` are the capabilities the host hands to
identitykit for the duration of one operation. ``ResourceData`` and
``IdentityData`` are in-memory implementations used by callers without their
own state management, and by the tests.
"""
from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping, Optional, Protocol, runtime_checkable

from .constants import ATTR_ID
from .exceptions import StateWriteError

__all__ = ["IdentityData", "IdentityRecord", "ResourceData", "ResourceState"]


@runtime_checkable
class IdentityRecord(Protocol):
    def get(self, name: str) -> tuple[Any, bool]: ...

    def set(self, name: str, value: Any) -> None: ...


@runtime_checkable
class ResourceState(IdentityRecord, Protocol):
    def id(self) -> str: ...

    def set_id(self, value: str) -> None: ...


def _present(value: Any) -> bool:
    # Zero values count as absent.
    return value is not None and value != ""


class _AttributeStore:
    """Key/value store with an optional set of writable names."""

    def __init__(
            self,
            values: Optional[Mapping[str, Any]] = None,
            *,
            allowed: Optional[Iterable[str]] = None,
    ) -> None:
        self._allowed = frozenset(allowed) if allowed is not None else None
        self._values: dict[str, Any] = {}
        for name, value in (values or {}).items():
            self.set(name, value)

    def get(self, name: str) -> tuple[Any, bool]:
        value = self._values.get(name)
        return value, _present(value)

    def set(self, name: str, value: Any) -> None:
        if self._allowed is not None and name not in self._allowed:
            raise StateWriteError(name)
        self._values[name] = value

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}({self._values!r})"


class IdentityData(_AttributeStore):
    """In-memory identity record."""


class ResourceData(_AttributeStore):
    """In-memory resource state with a distinguished primary identifier."""

    def __init__(
            self,
            values: Optional[Mapping[str, Any]] = None,
            *,
            id: str = "",
            allowed: Optional[Iterable[str]] = None,
    ) -> None:
        self._id = id
        super().__init__(values, allowed=allowed)

    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> None:
        self._id = value

    def as_dict(self) -> dict[str, Any]:
        data = super().as_dict()
        data[ATTR_ID] = self._id
        return data
