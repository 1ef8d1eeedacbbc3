# identitykit/registry/base.py


import logging
from threading import RLock

from asgiref.sync import sync_to_async

from ..exceptions import RegistryCollisionError, RegistryDuplicateError, RegistryFrozenError, RegistryLookupError
from .records import ResourceKind

logger = logging.getLogger(__name__)


class ResourceKindRegistry:
    """Thread-safe registry of resource kinds keyed by type name."""

    def __init__(self) -> None:
        self._lock = RLock()
        self._store: dict[str, ResourceKind] = {}
        self._frozen = False

    def _register(self, kind: ResourceKind) -> None:
        key = kind.type_name.strip()

        with self._lock:
            if self._frozen:
                raise RegistryFrozenError("Registry is frozen")
            if key in self._store:
                if self._store[key] == kind:
                    raise RegistryDuplicateError(f"Resource kind already registered: {key}")
                raise RegistryCollisionError(f"Type name already registered to a different resource kind: {key}")
            self._store[key] = kind

    # --- registration ---

    def register(self, kind: ResourceKind, *, strict: bool = False) -> None:
        """
        Register a resource kind.

        Registering an equal kind twice is ignored (logged at debug) unless
        `strict` is set, in which case `RegistryDuplicateError` is raised.

        :param kind: The resource kind to register.
        :param strict: Raise on duplicate registration instead of ignoring it.
        :raises RegistryCollisionError: If a different kind uses the same type name.
        :raises RegistryFrozenError: If the registry has been frozen.
        """
        try:
            self._register(kind)
        except RegistryDuplicateError:
            if strict:
                raise
            logger.debug("Duplicate registration ignored: %s", kind.type_name)

    async def aregister(self, kind: ResourceKind, *, strict: bool = False) -> None:
        """Async wrapper around `register`."""
        return await sync_to_async(self.register)(kind, strict=strict)

    # --- retrieval ---

    def get(self, type_name: str) -> ResourceKind:
        """
        Retrieve the resource kind registered under `type_name`.

        :raises RegistryLookupError: If no kind is registered under that name.
        """
        with self._lock:
            try:
                return self._store[type_name.strip()]
            except KeyError as err:
                raise RegistryLookupError(f"Resource kind {type_name!r} not found or not registered") from err

    async def aget(self, type_name: str) -> ResourceKind:
        """Async wrapper around `get`."""
        return await sync_to_async(self.get)(type_name)

    def try_get(self, type_name: str) -> ResourceKind | None:
        try:
            return self.get(type_name)
        except RegistryLookupError:
            return None

    # --- inspection ---

    def count(self) -> int:
        with self._lock:
            return len(self._store)

    def type_names(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(sorted(self._store))

    # --- lifecycle ---

    def freeze(self) -> None:
        with self._lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen


__all__ = ["ResourceKindRegistry"]
