# identitykit/interceptors.py
"""CRUD interceptors and identity write-back.

Interceptors are bound to a lifecycle phase (``When``) and operation (``Why``).
The identity interceptor runs once, after a successful Create, and copies the
instance's identity attributes into its identity record.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Protocol, Sequence

from .ambient import AmbientContext
from .descriptors import AttributeRole, IdentityAttribute
from .exceptions import IdentityWriteError
from .state import IdentityRecord, ResourceState
from .tracing import identity_span

logger = logging.getLogger(__name__)

__all__ = [
    "IdentityInterceptor",
    "Interceptor",
    "InterceptorInvocation",
    "InterceptorOptions",
    "When",
    "Why",
    "new_identity_interceptor",
    "run_interceptors",
    "write_identity",
]


class When(enum.Flag):
    BEFORE = enum.auto()
    AFTER = enum.auto()
    ON_ERROR = enum.auto()
    FINALLY = enum.auto()


class Why(enum.Flag):
    CREATE = enum.auto()
    READ = enum.auto()
    UPDATE = enum.auto()
    DELETE = enum.auto()


@dataclass(frozen=True, slots=True)
class InterceptorOptions:
    """Inputs handed to every interceptor for one lifecycle event."""

    ambient: AmbientContext
    state: ResourceState
    identity: IdentityRecord
    when: When
    why: Why


class Interceptor(Protocol):
    def run(self, options: InterceptorOptions) -> None: ...


@dataclass(frozen=True, slots=True)
class InterceptorInvocation:
    when: When
    why: Why
    interceptor: Interceptor

    def matches(self, when: When, why: Why) -> bool:
        return bool(self.when & when) and bool(self.why & why)


def run_interceptors(
        invocations: Iterable[InterceptorInvocation],
        *,
        when: When,
        why: Why,
        options: InterceptorOptions,
) -> None:
    """Run every invocation bound to ``when``/``why`` in order; the first error propagates."""
    for invocation in invocations:
        if invocation.matches(when, why):
            invocation.interceptor.run(options)


def _read_attribute(state: ResourceState, name: str) -> tuple[Any, bool]:
    if AttributeRole.for_name(name) is AttributeRole.PRIMARY_ID:
        return state.id(), True
    return state.get(name)


@dataclass(frozen=True, slots=True)
class IdentityInterceptor:
    attributes: tuple[str, ...]

    def run(self, options: InterceptorOptions) -> None:
        if not (options.when & When.AFTER and options.why & Why.CREATE):
            return
        write_identity(options.ambient, options.state, options.identity, self.attributes)


def write_identity(
        ambient: AmbientContext,
        state: ResourceState,
        identity: IdentityRecord,
        attributes: Sequence[str],
) -> None:
    """Populate ``identity`` from ``state`` and the ambient context.

    Stops at the first failed write; attributes written before it are kept.
    ``state`` is never modified.
    """
    with identity_span("identitykit.write_back", attributes={"identitykit.attributes": list(attributes)}):
        for name in attributes:
            role = AttributeRole.for_name(name)
            if role is AttributeRole.ACCOUNT_ID:
                value = ambient.account_id()
            elif role is AttributeRole.REGION:
                value = ambient.region()
            else:
                value, ok = _read_attribute(state, name)
                if not ok:
                    logger.debug("identity.write_back.skip attribute=%s (not set)", name)
                    continue

            try:
                identity.set(name, value)
            except Exception as err:
                logger.warning("identity.write_back.failed attribute=%s", name)
                raise IdentityWriteError(name) from err
            logger.debug("identity.write_back.set attribute=%s", name)


def new_identity_interceptor(attributes: Iterable[IdentityAttribute]) -> InterceptorInvocation:
    # TODO: also run after Read and Update once refreshing identities is agreed on.
    return InterceptorInvocation(
        when=When.AFTER,
        why=Why.CREATE,
        interceptor=IdentityInterceptor(attributes=tuple(a.name for a in attributes)),
    )
