# identitykit/arn.py
"""Minimal ARN parsing.

``arn:partition:service:region:account-id:resource``. Only the shape is checked
here; consistency with the ambient context is the importers' job.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .exceptions import InvalidARNError

__all__ = ["ARN", "is_arn", "parse_arn"]

_PREFIX = "arn"
_SECTIONS = 6


@dataclass(frozen=True, slots=True)
class ARN:
    partition: str
    service: str
    region: str
    account_id: str
    resource: str

    def __str__(self) -> str:
        return ":".join((_PREFIX, self.partition, self.service, self.region, self.account_id, self.resource))


def parse_arn(value: Any) -> ARN:
    """Parse ``value`` into an :class:`ARN` or raise :class:`InvalidARNError`."""
    if not isinstance(value, str):
        raise InvalidARNError(value, f"expected string, got {type(value).__name__}")
    sections = value.split(":", _SECTIONS - 1)
    if len(sections) != _SECTIONS:
        raise InvalidARNError(value, "not enough sections")
    prefix, partition, service, region, account_id, resource = sections
    if prefix != _PREFIX:
        raise InvalidARNError(value, "invalid prefix")
    if not partition:
        raise InvalidARNError(value, "invalid partition")
    if not service:
        raise InvalidARNError(value, "invalid service")
    if not resource:
        raise InvalidARNError(value, "invalid resource")
    return ARN(partition=partition, service=service, region=region, account_id=account_id, resource=resource)


def is_arn(value: Any) -> bool:
    try:
        parse_arn(value)
    except InvalidARNError:
        return False
    return True
