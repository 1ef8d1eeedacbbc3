"""Canonical attribute names and partition helpers shared across identitykit."""

import re
from typing import Optional

__all__ = [
    "ATTR_ACCOUNT_ID",
    "ATTR_ARN",
    "ATTR_ID",
    "ATTR_REGION",
    "DEFAULT_PARTITION",
    "KNOWN_PARTITIONS",
    "normalize_region",
    "partition_for_region",
]

ATTR_ACCOUNT_ID = "account_id"
ATTR_REGION = "region"
ATTR_ARN = "arn"
ATTR_ID = "id"

DEFAULT_PARTITION = "aws"

# Longest prefix first: "us-isob-" must win over "us-iso-".
_PARTITION_PREFIXES: tuple[tuple[str, str], ...] = (
    ("us-isob-", "aws-iso-b"),
    ("us-iso-", "aws-iso"),
    ("us-gov-", "aws-us-gov"),
    ("cn-", "aws-cn"),
)

KNOWN_PARTITIONS: frozenset[str] = frozenset({DEFAULT_PARTITION, *(p for _, p in _PARTITION_PREFIXES)})

_REGION_RE = re.compile(r"^[a-z]{2}(-[a-z]+)+-\d+$")


def partition_for_region(region: Optional[str]) -> str:
    """Return the partition a region belongs to, defaulting to ``aws``."""
    if not region:
        return DEFAULT_PARTITION
    for prefix, partition in _PARTITION_PREFIXES:
        if region.startswith(prefix):
            return partition
    return DEFAULT_PARTITION


def normalize_region(value: str) -> str | None:
    """Trim and lowercase a region name.

    Returns ``None`` when the result is not shaped like a region
    (``us-east-1``, ``us-gov-west-1``, ...).
    """
    candidate = value.strip().lower()
    if not _REGION_RE.match(candidate):
        return None
    return candidate
