# identitykit/importers/factory.py
from __future__ import annotations

from typing import Optional

from ..descriptors import IdentityDescriptor, RegionConfig
from .arn import ARNImporter
from .base import BaseImporter
from .parameterized import ParameterizedImporter
from .singleton import SingletonImporter, SingletonStrategy

__all__ = ["importer_for"]


def importer_for(descriptor: IdentityDescriptor, region_config: Optional[RegionConfig] = None) -> BaseImporter:
    """Select the importer matching the descriptor's identity kind."""
    if descriptor.is_arn:
        return ARNImporter(
            global_=descriptor.global_,
            arn_attribute=descriptor.arn_attribute,
            region_config=region_config,
        )
    if descriptor.singleton:
        return SingletonImporter(SingletonStrategy(global_=descriptor.global_), region_config=region_config)
    return ParameterizedImporter(descriptor)
