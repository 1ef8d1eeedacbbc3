# identitykit/importers/__init__.py
"""Import resolvers: legacy import ID or identity record → resource state."""

from .arn import ARNImporter
from .base import BaseImporter
from .factory import importer_for
from .parameterized import ParameterizedImporter
from .singleton import GLOBAL_SINGLETON, REGIONAL_SINGLETON, SingletonImporter, SingletonStrategy

__all__ = [
    "ARNImporter",
    "BaseImporter",
    "GLOBAL_SINGLETON",
    "ParameterizedImporter",
    "REGIONAL_SINGLETON",
    "SingletonImporter",
    "SingletonStrategy",
    "importer_for",
]
