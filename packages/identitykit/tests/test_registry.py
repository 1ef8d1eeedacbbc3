import asyncio

import pytest

from identitykit.descriptors import (
    RegionConfig,
    global_arn_identity,
    regional_parameterized_identity,
    regional_singleton_identity,
)
from identitykit.exceptions import (
    RegistryCollisionError,
    RegistryDuplicateError,
    RegistryFrozenError,
    RegistryLookupError,
)
from identitykit.importers import ARNImporter, ParameterizedImporter, SingletonImporter
from identitykit.interceptors import When, Why
from identitykit.registry import ResourceKind, ResourceKindRegistry


@pytest.fixture()
def registry():
    return ResourceKindRegistry()


def test_register_and_get(registry):
    kind = ResourceKind("aws_iam_role", global_arn_identity())
    registry.register(kind)

    assert registry.get("aws_iam_role") is kind
    assert registry.try_get("aws_missing") is None
    assert registry.count() == 1
    assert registry.type_names() == ("aws_iam_role",)


def test_duplicate_registration_is_ignored_unless_strict(registry):
    registry.register(ResourceKind("aws_iam_role", global_arn_identity()))
    registry.register(ResourceKind("aws_iam_role", global_arn_identity()))
    assert registry.count() == 1

    with pytest.raises(RegistryDuplicateError):
        registry.register(ResourceKind("aws_iam_role", global_arn_identity()), strict=True)


def test_collision_on_different_kind(registry):
    registry.register(ResourceKind("aws_thing", global_arn_identity()))

    with pytest.raises(RegistryCollisionError):
        registry.register(ResourceKind("aws_thing", regional_singleton_identity()))


def test_frozen_registry_rejects_registration(registry):
    registry.freeze()
    assert registry.frozen

    with pytest.raises(RegistryFrozenError):
        registry.register(ResourceKind("aws_iam_role", global_arn_identity()))


def test_lookup_error(registry):
    with pytest.raises(RegistryLookupError):
        registry.get("aws_missing")


def test_async_registration(registry):
    kind = ResourceKind("aws_iam_role", global_arn_identity())

    async def scenario():
        await registry.aregister(kind)
        return await registry.aget("aws_iam_role")

    assert asyncio.run(scenario()) is kind


def test_empty_type_name_rejected():
    with pytest.raises(ValueError):
        ResourceKind(" ", global_arn_identity())


@pytest.mark.parametrize(
    "identity, importer_cls",
    [
        (global_arn_identity(), ARNImporter),
        (regional_singleton_identity(), SingletonImporter),
        (regional_parameterized_identity("name"), ParameterizedImporter),
    ],
)
def test_resource_kind_wiring(identity, importer_cls):
    kind = ResourceKind("aws_example", identity, RegionConfig.disabled())

    assert isinstance(kind.importer(), importer_cls)
    assert list(kind.schema()) == list(identity.names)
    (invocation,) = kind.interceptors()
    assert invocation.matches(When.AFTER, Why.CREATE)
    assert not invocation.matches(When.AFTER, Why.READ)


def test_resource_kind_passes_region_config_to_importer():
    kind = ResourceKind("aws_example", regional_singleton_identity(), RegionConfig.disabled())
    assert kind.importer().region_config == RegionConfig.disabled()
