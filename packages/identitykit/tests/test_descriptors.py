import pytest

from identitykit.descriptors import (
    AttributeRole,
    IdentityAttribute,
    IdentityDescriptor,
    RegionConfig,
    global_arn_identity,
    global_parameterized_identity,
    global_singleton_identity,
    regional_arn_identity,
    regional_parameterized_identity,
    regional_singleton_identity,
)
from identitykit.exceptions import IdentityDescriptorError


@pytest.mark.parametrize(
    "name, role",
    [
        ("account_id", AttributeRole.ACCOUNT_ID),
        ("region", AttributeRole.REGION),
        ("id", AttributeRole.PRIMARY_ID),
        ("name", AttributeRole.PLAIN),
        ("Region", AttributeRole.PLAIN),
    ],
)
def test_attribute_role_is_derived_from_name(name, role):
    assert IdentityAttribute(name).role is role


def test_arn_constructors():
    ident = global_arn_identity()
    assert ident.global_ and ident.is_arn and not ident.singleton
    assert ident.names == ("arn",)
    assert ident.attributes[0].required
    assert ident.id_shadow_attribute == "arn"

    named = regional_arn_identity("certificate_arn")
    assert not named.global_
    assert named.arn_attribute == "certificate_arn"
    assert named.names == ("certificate_arn",)


def test_singleton_constructors_declare_only_their_scope():
    assert global_singleton_identity().names == ("account_id",)
    assert regional_singleton_identity().names == ("region",)
    assert not regional_singleton_identity().attributes[0].required


def test_parameterized_constructors_prepend_scope_attributes():
    ident = regional_parameterized_identity("bucket", IdentityAttribute.optional("key"), id_shadow_attribute="bucket")

    assert ident.names == ("account_id", "region", "bucket", "key")
    assert [a.required for a in ident.attributes] == [False, False, True, False]
    assert ident.is_parameterized
    assert "bucket" in ident and "missing" not in ident

    assert global_parameterized_identity("name").names == ("account_id", "name")


def test_descriptor_stores_attributes_as_tuple():
    ident = IdentityDescriptor(attributes=[IdentityAttribute("name")])
    assert isinstance(ident.attributes, tuple)
    assert ident.get("name") == IdentityAttribute("name")
    assert ident.get("other") is None


@pytest.mark.parametrize(
    "kwargs",
    [
        pytest.param({"attributes": (IdentityAttribute("a"), IdentityAttribute("a"))}, id="duplicate"),
        pytest.param({"attributes": (IdentityAttribute("a"),), "id_shadow_attribute": "b"}, id="unknown-shadow"),
        pytest.param(
            {"attributes": (IdentityAttribute("region"),), "id_shadow_attribute": "region"}, id="scope-shadow"
        ),
        pytest.param(
            {"attributes": (IdentityAttribute.require("arn"), IdentityAttribute("name")), "is_arn": True,
             "arn_attribute": "arn"},
            id="arn-extra-attribute",
        ),
        pytest.param(
            {"attributes": (IdentityAttribute.optional("arn"),), "is_arn": True, "arn_attribute": "arn"},
            id="arn-optional",
        ),
        pytest.param({"attributes": (IdentityAttribute.require("arn"),), "is_arn": True}, id="arn-unnamed"),
        pytest.param(
            {"attributes": (IdentityAttribute("account_id"), IdentityAttribute("region")), "singleton": True},
            id="singleton-two-scopes",
        ),
        pytest.param(
            {"attributes": (IdentityAttribute("account_id"),), "singleton": True, "global_": False},
            id="regional-singleton-wrong-scope",
        ),
    ],
)
def test_descriptor_invariants_are_enforced(kwargs):
    with pytest.raises(IdentityDescriptorError):
        IdentityDescriptor(**kwargs)


def test_empty_attribute_name_rejected():
    with pytest.raises(IdentityDescriptorError):
        IdentityAttribute("  ")


def test_region_config_presets():
    assert RegionConfig.default() == RegionConfig(override_enabled=True, validate_override_in_partition=True)
    assert RegionConfig.disabled() == RegionConfig(override_enabled=False, validate_override_in_partition=False)


def test_require_and_optional_helpers():
    assert IdentityAttribute.require("name") == IdentityAttribute("name", required=True)
    assert IdentityAttribute.optional("name") == IdentityAttribute("name", required=False)
