import pytest

from identitykit.ambient import StaticAmbientContext
from identitykit.descriptors import RegionConfig
from identitykit.exceptions import (
    InvalidARNError,
    MissingRequiredIdentityAttributeError,
    PartitionMismatchError,
    RegionMismatchError,
    TypeMismatchError,
)
from identitykit.importers import ARNImporter
from identitykit.state import IdentityData, ResourceData

ROLE_ARN = "arn:aws:iam::111111111111:role/example"
QUEUE_ARN = "arn:aws:sqs:us-east-1:111111111111:queue"


def test_global_arn_import(ambient, state, identity):
    ARNImporter(global_=True).import_state(ROLE_ARN, state=state, identity=identity, ambient=ambient)

    assert state.id() == ROLE_ARN
    assert state.get("arn") == (ROLE_ARN, True)
    assert state.get("region") == (None, False)


@pytest.mark.parametrize("value", ["not-an-arn", "arn:aws:iam", "arn::iam::1:role/x", "urn:aws:iam::1:role/x"])
def test_invalid_arn(value, ambient, state, identity):
    with pytest.raises(InvalidARNError) as excinfo:
        ARNImporter(global_=True).import_state(value, state=state, identity=identity, ambient=ambient)

    assert excinfo.value.value == value
    assert state.id() == ""


def test_global_arn_partition_mismatch(state, identity):
    ambient = StaticAmbientContext(account_id="111111111111", region="cn-north-1")

    with pytest.raises(PartitionMismatchError) as excinfo:
        ARNImporter(global_=True).import_state(ROLE_ARN, state=state, identity=identity, ambient=ambient)

    assert (excinfo.value.expected, excinfo.value.actual) == ("aws-cn", "aws")


def test_arn_from_identity_record(ambient, state):
    identity = IdentityData({"queue_arn": QUEUE_ARN})

    ARNImporter(global_=False, arn_attribute="queue_arn").import_state(
        "", state=state, identity=identity, ambient=ambient
    )

    assert state.id() == QUEUE_ARN
    assert state.get("queue_arn") == (QUEUE_ARN, True)
    assert state.get("region") == ("us-east-1", True)


def test_arn_missing_from_identity_record(ambient, state, identity):
    with pytest.raises(MissingRequiredIdentityAttributeError) as excinfo:
        ARNImporter(global_=True).import_state("", state=state, identity=identity, ambient=ambient)

    assert excinfo.value.attribute == "arn"


def test_arn_identity_value_must_be_text(ambient, state):
    with pytest.raises(TypeMismatchError):
        ARNImporter(global_=True).import_state("", state=state, identity=IdentityData({"arn": 7}), ambient=ambient)


def test_regional_arn_in_other_region_of_partition(ambient, state, identity):
    arn = "arn:aws:sqs:eu-west-1:111111111111:queue"

    ARNImporter(global_=False).import_state(arn, state=state, identity=identity, ambient=ambient)

    assert state.get("region") == ("eu-west-1", True)


def test_regional_arn_outside_partition(ambient, state, identity):
    arn = "arn:aws-cn:sqs:cn-north-1:111111111111:queue"

    with pytest.raises(RegionMismatchError) as excinfo:
        ARNImporter(global_=False).import_state(arn, state=state, identity=identity, ambient=ambient)

    assert (excinfo.value.expected, excinfo.value.actual) == ("us-east-1", "cn-north-1")


def test_regional_arn_without_override_support(ambient, state, identity):
    arn = "arn:aws:sqs:eu-west-1:111111111111:queue"
    importer = ARNImporter(global_=False, region_config=RegionConfig.disabled())

    with pytest.raises(RegionMismatchError):
        importer.import_state(arn, state=state, identity=identity, ambient=ambient)

    importer.import_state(QUEUE_ARN, state=state, identity=identity, ambient=ambient)
    assert state.id() == QUEUE_ARN


def test_regional_arn_must_match_resource_region_override(ambient, identity):
    state = ResourceData({"region": "us-west-2"})

    with pytest.raises(RegionMismatchError) as excinfo:
        ARNImporter(global_=False).import_state(QUEUE_ARN, state=state, identity=identity, ambient=ambient)

    assert (excinfo.value.expected, excinfo.value.actual) == ("us-west-2", "us-east-1")
    assert state.id() == ""


def test_regional_arn_without_region(ambient, state, identity):
    with pytest.raises(RegionMismatchError):
        ARNImporter(global_=False).import_state(
            "arn:aws:s3:::bucket", state=state, identity=identity, ambient=ambient
        )


def test_regional_arn_resource_region_override_is_normalized(ambient, identity):
    arn = "arn:aws:sqs:us-west-2:111111111111:queue"
    state = ResourceData({"region": " US-West-2 "})

    ARNImporter(global_=False).import_state(arn, state=state, identity=identity, ambient=ambient)

    assert state.get("region") == ("us-west-2", True)
    assert state.id() == arn


def test_regional_arn_resource_region_override_follows_region_config(ambient, identity):
    arn = "arn:aws:sqs:us-west-2:111111111111:queue"
    state = ResourceData({"region": "us-west-2"})

    with pytest.raises(RegionMismatchError) as excinfo:
        ARNImporter(global_=False, region_config=RegionConfig.disabled()).import_state(
            arn, state=state, identity=identity, ambient=ambient
        )

    assert (excinfo.value.expected, excinfo.value.actual) == ("us-east-1", "us-west-2")
    assert state.id() == ""
