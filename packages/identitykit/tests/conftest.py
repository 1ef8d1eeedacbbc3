import pytest

from identitykit.ambient import StaticAmbientContext
from identitykit.state import IdentityData, ResourceData

ACCOUNT_ID = "111111111111"
REGION = "us-east-1"


@pytest.fixture()
def ambient():
    return StaticAmbientContext(account_id=ACCOUNT_ID, region=REGION)


@pytest.fixture()
def state():
    return ResourceData()


@pytest.fixture()
def identity():
    return IdentityData()
