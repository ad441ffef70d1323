import pytest
from botocore.stub import Stubber

from r2storage import Operator, StorageClient

BUCKET = "test-bucket"
ENDPOINT = "https://account-id.r2.cloudflarestorage.com"


@pytest.fixture
def storage_client():
    return StorageClient(
        access_key_id="test-access-key",
        secret_access_key="test-secret-key",
        endpoint=ENDPOINT,
    )


@pytest.fixture
def stubber(storage_client):
    with Stubber(storage_client.raw) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def operator(storage_client):
    return Operator(BUCKET, storage_client)
