import pytest
from pydantic import ValidationError

from r2storage import Builder, ConfigError, ConfigErrorKind, Operator, R2Settings

ENDPOINT = "https://account-id.r2.cloudflarestorage.com"


def full_builder():
    return (
        Builder()
        .set_bucket_name("test-bucket")
        .set_access_key_id("test-access-key")
        .set_secret_access_key("test-secret-key")
        .set_endpoint(ENDPOINT)
    )


def test_build_returns_operator_for_bucket():
    operator = full_builder().build()
    assert isinstance(operator, Operator)
    assert operator.bucket_name == "test-bucket"
    assert operator.client.endpoint == ENDPOINT


def test_region_defaults_to_auto():
    config = full_builder().config()
    assert config.region == "auto"
    assert full_builder().build().client.region == "auto"


def test_region_is_passed_through_verbatim():
    config = full_builder().set_region("weur").config()
    assert config.region == "weur"


def test_empty_builder_reports_bucket_name_first():
    with pytest.raises(ConfigError) as exc_info:
        Builder().build()
    assert exc_info.value.kind is ConfigErrorKind.BUCKET_NAME_MISSING
    assert exc_info.value.details == {"kind": "bucket_name_missing"}


@pytest.mark.parametrize(
    "builder, expected",
    [
        (Builder().set_bucket_name("b"), ConfigErrorKind.ACCESS_KEY_ID_MISSING),
        (
            Builder().set_bucket_name("b").set_access_key_id("k"),
            ConfigErrorKind.SECRET_ACCESS_KEY_MISSING,
        ),
        (
            Builder()
            .set_bucket_name("b")
            .set_access_key_id("k")
            .set_secret_access_key("s"),
            ConfigErrorKind.ENDPOINT_MISSING,
        ),
        (
            Builder().set_endpoint(ENDPOINT).set_secret_access_key("s"),
            ConfigErrorKind.BUCKET_NAME_MISSING,
        ),
    ],
)
def test_first_missing_field_wins(builder, expected):
    with pytest.raises(ConfigError) as exc_info:
        builder.build()
    assert exc_info.value.kind is expected


def test_empty_string_counts_as_missing():
    with pytest.raises(ConfigError) as exc_info:
        full_builder().set_access_key_id("").build()
    assert exc_info.value.kind is ConfigErrorKind.ACCESS_KEY_ID_MISSING


def test_config_is_frozen_and_hides_secret():
    config = full_builder().config()
    assert "test-secret-key" not in repr(config)
    with pytest.raises(ValidationError):
        config.bucket_name = "other"


def test_from_settings_copies_values():
    settings = R2Settings(
        _env_file=None,
        bucket_name="settings-bucket",
        endpoint_url=ENDPOINT,
        access_key_id="id",
        secret_access_key="secret",
        region="enam",
    )
    config = Builder.from_settings(settings).config()
    assert config.bucket_name == "settings-bucket"
    assert config.endpoint == ENDPOINT
    assert config.region == "enam"
