"""Configuration builder producing an ``Operator``."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from r2storage.core.config.settings import R2Settings
from r2storage.core.exceptions.exceptions import ConfigError, ConfigErrorKind
from r2storage.core.logging import get_logger
from r2storage.integrations.s3 import StorageClient
from r2storage.operator import Operator

logger = get_logger(__name__)

DEFAULT_REGION = "auto"


class ClientConfig(BaseModel):
    """Validated, immutable client configuration."""

    model_config = ConfigDict(frozen=True)

    bucket_name: str
    access_key_id: str
    secret_access_key: str = Field(repr=False)
    endpoint: str
    region: str = DEFAULT_REGION


class Builder:
    """
    Builder for creating a new ``Operator``.

    Example:
        settings = R2Settings()
        operator = (
            Builder()
            .set_bucket_name(settings.bucket_name)
            .set_access_key_id(settings.access_key_id)
            .set_secret_access_key(settings.secret_access_key)
            .set_endpoint(settings.endpoint_url)
            .set_region(settings.region)
            .build()
        )
    """

    def __init__(self):
        self._bucket_name: Optional[str] = None
        self._access_key_id: Optional[str] = None
        self._secret_access_key: Optional[str] = None
        self._endpoint: Optional[str] = None
        self._region: str = DEFAULT_REGION

    def __repr__(self) -> str:
        return (
            f"Builder(bucket_name={self._bucket_name!r}, endpoint={self._endpoint!r}, "
            f"region={self._region!r})"
        )

    @classmethod
    def from_settings(cls, settings: R2Settings) -> "Builder":
        """Create a builder pre-filled from already resolved settings."""
        return (
            cls()
            .set_bucket_name(settings.bucket_name)
            .set_access_key_id(settings.access_key_id)
            .set_secret_access_key(settings.secret_access_key)
            .set_endpoint(settings.endpoint_url)
            .set_region(settings.region)
        )

    def set_bucket_name(self, bucket_name: str) -> "Builder":
        self._bucket_name = bucket_name
        return self

    def set_access_key_id(self, access_key_id: str) -> "Builder":
        self._access_key_id = access_key_id
        return self

    def set_secret_access_key(self, secret_access_key: str) -> "Builder":
        self._secret_access_key = secret_access_key
        return self

    def set_endpoint(self, endpoint: str) -> "Builder":
        self._endpoint = endpoint
        return self

    def set_region(self, region: str) -> "Builder":
        """Set the region. Defaults to "auto" when never called."""
        self._region = region
        return self

    def config(self) -> ClientConfig:
        """
        Validate the collected values.

        Required fields are checked in order (bucket name, access key id,
        secret access key, endpoint) and the first one never set, or set to
        an empty string, is reported.

        Returns:
            Immutable client configuration

        Raises:
            ConfigError: If a required field is missing
        """
        required = (
            (self._bucket_name, ConfigErrorKind.BUCKET_NAME_MISSING),
            (self._access_key_id, ConfigErrorKind.ACCESS_KEY_ID_MISSING),
            (self._secret_access_key, ConfigErrorKind.SECRET_ACCESS_KEY_MISSING),
            (self._endpoint, ConfigErrorKind.ENDPOINT_MISSING),
        )
        for value, kind in required:
            if not value:
                logger.error(f"Invalid storage client configuration: {kind.value}")
                raise ConfigError(kind)

        return ClientConfig(
            bucket_name=self._bucket_name,
            access_key_id=self._access_key_id,
            secret_access_key=self._secret_access_key,
            endpoint=self._endpoint,
            region=self._region,
        )

    def build(self) -> Operator:
        """
        Create an ``Operator`` for the configured bucket.

        No network request is made; connectivity and credentials are first
        exercised by the operator's first call.

        Raises:
            ConfigError: If a required field is missing
        """
        config = self.config()
        client = StorageClient(
            access_key_id=config.access_key_id,
            secret_access_key=config.secret_access_key,
            endpoint=config.endpoint,
            region=config.region,
        )
        logger.info(
            f"Storage client created for bucket {config.bucket_name} at {config.endpoint}"
        )
        return Operator(config.bucket_name, client)
