"""Core exceptions module."""

from enum import Enum
from typing import Any, Dict, Optional


class StorageError(Exception):
    """Base exception class for the storage client."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigErrorKind(str, Enum):
    """Required configuration values, in the order they are checked."""

    BUCKET_NAME_MISSING = "bucket_name_missing"
    ACCESS_KEY_ID_MISSING = "access_key_id_missing"
    SECRET_ACCESS_KEY_MISSING = "secret_access_key_missing"
    ENDPOINT_MISSING = "endpoint_missing"


_CONFIG_ERROR_MESSAGES = {
    ConfigErrorKind.BUCKET_NAME_MISSING: "Bucket name is not set",
    ConfigErrorKind.ACCESS_KEY_ID_MISSING: "Access key id is not set",
    ConfigErrorKind.SECRET_ACCESS_KEY_MISSING: "Secret access key is not set",
    ConfigErrorKind.ENDPOINT_MISSING: "Endpoint is not set",
}


class ConfigError(StorageError):
    """Client configuration is incomplete."""

    def __init__(self, kind: ConfigErrorKind) -> None:
        self.kind = kind
        super().__init__(_CONFIG_ERROR_MESSAGES[kind], details={"kind": kind.value})


class OperationError(StorageError):
    """Base class for failures of a single storage operation."""


class FileOpenError(OperationError):
    """Local file could not be opened or read."""


class PutObjectError(OperationError):
    """Remote put-object request failed."""


class GetObjectError(OperationError):
    """Remote get-object request failed (including a missing key)."""


class DeleteObjectError(OperationError):
    """Remote delete-object request failed."""


class ListObjectsError(OperationError):
    """A page of the remote object listing failed."""


class ByteStreamError(OperationError):
    """Object body could not be read after a successful get-object response."""
