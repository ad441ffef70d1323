"""Client for Cloudflare R2 and other S3-compatible object storage."""

from r2storage.builder import Builder, ClientConfig
from r2storage.core.config.settings import R2Settings
from r2storage.core.exceptions.exceptions import (
    ByteStreamError,
    ConfigError,
    ConfigErrorKind,
    DeleteObjectError,
    FileOpenError,
    GetObjectError,
    ListObjectsError,
    OperationError,
    PutObjectError,
    StorageError,
)
from r2storage.integrations.s3 import StorageClient
from r2storage.operator import Operator

__version__ = "0.1.0"

__all__ = [
    "Builder",
    "ByteStreamError",
    "ClientConfig",
    "ConfigError",
    "ConfigErrorKind",
    "DeleteObjectError",
    "FileOpenError",
    "GetObjectError",
    "ListObjectsError",
    "OperationError",
    "Operator",
    "PutObjectError",
    "R2Settings",
    "StorageClient",
    "StorageError",
]
