"""S3-compatible storage integration package."""

from .client import LIST_PAGE_SIZE, StorageClient

__all__ = ["LIST_PAGE_SIZE", "StorageClient"]
