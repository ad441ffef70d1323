"""Bucket-scoped storage operations."""

import asyncio
from pathlib import Path
from typing import List, Optional, Union

from botocore.exceptions import BotoCoreError, ClientError

from r2storage.core.exceptions.exceptions import (
    ByteStreamError,
    DeleteObjectError,
    FileOpenError,
    GetObjectError,
    ListObjectsError,
    PutObjectError,
)
from r2storage.core.logging import get_logger
from r2storage.integrations.s3 import LIST_PAGE_SIZE, StorageClient

logger = get_logger(__name__)

DEFAULT_CACHE_CONTROL = "no-cache"

# Stands in for listing entries the service returned without a key
UNKNOWN_KEY = "Unknown"

TRANSPORT_ERRORS = (ClientError, BotoCoreError)


class Operator:
    """Upload, download, delete and list objects in one bucket.

    Every method performs one remote interaction and either fully succeeds or
    raises an ``OperationError`` subclass carrying the transport message.
    The blocking boto3 calls run in a worker thread, so an operator can be
    awaited from any number of tasks at once.
    """

    def __init__(self, bucket_name: str, client: StorageClient):
        """
        Initialize operator.

        Args:
            bucket_name: Bucket every operation targets
            client: Configured storage client
        """
        self._bucket_name = bucket_name
        self._client = client

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    @property
    def client(self) -> StorageClient:
        return self._client

    def __repr__(self) -> str:
        return f"Operator(bucket_name={self._bucket_name!r}, endpoint={self._client.endpoint!r})"

    async def upload_binary(
        self,
        key: str,
        content_type: str,
        data: bytes,
        cache_control: Optional[str] = None,
    ) -> None:
        """
        Upload bytes as the object body.

        Args:
            key: Object key
            content_type: MIME type stored with the object
            data: Object body
            cache_control: Cache-Control header (default: "no-cache")

        Raises:
            PutObjectError: If the remote call fails
        """
        try:
            await asyncio.to_thread(
                self._client.put_object,
                self._bucket_name,
                key,
                bytes(data),
                content_type,
                cache_control or DEFAULT_CACHE_CONTROL,
            )
        except TRANSPORT_ERRORS as e:
            logger.error(f"Failed to upload {key} to {self._bucket_name}: {e}")
            raise PutObjectError(str(e), details=self._details(key)) from e

        logger.info(f"Uploaded: {key} ({len(data)} bytes) to {self._bucket_name}")

    async def upload_file(
        self,
        key: str,
        content_type: str,
        file_path: Union[str, Path],
        cache_control: Optional[str] = None,
    ) -> None:
        """
        Upload a local file as the object body.

        The whole file is read into memory before the request is sent.

        Args:
            key: Object key
            content_type: MIME type stored with the object
            file_path: Path to local file
            cache_control: Cache-Control header (default: "no-cache")

        Raises:
            FileOpenError: If the file cannot be opened or read
            PutObjectError: If the remote call fails
        """
        try:
            data = await asyncio.to_thread(Path(file_path).read_bytes)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read {file_path}: {e}")
            raise FileOpenError(
                str(e), details={**self._details(key), "file_path": str(file_path)}
            ) from e

        await self.upload_binary(key, content_type, data, cache_control)

    async def download(self, key: str) -> bytes:
        """
        Download the full object body into memory.

        Args:
            key: Object key

        Returns:
            Object body

        Raises:
            GetObjectError: If the request fails, including when the key does not exist
            ByteStreamError: If the body cannot be read after a successful response
        """
        try:
            response = await asyncio.to_thread(
                self._client.get_object, self._bucket_name, key
            )
        except TRANSPORT_ERRORS as e:
            logger.error(f"Failed to get {key} from {self._bucket_name}: {e}")
            raise GetObjectError(str(e), details=self._details(key)) from e

        body = response["Body"]
        try:
            data = await asyncio.to_thread(body.read)
        except (BotoCoreError, OSError) as e:
            logger.error(f"Failed to read body of {key}: {e}")
            raise ByteStreamError(str(e), details=self._details(key)) from e
        finally:
            body.close()

        logger.info(f"Downloaded: {key} ({len(data)} bytes) from {self._bucket_name}")
        return data

    async def delete(self, key: str) -> None:
        """
        Delete an object. Deleting a key that does not exist succeeds.

        Args:
            key: Object key

        Raises:
            DeleteObjectError: If the remote call fails
        """
        try:
            await asyncio.to_thread(self._client.delete_object, self._bucket_name, key)
        except TRANSPORT_ERRORS as e:
            logger.error(f"Failed to delete {key} from {self._bucket_name}: {e}")
            raise DeleteObjectError(str(e), details=self._details(key)) from e

        logger.info(f"Deleted: {key} from {self._bucket_name}")

    async def list_objects(self) -> List[str]:
        """
        List every key in the bucket, in the order the service returns them.

        Pages of at most ``LIST_PAGE_SIZE`` keys are requested one after
        another and concatenated. Entries without a key are reported as
        ``"Unknown"``.

        Returns:
            List of object keys

        Raises:
            ListObjectsError: If any page request fails; no partial result is returned
        """
        try:
            keys = await asyncio.to_thread(self._collect_keys)
        except TRANSPORT_ERRORS as e:
            logger.error(f"Failed to list objects in {self._bucket_name}: {e}")
            raise ListObjectsError(str(e), details={"bucket": self._bucket_name}) from e

        logger.info(f"Listed {len(keys)} objects in {self._bucket_name}")
        return keys

    def _collect_keys(self) -> List[str]:
        keys: List[str] = []
        for page_number, contents in enumerate(
            self._client.iter_list_pages(self._bucket_name, LIST_PAGE_SIZE), start=1
        ):
            logger.debug(f"List page {page_number}: {len(contents)} objects")
            keys.extend(entry.get("Key") or UNKNOWN_KEY for entry in contents)
        return keys

    def _details(self, key: str) -> dict:
        return {"bucket": self._bucket_name, "key": key}
