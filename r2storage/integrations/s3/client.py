"""S3-compatible storage transport using boto3 client."""

from typing import Any, Dict, Iterator, List, Optional

import boto3
from botocore.config import Config

from r2storage.core.logging import get_logger

logger = get_logger(__name__)

# Objects requested per list_objects_v2 call
LIST_PAGE_SIZE = 10


class StorageClient:
    """Configured connection to an S3-compatible service.

    Wraps a boto3 S3 client. Holds no mutable state after construction and
    can be shared by concurrent callers, since boto3 clients are thread-safe.
    Creating it only prepares signing configuration; no request is sent until
    the first operation.
    """

    def __init__(
        self,
        access_key_id: str,
        secret_access_key: str,
        endpoint: str,
        region: str = "auto",
    ):
        """
        Initialize boto3 S3 client for S3-compatible storage.

        Args:
            access_key_id: Access key id
            secret_access_key: Secret access key
            endpoint: Service endpoint URL
            region: Region token, passed through verbatim ("auto" for R2)
        """
        # Checksums only when the operation requires them; many S3-compatible
        # endpoints reject the default flexible checksum headers
        config = Config(
            region_name=region,
            request_checksum_calculation="when_required",
            response_checksum_validation="when_required",
        )

        self._client = boto3.client(
            "s3",
            endpoint_url=endpoint,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
            config=config,
        )
        self.endpoint = endpoint
        self.region = region
        logger.debug(f"S3 client configured for endpoint {endpoint} (region={region})")

    @property
    def raw(self) -> Any:
        """Underlying boto3 client."""
        return self._client

    def put_object(
        self,
        bucket: str,
        key: str,
        body: bytes,
        content_type: str,
        cache_control: str,
    ) -> Dict[str, Any]:
        return self._client.put_object(
            Bucket=bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
            CacheControl=cache_control,
        )

    def get_object(self, bucket: str, key: str) -> Dict[str, Any]:
        return self._client.get_object(Bucket=bucket, Key=key)

    def delete_object(self, bucket: str, key: str) -> Dict[str, Any]:
        return self._client.delete_object(Bucket=bucket, Key=key)

    def iter_list_pages(
        self, bucket: str, page_size: int = LIST_PAGE_SIZE
    ) -> Iterator[List[Dict[str, Any]]]:
        """
        Yield the ``Contents`` of each list_objects_v2 page in service order.

        Continuation tokens are handled by the boto3 paginator; a failing page
        raises from the iterator.

        Args:
            bucket: Bucket name
            page_size: Maximum number of keys requested per call

        Yields:
            List of object entries for one page (possibly empty)
        """
        paginator = self._client.get_paginator("list_objects_v2")
        pages = paginator.paginate(
            Bucket=bucket, PaginationConfig={"PageSize": page_size}
        )
        for page in pages:
            contents: Optional[List[Dict[str, Any]]] = page.get("Contents")
            yield contents or []
