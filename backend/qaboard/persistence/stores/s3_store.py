"""S3 implementation of DocumentStore: one object per key."""
from __future__ import annotations
import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from qaboard.persistence.interfaces.document_store import Document, DocumentStore, StorageError
from qaboard.persistence.stores.codec import decode, encode

logger = logging.getLogger(__name__)

_MISSING_CODES = {"NoSuchKey", "404", "NotFound"}


def _is_missing(error: ClientError) -> bool:
    code = str(error.response.get("Error", {}).get("Code", ""))
    status = error.response.get("ResponseMetadata", {}).get("HTTPStatusCode")
    return code in _MISSING_CODES or status == 404


class S3DocumentStore(DocumentStore):
    name = "s3"

    def __init__(self, bucket: str, region: str = "us-east-1", prefix: str = "", client=None):
        self.bucket = bucket
        self.region = region
        self.prefix = prefix.strip("/")
        self._client = client or boto3.client("s3", region_name=region)

    def _object_key(self, key: str) -> str:
        return f"{self.prefix}/{key}" if self.prefix else key

    def get(self, key: str) -> Document:
        object_key = self._object_key(key)
        try:
            out = self._client.get_object(Bucket=self.bucket, Key=object_key)
            raw = out["Body"].read()
        except ClientError as e:
            if _is_missing(e):
                return Document(key=key, data=[], served_by=self.name)
            logger.error("S3 get failed for s3://%s/%s: %s", self.bucket, object_key, e)
            raise StorageError(key, f"S3 get failed: {e}", e)
        except BotoCoreError as e:
            logger.error("S3 get failed for s3://%s/%s: %s", self.bucket, object_key, e)
            raise StorageError(key, f"S3 get failed: {e}", e)
        return Document(key=key, data=decode(key, raw), served_by=self.name)

    def put(self, key: str, data: Any) -> str:
        object_key = self._object_key(key)
        try:
            self._client.put_object(
                Bucket=self.bucket,
                Key=object_key,
                Body=encode(data),
                ContentType="application/json",
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("S3 put failed for s3://%s/%s: %s", self.bucket, object_key, e)
            raise StorageError(key, f"S3 put failed: {e}", e)
        return self.name

    def exists(self, key: str) -> bool:
        try:
            self._client.head_object(Bucket=self.bucket, Key=self._object_key(key))
        except ClientError as e:
            if _is_missing(e):
                return False
            raise StorageError(key, f"S3 head failed: {e}", e)
        except BotoCoreError as e:
            raise StorageError(key, f"S3 head failed: {e}", e)
        return True

    def describe(self) -> str:
        suffix = f"/{self.prefix}" if self.prefix else ""
        return f"s3://{self.bucket}{suffix}"
