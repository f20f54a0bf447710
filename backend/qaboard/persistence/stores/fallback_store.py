"""Primary/secondary DocumentStore: each call falls back on its own when the primary fails."""
from __future__ import annotations
import logging
from typing import Any

from qaboard.persistence.interfaces.document_store import Document, DocumentStore, StorageError

logger = logging.getLogger(__name__)


class FallbackDocumentStore(DocumentStore):
    """
    Tries the primary store first. On StorageError the same call is retried
    against the secondary and the result reports which backend served it.
    The two stores are not synchronised: a document written to the
    secondary during an outage is not copied back to the primary.
    """

    name = "fallback"

    def __init__(self, primary: DocumentStore, secondary: DocumentStore):
        self.primary = primary
        self.secondary = secondary

    def _warn(self, op: str, key: str, error: StorageError) -> None:
        logger.warning(
            "%s %s on %s failed (%s); falling back to %s",
            op, key, self.primary.describe(), error, self.secondary.describe(),
        )

    def get(self, key: str) -> Document:
        try:
            return self.primary.get(key)
        except StorageError as e:
            self._warn("get", key, e)
        return self.secondary.get(key)

    def put(self, key: str, data: Any) -> str:
        try:
            return self.primary.put(key, data)
        except StorageError as e:
            self._warn("put", key, e)
        return self.secondary.put(key, data)

    def exists(self, key: str) -> bool:
        try:
            return self.primary.exists(key)
        except StorageError as e:
            self._warn("exists", key, e)
        return self.secondary.exists(key)

    def describe(self) -> str:
        return f"{self.primary.describe()} -> {self.secondary.describe()}"
