"""Abstract whole-document store: read a JSON collection by key, overwrite it by key."""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


class StorageError(Exception):
    """Backing-store failure other than a missing key."""

    def __init__(self, key: str, message: str, cause: Optional[BaseException] = None):
        super().__init__(f"{key}: {message}")
        self.key = key
        self.cause = cause


@dataclass
class Document:
    key: str
    data: Any
    served_by: str


class DocumentStore(ABC):
    name: str = "store"

    @abstractmethod
    def get(self, key: str) -> Document:
        """Return the parsed document, with data == [] when the key does not exist yet."""
        ...

    @abstractmethod
    def put(self, key: str, data: Any) -> str:
        """Overwrite the document unconditionally. Returns the label of the backend that wrote it."""
        ...

    @abstractmethod
    def exists(self, key: str) -> bool:
        ...

    @abstractmethod
    def describe(self) -> str:
        """Human-readable storage target, e.g. s3://bucket/prefix."""
        ...
