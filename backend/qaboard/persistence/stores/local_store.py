"""Filesystem implementation of DocumentStore: one JSON file per key."""
from __future__ import annotations
import logging
import os
from tempfile import NamedTemporaryFile
from typing import Any

from qaboard.persistence.interfaces.document_store import Document, DocumentStore, StorageError
from qaboard.persistence.stores.codec import decode, encode

logger = logging.getLogger(__name__)


class LocalDocumentStore(DocumentStore):
    name = "local"

    def __init__(self, directory: str):
        self.directory = os.path.abspath(directory)

    def _path(self, key: str) -> str:
        path = os.path.abspath(os.path.join(self.directory, key))
        if not path.startswith(self.directory + os.sep):
            raise StorageError(key, "key escapes the data directory")
        return path

    def get(self, key: str) -> Document:
        path = self._path(key)
        try:
            with open(path, "rb") as f:
                raw = f.read()
        except FileNotFoundError:
            return Document(key=key, data=[], served_by=self.name)
        except OSError as e:
            raise StorageError(key, f"read failed: {e}", e)
        return Document(key=key, data=decode(key, raw), served_by=self.name)

    def put(self, key: str, data: Any) -> str:
        path = self._path(key)
        dirpath = os.path.dirname(path)
        tmpname = None
        try:
            os.makedirs(dirpath, exist_ok=True)
            # atomic replace so readers never see a half-written file
            with NamedTemporaryFile("wb", dir=dirpath, delete=False, suffix=".tmp") as tf:
                tmpname = tf.name
                tf.write(encode(data))
            os.replace(tmpname, path)
        except OSError as e:
            if tmpname and os.path.exists(tmpname):
                os.unlink(tmpname)
            raise StorageError(key, f"write failed: {e}", e)
        logger.debug("Wrote %s to %s", key, path)
        return self.name

    def exists(self, key: str) -> bool:
        return os.path.isfile(self._path(key))

    def describe(self) -> str:
        return f"local:{self.directory}"
