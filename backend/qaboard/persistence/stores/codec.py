"""JSON encoding shared by the document stores."""
from __future__ import annotations
import json
from typing import Any

from qaboard.persistence.interfaces.document_store import StorageError


def encode(data: Any) -> bytes:
    return json.dumps(data, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def decode(key: str, raw: bytes) -> Any:
    try:
        text = raw.decode("utf-8").strip() if raw else ""
        if not text:
            return []
        return json.loads(text)
    except ValueError as e:
        # UnicodeDecodeError is a ValueError too
        raise StorageError(key, f"document is not valid UTF-8 JSON: {e}", e)
