"""Create the empty collections a fresh bucket or data directory needs."""
from __future__ import annotations
import logging
from typing import Dict

from qaboard.persistence.interfaces.document_store import DocumentStore
from qaboard.persistence.repositories.json.json_repositories import COLLECTION_KEYS

logger = logging.getLogger(__name__)


def init_store(store: DocumentStore, force: bool = False) -> Dict[str, str]:
    """
    Write [] for every collection that does not exist yet. With force=True
    existing collections are reset as well. Returns {key: "created" | "reset" | "skipped"}.
    """
    outcome = {}
    for key in COLLECTION_KEYS:
        exists = store.exists(key)
        if exists and not force:
            logger.info("skip %s (already exists)", key)
            outcome[key] = "skipped"
            continue
        store.put(key, [])
        outcome[key] = "reset" if exists else "created"
        logger.info("%s %s on %s", outcome[key], key, store.describe())
    return outcome
