from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..core.constants import SESSION_STORAGE_KEY, SNAPSHOT_STORAGE_KEY
from .repository import Storage

logger = logging.getLogger(__name__)


class SnapshotPersistence:
    """Persistence port of the data store: ``load()`` / ``save(snapshot)``.

    The snapshot is one JSON object under a single well-known key.
    """

    def __init__(self, storage: Storage, *, key: str = SNAPSHOT_STORAGE_KEY):
        self._storage = storage
        self._key = key

    def load(self) -> Optional[dict[str, Any]]:
        """Return the stored snapshot, or None when absent or unparsable."""
        raw = self._storage.get_item(self._key)
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except (TypeError, json.JSONDecodeError) as e:
            logger.warning("Stored snapshot under %r is not valid JSON: %s", self._key, e)
            return None
        if not isinstance(data, dict):
            logger.warning("Stored snapshot under %r is not an object", self._key)
            return None
        return data

    def save(self, snapshot: dict[str, Any]) -> None:
        self._storage.set_item(self._key, json.dumps(snapshot, ensure_ascii=False))


class SessionPointer:
    """The logged-in user id, kept apart from the snapshot."""

    def __init__(self, storage: Storage, *, key: str = SESSION_STORAGE_KEY):
        self._storage = storage
        self._key = key

    def get(self) -> Optional[str]:
        return self._storage.get_item(self._key) or None

    def set(self, user_id: str) -> None:
        self._storage.set_item(self._key, user_id)

    def clear(self) -> None:
        self._storage.remove_item(self._key)
