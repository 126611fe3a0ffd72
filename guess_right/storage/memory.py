"""
GuessRight — Сховище в пам'яті

Зберігає документи у словниках. Документи копіюються при записі та
читанні, тому викликачі ніколи не ділять стан.
"""

import copy
import threading
from collections import defaultdict
from typing import Any, Dict, List, Optional

from .base import DocumentStore


class InMemoryStore(DocumentStore):
    """
    Потокобезпечне сховище в пам'яті.

    Приклад:
        store = InMemoryStore()
        store.put("profiles", "p1", {"_id": "p1", "frequency": 0})
        store.increment("profiles", "p1", "frequency")

        with store.lock("profiles", "p1"):
            doc = store.get("profiles", "p1")
            ...
            store.put("profiles", "p1", doc)
    """

    def __init__(self):
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = defaultdict(dict)
        self._lock = threading.Lock()

        # Локи окремих документів
        self._key_locks: Dict[tuple, threading.RLock] = {}
        self._key_locks_guard = threading.Lock()

    def get(self, collection: str, key: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            document = self._collections[collection].get(key)
            return copy.deepcopy(document) if document is not None else None

    def put(self, collection: str, key: str, document: Dict[str, Any]) -> None:
        with self._lock:
            self._collections[collection][key] = copy.deepcopy(document)

    def increment(self, collection: str, key: str, field: str, amount: int = 1) -> int:
        with self._lock:
            document = self._collections[collection].get(key)
            if document is None:
                raise KeyError(f"{collection}/{key} not found")
            document[field] = document.get(field, 0) + amount
            return document[field]

    def delete(self, collection: str, key: str) -> bool:
        with self._key_locks_guard:
            self._key_locks.pop((collection, key), None)
        with self._lock:
            return self._collections[collection].pop(key, None) is not None

    def list(self, collection: str) -> List[Dict[str, Any]]:
        with self._lock:
            return [copy.deepcopy(d) for d in self._collections[collection].values()]

    def lock(self, collection: str, key: str) -> threading.RLock:
        with self._key_locks_guard:
            lock = self._key_locks.get((collection, key))
            if lock is None:
                lock = threading.RLock()
                self._key_locks[(collection, key)] = lock
            return lock

    def clear(self) -> None:
        with self._lock:
            self._collections.clear()

    def __repr__(self) -> str:
        sizes = {name: len(docs) for name, docs in self._collections.items()}
        return f"InMemoryStore({sizes})"
