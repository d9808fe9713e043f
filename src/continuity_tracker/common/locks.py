from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator


class OwnerLockRegistry:
    """One lock per owner id.

    Mutations of an owner's continuity document are whole-document
    read-modify-write cycles; holding the owner's lock for the full cycle
    keeps two writers in this process from overwriting each other.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: Dict[str, threading.Lock] = {}

    def _lock_for(self, owner_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(owner_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[owner_id] = lock
            return lock

    @contextmanager
    def hold(self, owner_id: str) -> Iterator[None]:
        lock = self._lock_for(owner_id)
        with lock:
            yield
