from __future__ import annotations

from typing import Protocol

from .state import ContinuityState


class ContinuityRepository(Protocol):
    """Whole-document store, one continuity document per owner."""

    def load(self, owner_id: str) -> ContinuityState:
        """Return the owner's document, or an empty state when none exists.

        Raises PersistenceError when the store cannot be read.
        """

        raise NotImplementedError

    def save(self, owner_id: str, state: ContinuityState) -> bool:
        """Replace the owner's document. Returns False when the write failed."""

        raise NotImplementedError
