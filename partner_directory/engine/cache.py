"""Process-wide slot holding the latest joined partner list."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from threading import Lock
from typing import Sequence

from .records import PartnerSolution


@dataclass(frozen=True, slots=True)
class CacheState:
    """Immutable generation of the cache; swapped as a single reference."""

    items: tuple[PartnerSolution, ...] = ()
    loaded_at: datetime | None = None

    @property
    def loaded(self) -> bool:
        return self.loaded_at is not None


class JoinedCache:
    """Whole-list replacement cache read without locking.

    Readers grab ``self._state`` once and work on that generation, so they see
    either the complete old list or the complete new one.
    """

    def __init__(self) -> None:
        self._state = CacheState()
        self._write_lock = Lock()

    def publish(self, items: Sequence[PartnerSolution]) -> CacheState:
        state = CacheState(items=tuple(items), loaded_at=datetime.now(timezone.utc))
        with self._write_lock:
            self._state = state
        return state

    def snapshot(self) -> tuple[PartnerSolution, ...]:
        return self._state.items

    def state(self) -> CacheState:
        return self._state

    def __len__(self) -> int:
        return len(self._state.items)


__all__ = ["CacheState", "JoinedCache"]
