import threading
from collections import deque
from typing import Deque, List

from django.apps import apps

HISTORY_SIZE = 5


class SentenceHistory:
    """
    Rolling window of the most recently submitted sentences, oldest first.
    One instance is shared by every request; all access goes through a lock
    so append + eviction are never observed half-done.
    """
    def __init__(self, capacity: int = HISTORY_SIZE):
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 1:
            raise ValueError(f"History capacity must be a positive integer; got {capacity!r}.")
        self._capacity = capacity
        self._items: Deque[str] = deque()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _append(self, sentence: str) -> None:
        self._items.append(sentence)
        while len(self._items) > self._capacity:
            self._items.popleft()

    def record(self, sentence: str) -> None:
        """Append a sentence, evicting the oldest once over capacity."""
        with self._lock:
            self._append(sentence)

    def snapshot(self) -> List[str]:
        """Copy of the current contents in insertion order."""
        with self._lock:
            return list(self._items)

    def record_and_snapshot(self, sentence: str) -> List[str]:
        """Record and read back in one critical section."""
        with self._lock:
            self._append(sentence)
            return list(self._items)


def get_history() -> SentenceHistory:
    """Get the history owned by the tokenplot app config."""
    return apps.get_app_config("tokenplot").history
