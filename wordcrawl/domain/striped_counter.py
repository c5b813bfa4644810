import threading
from typing import Any, Dict, Generic, Hashable, List, TypeVar

V = TypeVar("V")


class StripedCounter(Generic[V]):
    """
    Thread-safe accumulator keyed by hashable values.

    Keys are spread over a fixed number of stripes, each guarded by its own
    lock, so that updates to keys living in different stripes never contend.
    A single `add()` is an atomic read-add-write for its key.
    """

    def __init__(self, zero: V, stripes: int = 16):
        """Create a counter.

        `zero` is the value a missing key starts from (0, timedelta(0), ...).
        `stripes` is clamped to at least 1.
        """
        self._zero = zero
        count = max(1, int(stripes))
        self._locks: List[threading.Lock] = [threading.Lock() for _ in range(count)]
        self._shards: List[Dict[Hashable, Any]] = [{} for _ in range(count)]

    def _index(self, key: Hashable) -> int:
        return hash(key) % len(self._locks)

    def add(self, key: Hashable, amount: V) -> V:
        """Add `amount` to the value for `key` and return the new total."""
        i = self._index(key)
        with self._locks[i]:
            total = self._shards[i].get(key, self._zero) + amount
            self._shards[i][key] = total
            return total

    def get(self, key: Hashable) -> V:
        i = self._index(key)
        with self._locks[i]:
            return self._shards[i].get(key, self._zero)

    def snapshot(self) -> Dict[Hashable, V]:
        """Return a plain dict copy of every key, one stripe at a time."""
        merged: Dict[Hashable, V] = {}
        for lock, shard in zip(self._locks, self._shards):
            with lock:
                merged.update(shard)
        return merged

    def __len__(self) -> int:
        total = 0
        for lock, shard in zip(self._locks, self._shards):
            with lock:
                total += len(shard)
        return total

    def is_empty(self) -> bool:
        return len(self) == 0
