import threading
from typing import List, Set


class VisitedTracker:
    """
    Tracks which URLs have been claimed during a crawl.

    Safe to share between worker threads. `mark_if_absent` is the single
    deduplication point of a crawl: among any number of concurrent callers
    for the same URL exactly one gets True.
    """

    def __init__(self, stripes: int = 16):
        count = max(1, int(stripes))
        self._locks: List[threading.Lock] = [threading.Lock() for _ in range(count)]
        self._shards: List[Set[str]] = [set() for _ in range(count)]

    def _index(self, url: str) -> int:
        return hash(url) % len(self._locks)

    def mark_if_absent(self, url: str) -> bool:
        """Mark a URL as visited. Returns False if it was already marked."""
        i = self._index(url)
        with self._locks[i]:
            if url in self._shards[i]:
                return False
            self._shards[i].add(url)
            return True

    def is_visited(self, url: str) -> bool:
        """Check if a URL has been visited."""
        i = self._index(url)
        with self._locks[i]:
            return url in self._shards[i]

    def __len__(self) -> int:
        total = 0
        for lock, shard in zip(self._locks, self._shards):
            with lock:
                total += len(shard)
        return total
