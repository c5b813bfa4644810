from typing import Dict, Mapping

from wordcrawl.domain.striped_counter import StripedCounter


class WordCountMap:
    """Shared word -> count aggregation for one crawl."""

    def __init__(self, stripes: int = 16):
        self._counter: StripedCounter[int] = StripedCounter(0, stripes=stripes)

    def merge(self, counts: Mapping[str, int]) -> None:
        """Add every count from `counts`; each word is updated atomically."""
        for word, count in counts.items():
            self._counter.add(word, count)

    def get(self, word: str) -> int:
        return self._counter.get(word)

    def to_dict(self) -> Dict[str, int]:
        return self._counter.snapshot()

    def is_empty(self) -> bool:
        return self._counter.is_empty()
