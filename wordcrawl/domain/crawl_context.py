import threading
from typing import Optional

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.domain.visited_tracker import VisitedTracker
from wordcrawl.domain.word_count_map import WordCountMap


class CrawlContext:
    """
    Shared state of a single crawl invocation.

    Every task of the crawl receives the same context explicitly. It owns the
    visited set, the word-count aggregation, the stop signal used by the
    abort policy and the failure accounting of the skip policy.
    """

    def __init__(
        self,
        config: CrawlerConfig,
        clock,
        visited_tracker: Optional[VisitedTracker] = None,
        word_counts: Optional[WordCountMap] = None,
        stop_event: Optional[threading.Event] = None,
    ):
        self.config = config
        self.clock = clock
        self.visited_tracker = visited_tracker if visited_tracker is not None else VisitedTracker()
        self.word_counts = word_counts if word_counts is not None else WordCountMap()
        self.stop_event = stop_event if stop_event is not None else threading.Event()
        self._failures_lock = threading.Lock()
        self.urls_failed: int = 0

    def mark_visited(self, url: str) -> bool:
        """Delegate to visited tracker. True when this caller claimed the URL."""
        return self.visited_tracker.mark_if_absent(url)

    def increment_urls_failed(self, count: int = 1) -> None:
        with self._failures_lock:
            self.urls_failed += int(count)

    def is_stopped(self) -> bool:
        """Check if crawling has stopped."""
        return self.stop_event.is_set()

    def mark_stopped(self) -> None:
        """Mark that crawling should stop."""
        self.stop_event.set()
