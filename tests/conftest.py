import threading
import time
from collections import Counter
from datetime import datetime, timedelta, timezone

import pytest

from wordcrawl.domain.page_parse_result import PageParseResult


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start=datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc)):
        self._now = start
        self._lock = threading.Lock()

    def now(self):
        with self._lock:
            return self._now

    def advance(self, delta: timedelta):
        with self._lock:
            self._now += delta


class GraphPageParser:
    """In-memory page parser over a fixed link graph.

    `pages` maps url -> (word_counts, links). Unknown urls parse to an empty
    page. Urls in `failing` raise RuntimeError.
    """

    def __init__(self, pages, failing=(), delay: float = 0.0, on_parse=None):
        self.pages = pages
        self.failing = set(failing)
        self.delay = delay
        self.on_parse = on_parse
        self.calls = Counter()
        self._lock = threading.Lock()

    def parse(self, url):
        with self._lock:
            self.calls[url] += 1
        if self.on_parse is not None:
            self.on_parse(url)
        if self.delay:
            time.sleep(self.delay)
        if url in self.failing:
            raise RuntimeError(f"cannot parse {url}")
        counts, links = self.pages.get(url, ({}, []))
        return PageParseResult(word_counts=dict(counts), links=list(links))


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def graph_parser():
    """Factory fixture: graph_parser(pages, failing=(), delay=0.0, on_parse=None)."""
    return GraphPageParser


@pytest.fixture
def example_graph():
    return {
        "A": ({"x": 1}, ["B", "C"]),
        "B": ({"x": 2}, []),
        "C": ({"y": 1}, ["A"]),
    }
