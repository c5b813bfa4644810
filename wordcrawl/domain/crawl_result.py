"""Crawl result data model."""
from typing import Dict, NamedTuple


class CrawlResult(NamedTuple):
    """Result of a crawl operation.

    Provides feedback about what happened during the crawl so callers can
    report the most popular words and how much of the graph was covered.
    """
    word_counts: Dict[str, int]
    """Most popular words, ordered by descending count"""

    urls_visited: int
    """Number of distinct URLs claimed by the crawl"""

    urls_failed: int = 0
    """Visited URLs whose parse raised and were skipped"""
