"""Protocol (interface) definitions for services.

The @profiled operations are the ones the Profiler times when an
implementation is wrapped with the protocol as its capability.
"""

from typing import Protocol, Sequence, runtime_checkable

from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.page_parse_result import PageParseResult
from wordcrawl.profiler import profiled


@runtime_checkable
class PageParser(Protocol):
    """Fetches a single page and reports its words and outgoing links."""

    @profiled
    def parse(self, url: str) -> PageParseResult:
        ...


@runtime_checkable
class WebCrawler(Protocol):
    """Crawls from a set of start pages and reports the popular words."""

    @profiled
    def crawl(self, start_urls: Sequence[str]) -> CrawlResult:
        ...

    def max_parallelism(self) -> int:
        ...
