import logging
from datetime import timedelta
from typing import Optional, Sequence

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.crawl_task import CrawlTask
from wordcrawl.services.crawl_executor import CrawlExecutor
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.utils.clock import Clock

logger = logging.getLogger(__name__)


class SequentialWebCrawler:
    """Single-threaded depth-first crawler with the same rules as ParallelWebCrawler."""

    def __init__(self, *, clock: Clock, page_parser, config: CrawlerConfig, crawl_policy: Optional[CrawlPolicy] = None):
        self.clock = clock
        self.config = config
        self.executor = CrawlExecutor(page_parser, crawl_policy)

    def max_parallelism(self) -> int:
        return 1

    def crawl(self, start_urls: Sequence[str]) -> CrawlResult:
        deadline = self.clock.now() + timedelta(seconds=self.config.timeout_seconds)
        context = CrawlContext(self.config, self.clock)
        for url in start_urls:
            self._crawl_from(CrawlTask(url=url, depth_remaining=self.config.max_depth, deadline=deadline), context)

        result = self.executor.build_result(context)
        logger.info("Crawl finished: %s URLs visited, %s failed", result.urls_visited, result.urls_failed)
        return result

    def _crawl_from(self, task: CrawlTask, context: CrawlContext) -> None:
        """Depth-first walk with an explicit stack; children are visited in link order."""
        stack = [task]
        while stack:
            children = self.executor.visit(stack.pop(), context)
            stack.extend(reversed(children))
