import functools
import logging
import os
from datetime import timedelta
from typing import Optional, Sequence

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.crawl_task import CrawlTask
from wordcrawl.domain.visited_tracker import VisitedTracker
from wordcrawl.domain.word_count_map import WordCountMap
from wordcrawl.services.crawl_executor import CrawlExecutor
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.fork_join_pool import ForkJoinPool
from wordcrawl.utils.clock import Clock

logger = logging.getLogger(__name__)


class ParallelWebCrawler:
    """Crawls on a ForkJoinPool so that many pages are fetched and parsed at once.

    Each crawl task forks one child per discovered link. A task is joined once
    its whole subtree finished, so `crawl` returns only after every reachable
    task finished.
    """

    def __init__(
        self,
        *,
        clock: Clock,
        page_parser,
        config: CrawlerConfig,
        crawl_policy: Optional[CrawlPolicy] = None,
        lock_stripes: int = 16,
    ):
        self.clock = clock
        self.config = config
        self.executor = CrawlExecutor(page_parser, crawl_policy)
        self.lock_stripes = int(lock_stripes)

    def max_parallelism(self) -> int:
        return os.cpu_count() or 1

    def pool_size(self) -> int:
        """Requested parallelism clamped to the available CPUs."""
        available = self.max_parallelism()
        requested = self.config.parallelism
        if requested is None or requested <= 0:
            return available
        return min(requested, available)

    def crawl(self, start_urls: Sequence[str]) -> CrawlResult:
        deadline = self.clock.now() + timedelta(seconds=self.config.timeout_seconds)
        context = CrawlContext(
            self.config,
            self.clock,
            visited_tracker=VisitedTracker(stripes=self.lock_stripes),
            word_counts=WordCountMap(stripes=self.lock_stripes),
        )
        tasks = [CrawlTask(url=url, depth_remaining=self.config.max_depth, deadline=deadline) for url in start_urls]

        with ForkJoinPool(self.pool_size()) as pool:
            logger.info("Crawling %s start pages on %s workers", len(tasks), pool.parallelism)
            pool.invoke_all([functools.partial(self._crawl_task, task, context, pool) for task in tasks])

        result = self.executor.build_result(context)
        logger.info(
            "Crawl finished: %s URLs visited, %s failed, %s popular words",
            result.urls_visited,
            result.urls_failed,
            len(result.word_counts),
        )
        return result

    def _crawl_task(self, task: CrawlTask, context: CrawlContext, pool: ForkJoinPool) -> None:
        for child in self.executor.visit(task, context):
            pool.fork(functools.partial(self._crawl_task, child, context, pool))
