import logging
from typing import List, Optional

from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.crawl_task import CrawlTask
from wordcrawl.domain.page_parse_result import PageParseResult
from wordcrawl.exceptions import CrawlAbortedError
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.word_counts import sort_top

logger = logging.getLogger(__name__)


class CrawlExecutor:
    """Executes the work of one crawl task against the shared crawl context.

    This class owns the per-page control-flow (policy checks, deduplication,
    parsing, merging word counts). Scheduling of the returned child tasks is
    left to the crawler, which decides whether they run in parallel.
    """

    def __init__(self, page_parser, crawl_policy: Optional[CrawlPolicy] = None):
        self.page_parser = page_parser
        self.crawl_policy = crawl_policy or CrawlPolicy()

    def parse(self, url: str, context: CrawlContext) -> Optional[PageParseResult]:
        """Parse `url`, applying the configured failure policy.

        Returns None when the page failed and the crawl skips it. Raises
        CrawlAbortedError when the crawl aborts on failures.
        """
        try:
            return self.page_parser.parse(url)
        except Exception as e:
            if context.config.on_parse_error == "abort":
                logger.error("Parse failed for %s, aborting crawl: %s", url, e)
                context.mark_stopped()
                raise CrawlAbortedError(url, e) from e
            logger.warning("Parse failed for %s, skipping: %s", url, e, exc_info=True)
            context.increment_urls_failed()
            return None

    def visit(self, task: CrawlTask, context: CrawlContext) -> List[CrawlTask]:
        """Visit a single page and return the child tasks for its links."""
        if self.crawl_policy.should_skip(task, context):
            return []
        if not context.mark_visited(task.url):
            logger.debug("Skipping (visited) %s", task.url)
            return []

        result = self.parse(task.url, context)
        if result is None:
            return []

        context.word_counts.merge(result.word_counts)
        logger.info("Parsed %s -> %s words, %s links", task.url, len(result.word_counts), len(result.links))
        return [task.child(link) for link in result.links]

    def build_result(self, context: CrawlContext) -> CrawlResult:
        counts = context.word_counts
        word_counts = {} if counts.is_empty() else sort_top(counts.to_dict(), context.config.popular_word_count)
        return CrawlResult(
            word_counts=word_counts,
            urls_visited=len(context.visited_tracker),
            urls_failed=context.urls_failed,
        )
