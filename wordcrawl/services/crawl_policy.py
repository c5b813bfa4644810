import logging

from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_task import CrawlTask

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Encapsulates crawl decision rules: stop signal, deadline, depth and ignored URLs.

    Separates policy decisions from crawl orchestration logic. None of the
    checks has side effects on the crawl state.
    """

    def should_skip_due_to_stop(self, task: CrawlTask, context: CrawlContext) -> bool:
        if context.is_stopped():
            logger.debug("Skipping (crawl stopped) %s", task.url)
            return True
        return False

    def should_skip_due_to_deadline(self, task: CrawlTask, context: CrawlContext) -> bool:
        """Check if the crawl deadline has been reached."""
        if context.clock.now() >= task.deadline:
            logger.debug("Skipping (deadline reached) %s", task.url)
            return True
        return False

    def should_skip_due_to_depth(self, task: CrawlTask) -> bool:
        """Check if URL should be skipped due to max depth reached."""
        if task.depth_remaining <= 0:
            logger.debug("Skipping (max depth reached) %s", task.url)
            return True
        return False

    def should_skip_due_to_ignored_url(self, task: CrawlTask, context: CrawlContext) -> bool:
        """Check if URL fully matches one of the configured ignored patterns."""
        for pattern in context.config.ignored_urls:
            if pattern.fullmatch(task.url):
                logger.debug("Skipping (ignored by %s) %s", pattern.pattern, task.url)
                return True
        return False

    def should_skip(self, task: CrawlTask, context: CrawlContext) -> bool:
        return (
            self.should_skip_due_to_stop(task, context)
            or self.should_skip_due_to_deadline(task, context)
            or self.should_skip_due_to_depth(task)
            or self.should_skip_due_to_ignored_url(task, context)
        )
