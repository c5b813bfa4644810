"""Domain objects for wordcrawl - explicit re-exports to satisfy linters."""
from .config import CrawlerConfig as CrawlerConfig
from .crawl_context import CrawlContext as CrawlContext
from .crawl_result import CrawlResult as CrawlResult
from .crawl_task import CrawlTask as CrawlTask
from .page_parse_result import PageParseResult as PageParseResult

__all__ = ["CrawlerConfig", "CrawlContext", "CrawlResult", "CrawlTask", "PageParseResult"]
