from __future__ import annotations

from dataclasses import dataclass

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.services.parallel_crawler import ParallelWebCrawler
from wordcrawl.services.protocols import PageParser, WebCrawler
from wordcrawl.services.sequential_crawler import SequentialWebCrawler


@dataclass(frozen=True)
class WebCrawlerFactory:
    clock: object
    lock_stripes: int = 16

    def get(self, config: CrawlerConfig, page_parser: PageParser) -> WebCrawler:
        if config is None:
            raise ValueError("config is required")
        mode = (config.implementation_override or "parallel").strip().lower()
        if mode == "parallel":
            return ParallelWebCrawler(
                clock=self.clock,
                page_parser=page_parser,
                config=config,
                lock_stripes=self.lock_stripes,
            )
        if mode == "sequential":
            return SequentialWebCrawler(clock=self.clock, page_parser=page_parser, config=config)
        raise ValueError(f"Unknown implementation_override: {config.implementation_override!r}")
