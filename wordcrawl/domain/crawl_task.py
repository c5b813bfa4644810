from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CrawlTask:
    """A single unit of crawl work: visit `url` with `depth_remaining` hops left."""

    url: str
    depth_remaining: int
    deadline: datetime

    def child(self, url: str) -> "CrawlTask":
        return CrawlTask(url=url, depth_remaining=self.depth_remaining - 1, deadline=self.deadline)
