import json
import logging
from typing import TextIO

from wordcrawl.domain.crawl_result import CrawlResult

logger = logging.getLogger(__name__)


class CrawlResultWriter:
    """Serializes a CrawlResult as JSON, keeping the word-count order."""

    def __init__(self, result: CrawlResult):
        self.result = result

    def to_dict(self) -> dict:
        return {
            "word_counts": dict(self.result.word_counts),
            "urls_visited": self.result.urls_visited,
            "urls_failed": self.result.urls_failed,
        }

    def write(self, sink: TextIO) -> None:
        json.dump(self.to_dict(), sink, indent=2)
        sink.write("\n")
        sink.flush()

    def write_to_path(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            self.write(f)
        logger.info("Wrote crawl result to %s", path)
