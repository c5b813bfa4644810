import logging
import re
from typing import Iterable, Optional

from wordcrawl.domain.page_parse_result import PageParseResult
from wordcrawl.services.html_content_extractor import HtmlContentExtractor
from wordcrawl.services.http_service import HttpService

logger = logging.getLogger(__name__)


class HtmlPageParser:
    """Fetches a page over HTTP and extracts its words and links.

    Transport failures propagate as HttpFetchError so the crawler can apply
    its failure policy. Non-success responses and non-HTML bodies yield an
    empty result.
    """

    def __init__(
        self,
        http_service: HttpService,
        ignored_words: Iterable[re.Pattern] = (),
        extractor: Optional[HtmlContentExtractor] = None,
    ):
        self.http_service = http_service
        self.ignored_words = list(ignored_words)
        self.extractor = extractor or HtmlContentExtractor()

    def parse(self, url: str) -> PageParseResult:
        response = self.http_service.fetch(url)

        if not response.is_success:
            logger.warning("Non-success status for %s: %s", url, response.status_code)
            return PageParseResult(word_counts={}, links=[])
        if not response.is_html:
            logger.debug("Skipping (content type %s) %s", response.content_type, url)
            return PageParseResult(word_counts={}, links=[])

        soup = self.extractor.soup(response.text or "")
        # links first: word extraction strips elements from the soup
        links = self.extractor.extract_links(url, soup)
        word_counts = self.extractor.extract_words(soup, self.ignored_words)
        return PageParseResult(word_counts=word_counts, links=links)
