import logging
import re
import string
from typing import Callable, Dict, Iterable, List, Optional
from urllib.parse import urldefrag, urljoin, urlparse

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_PUNCTUATION = re.compile(f"[{re.escape(string.punctuation)}]")

# Elements whose text is never part of the readable page.
_UNWANTED_TAGS = ['script', 'style', 'noscript', 'template', 'svg', 'canvas']


class HtmlContentExtractor:
    """Turns an HTML document into word counts and absolute outgoing links."""

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def soup(self, html: str) -> BeautifulSoup:
        return self._soup_factory(html)

    def extract_words(self, soup: BeautifulSoup, ignored_words: Iterable[re.Pattern] = ()) -> Dict[str, int]:
        """Count the words of the visible text.

        Words are split on whitespace, stripped of ASCII punctuation and
        lower-cased. Empty words and words fully matching an ignored pattern
        are dropped.
        """
        for tag in _UNWANTED_TAGS:
            for element in soup.find_all(tag):
                element.decompose()

        ignored = list(ignored_words)
        counts: Dict[str, int] = {}
        for raw in soup.get_text(separator=" ").split():
            word = _PUNCTUATION.sub("", raw).lower()
            if not word:
                continue
            if any(p.fullmatch(word) for p in ignored):
                continue
            counts[word] = counts.get(word, 0) + 1
        return counts

    def extract_links(self, base_url: str, soup: BeautifulSoup) -> List[str]:
        """Return the http(s) targets of every `<a href>` as absolute URLs without fragments."""
        links: List[str] = []
        for a in soup.find_all("a", href=True):
            abs_url, _ = urldefrag(urljoin(base_url, a.get("href").strip()))
            if urlparse(abs_url).scheme not in ("http", "https"):
                logger.debug("Skipping (unsupported scheme) %s", abs_url)
                continue
            links.append(abs_url)
        return links
