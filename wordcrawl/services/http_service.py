import logging
from typing import Callable

import requests

from wordcrawl.domain.http_response import HttpResponse
from wordcrawl.exceptions import HttpFetchError

logger = logging.getLogger(__name__)


class HttpService:
    """
    Thin wrapper over an HTTP GET callable used by the page parser.

    The callable (``requests.get`` in production) is injected so tests can
    hand in a Mock. Only transport errors are translated; status codes are
    reported as-is and interpreted by the caller.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        logger.debug("GET %s", url)
        try:
            resp = self.http_client(url, headers={"User-Agent": self.user_agent}, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        headers = getattr(resp, "headers", None) or {}
        response = HttpResponse(resp.status_code, resp.text, headers.get("Content-Type"))
        logger.debug("GET %s -> %s (%s)", url, response.status_code, response.content_type)
        return response
