"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from wordcrawl import config as env
from wordcrawl.profiler import Profiler
from wordcrawl.services.config_file_store import ConfigFileStore
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser
from wordcrawl.services.crawler_factory import WebCrawlerFactory
from wordcrawl.services.http_service import HttpService
from wordcrawl.utils.clock import SystemClock


# Environment variables used by the container (read via `wordcrawl.config` helpers).
#
# USER_AGENT (str, default: "wordcrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for a single page fetch. Independent of the crawl timeout.
#
# WORDCRAWL_LOCK_STRIPES (int, default: 16)
#   Number of lock stripes of the shared visited set and word-count map.
ENV = {
    "user_agent": env.get_str_env("USER_AGENT", "wordcrawl/0.1"),
    "http_timeout": env.get_int_env("HTTP_TIMEOUT", 10),
    "lock_stripes": env.get_int_env("WORDCRAWL_LOCK_STRIPES", 16),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for wordcrawl."""

    config = providers.Configuration(default=ENV)

    clock = providers.Singleton(SystemClock)

    # One profiler per process so every wrapped object shares its state
    profiler = providers.Singleton(
        Profiler,
        clock=clock,
    )

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.user_agent.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.http_timeout.as_(int),
    )

    config_file_store = providers.Singleton(ConfigFileStore)

    config_parser = providers.Singleton(CrawlerConfigParser)

    crawler_factory = providers.Singleton(
        WebCrawlerFactory,
        clock=clock,
        lock_stripes=config.lock_stripes.as_(int),
    )
