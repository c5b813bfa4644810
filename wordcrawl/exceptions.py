"""Custom exceptions for wordcrawl."""


class ConfigNotFoundError(Exception):
    """Raised when a crawl config file cannot be found or read."""

    def __init__(self, config_path: str, reason: str = "not found"):
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Config '{config_path}' {reason}")


class InvalidConfigError(ValueError):
    """Raised when a crawl config contains a missing or out-of-range value."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


class NoProfiledOperationsError(ValueError):
    """Raised when wrapping a capability that declares no @profiled operations."""

    def __init__(self, capability: type):
        self.capability = capability
        super().__init__(f"{capability.__qualname__} does not declare any @profiled operations")


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class CrawlAbortedError(Exception):
    """Raised by a crawl running with on_parse_error=abort after a page failed to parse."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"Crawl aborted: parsing {url} failed: {original}")
