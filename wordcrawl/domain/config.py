from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

IMPLEMENTATIONS = ("parallel", "sequential")
PARSE_ERROR_POLICIES = ("skip", "abort")


@dataclass(frozen=True)
class CrawlerConfigData:
    """Crawl-behavior fields for a crawler configuration."""

    start_pages: list[str]
    max_depth: int
    timeout_seconds: float
    popular_word_count: int
    parallelism: Optional[int] = None
    ignored_urls: list[re.Pattern] = field(default_factory=list)
    ignored_words: list[re.Pattern] = field(default_factory=list)
    implementation_override: str = "parallel"
    on_parse_error: str = "skip"


@dataclass(frozen=True)
class CrawlerOutputSettings:
    """Where the crawl result and the profiler report are written."""

    result_path: Optional[str] = None
    profile_output_path: Optional[str] = None


class CrawlerConfig:
    """Configuration record composed of crawl settings + output settings.

    Callers construct it with flat keyword arguments; components that only
    need the crawl behavior can depend on `data`.
    """

    def __init__(
        self,
        start_pages=None,
        max_depth: int = 0,
        timeout_seconds: float = 1.0,
        popular_word_count: int = 0,
        parallelism: Optional[int] = None,
        ignored_urls=None,
        ignored_words=None,
        implementation_override: str = "parallel",
        on_parse_error: str = "skip",
        result_path: Optional[str] = None,
        profile_output_path: Optional[str] = None,
    ):
        if implementation_override not in IMPLEMENTATIONS:
            raise ValueError(f"Unknown implementation_override: {implementation_override!r}")
        if on_parse_error not in PARSE_ERROR_POLICIES:
            raise ValueError(f"Unknown on_parse_error: {on_parse_error!r}")

        self.data = CrawlerConfigData(
            start_pages=list(start_pages or []),
            max_depth=int(max_depth),
            timeout_seconds=float(timeout_seconds),
            popular_word_count=int(popular_word_count),
            parallelism=parallelism,
            ignored_urls=[_compile(p) for p in (ignored_urls or [])],
            ignored_words=[_compile(p) for p in (ignored_words or [])],
            implementation_override=implementation_override,
            on_parse_error=on_parse_error,
        )
        self.output = CrawlerOutputSettings(
            result_path=result_path,
            profile_output_path=profile_output_path,
        )

    @property
    def start_pages(self) -> list[str]:
        return self.data.start_pages

    @property
    def max_depth(self) -> int:
        return self.data.max_depth

    @property
    def timeout_seconds(self) -> float:
        return self.data.timeout_seconds

    @property
    def popular_word_count(self) -> int:
        return self.data.popular_word_count

    @property
    def parallelism(self) -> Optional[int]:
        return self.data.parallelism

    @property
    def ignored_urls(self) -> list[re.Pattern]:
        return self.data.ignored_urls

    @property
    def ignored_words(self) -> list[re.Pattern]:
        return self.data.ignored_words

    @property
    def implementation_override(self) -> str:
        return self.data.implementation_override

    @property
    def on_parse_error(self) -> str:
        return self.data.on_parse_error

    @property
    def result_path(self) -> Optional[str]:
        return self.output.result_path

    @property
    def profile_output_path(self) -> Optional[str]:
        return self.output.profile_output_path

    def __repr__(self):
        return (
            f"<CrawlerConfig start_pages={self.start_pages} max_depth={self.max_depth} "
            f"implementation={self.implementation_override}>"
        )


def _compile(pattern) -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)
