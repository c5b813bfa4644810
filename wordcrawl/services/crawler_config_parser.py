import re
from typing import Any, Optional

from wordcrawl.domain.config import IMPLEMENTATIONS, PARSE_ERROR_POLICIES, CrawlerConfig
from wordcrawl.exceptions import InvalidConfigError


class CrawlerConfigParser:
    """Parse a YAML dict into a CrawlerConfig.

    Responsibility: schema/validation for crawl config files.
    It does NOT perform filesystem IO.
    """

    def parse(self, data: dict) -> CrawlerConfig:
        return CrawlerConfig(
            start_pages=self._str_list(data, "start_pages"),
            max_depth=self._int(data, "max_depth", default=0, minimum=0),
            timeout_seconds=self._timeout(data),
            popular_word_count=self._int(data, "popular_word_count", default=0, minimum=0),
            parallelism=self._optional_int(data, "parallelism"),
            ignored_urls=self._patterns(data, "ignored_urls"),
            ignored_words=self._patterns(data, "ignored_words"),
            implementation_override=self._choice(data, "implementation_override", IMPLEMENTATIONS, "parallel"),
            on_parse_error=self._choice(data, "on_parse_error", PARSE_ERROR_POLICIES, "skip"),
            result_path=self._optional_str(data, "result_path"),
            profile_output_path=self._optional_str(data, "profile_output_path"),
        )

    def _str_list(self, data: dict, key: str) -> list[str]:
        value = data.get(key) or []
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise InvalidConfigError(key, "expected a list of strings")
        return value

    def _int(self, data: dict, key: str, *, default: int, minimum: int) -> int:
        value = data.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidConfigError(key, f"expected an integer, got {value!r}")
        if value < minimum:
            raise InvalidConfigError(key, f"must be >= {minimum}, got {value}")
        return value

    def _optional_int(self, data: dict, key: str) -> Optional[int]:
        value = data.get(key)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidConfigError(key, f"expected an integer, got {value!r}")
        return value

    def _timeout(self, data: dict) -> float:
        value = data.get("timeout_seconds", 1)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidConfigError("timeout_seconds", f"expected a number, got {value!r}")
        if value <= 0:
            raise InvalidConfigError("timeout_seconds", f"must be > 0, got {value}")
        return float(value)

    def _patterns(self, data: dict, key: str) -> list[re.Pattern]:
        patterns = []
        for raw in self._str_list(data, key):
            try:
                patterns.append(re.compile(raw))
            except re.error as e:
                raise InvalidConfigError(key, f"bad pattern {raw!r}: {e}") from e
        return patterns

    def _choice(self, data: dict, key: str, choices: tuple, default: str) -> str:
        value = data.get(key) or default
        if value not in choices:
            raise InvalidConfigError(key, f"expected one of {', '.join(choices)}, got {value!r}")
        return value

    def _optional_str(self, data: dict, key: str) -> Optional[str]:
        value: Any = data.get(key)
        if value is None or value == "":
            return None
        if not isinstance(value, str):
            raise InvalidConfigError(key, f"expected a string, got {value!r}")
        return value
