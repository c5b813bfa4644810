import pytest

from wordcrawl.exceptions import InvalidConfigError
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser


def test_parse_full_config():
    parser = CrawlerConfigParser()
    cfg = parser.parse(
        {
            "start_pages": ["http://example.com", "http://example.org"],
            "max_depth": 3,
            "timeout_seconds": 2.5,
            "popular_word_count": 5,
            "parallelism": 4,
            "ignored_urls": [r"http://example\.com/private.*"],
            "ignored_words": ["^.{1,3}$"],
            "implementation_override": "sequential",
            "on_parse_error": "abort",
            "result_path": "out.json",
            "profile_output_path": "profile.txt",
        }
    )
    assert cfg.start_pages == ["http://example.com", "http://example.org"]
    assert cfg.max_depth == 3
    assert cfg.timeout_seconds == 2.5
    assert cfg.popular_word_count == 5
    assert cfg.parallelism == 4
    assert cfg.ignored_urls[0].fullmatch("http://example.com/private/x")
    assert cfg.ignored_words[0].fullmatch("the")
    assert cfg.implementation_override == "sequential"
    assert cfg.on_parse_error == "abort"
    assert cfg.result_path == "out.json"
    assert cfg.profile_output_path == "profile.txt"


def test_parse_defaults():
    cfg = CrawlerConfigParser().parse({})
    assert cfg.start_pages == []
    assert cfg.max_depth == 0
    assert cfg.timeout_seconds == 1.0
    assert cfg.popular_word_count == 0
    assert cfg.parallelism is None
    assert cfg.ignored_urls == []
    assert cfg.implementation_override == "parallel"
    assert cfg.on_parse_error == "skip"
    assert cfg.result_path is None
    assert cfg.profile_output_path is None


@pytest.mark.parametrize(
    "data, key",
    [
        ({"start_pages": "http://example.com"}, "start_pages"),
        ({"start_pages": [1]}, "start_pages"),
        ({"max_depth": -1}, "max_depth"),
        ({"max_depth": "3"}, "max_depth"),
        ({"max_depth": True}, "max_depth"),
        ({"timeout_seconds": 0}, "timeout_seconds"),
        ({"timeout_seconds": "soon"}, "timeout_seconds"),
        ({"popular_word_count": -5}, "popular_word_count"),
        ({"parallelism": 1.5}, "parallelism"),
        ({"ignored_urls": ["("]}, "ignored_urls"),
        ({"ignored_words": "the"}, "ignored_words"),
        ({"implementation_override": "quantum"}, "implementation_override"),
        ({"on_parse_error": "retry"}, "on_parse_error"),
        ({"result_path": 7}, "result_path"),
    ],
)
def test_parse_rejects_invalid_values(data, key):
    with pytest.raises(InvalidConfigError) as excinfo:
        CrawlerConfigParser().parse(data)
    assert excinfo.value.key == key


def test_invalid_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        CrawlerConfigParser().parse({"max_depth": -1})
