import re
import threading
from datetime import datetime, timezone

import pytest

from wordcrawl.domain import CrawlContext, CrawlerConfig, CrawlTask
from wordcrawl.domain.http_response import HttpResponse


def test_config_compiles_patterns_and_exposes_fields():
    cfg = CrawlerConfig(
        start_pages=["http://example.com"],
        max_depth=3,
        timeout_seconds=5,
        popular_word_count=10,
        ignored_urls=[r"http://example\.com/private.*"],
        ignored_words=[re.compile(r"^.{1,3}$")],
        result_path="out.json",
    )
    assert cfg.start_pages == ["http://example.com"]
    assert cfg.max_depth == 3
    assert cfg.timeout_seconds == 5.0
    assert cfg.popular_word_count == 10
    assert cfg.ignored_urls[0].fullmatch("http://example.com/private/a")
    assert cfg.ignored_words[0].pattern == "^.{1,3}$"
    assert cfg.result_path == "out.json"
    assert cfg.profile_output_path is None
    assert cfg.implementation_override == "parallel"
    assert cfg.on_parse_error == "skip"


def test_config_rejects_unknown_implementation():
    with pytest.raises(ValueError, match="implementation_override"):
        CrawlerConfig(implementation_override="quantum")


def test_config_rejects_unknown_failure_policy():
    with pytest.raises(ValueError, match="on_parse_error"):
        CrawlerConfig(on_parse_error="retry")


def test_child_task_decrements_depth_and_keeps_deadline():
    deadline = datetime(2026, 10, 18, tzinfo=timezone.utc)
    task = CrawlTask(url="A", depth_remaining=2, deadline=deadline)
    child = task.child("B")
    assert child == CrawlTask(url="B", depth_remaining=1, deadline=deadline)
    assert task.depth_remaining == 2


def test_context_failure_counter_is_thread_safe(fake_clock):
    context = CrawlContext(CrawlerConfig(), fake_clock)

    def fail_many():
        for _ in range(500):
            context.increment_urls_failed()

    threads = [threading.Thread(target=fail_many) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert context.urls_failed == 2000


def test_context_stop_signal(fake_clock):
    context = CrawlContext(CrawlerConfig(), fake_clock)
    assert not context.is_stopped()
    context.mark_stopped()
    assert context.is_stopped()


def test_http_response_helpers():
    assert HttpResponse(200, "").is_success
    assert not HttpResponse(404, "").is_success
    assert HttpResponse(200, "", "text/html; charset=utf-8").is_html
    assert HttpResponse(200, "").is_html
    assert not HttpResponse(200, "", "application/pdf").is_html
