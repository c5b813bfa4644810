from datetime import timedelta

import pytest

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_task import CrawlTask
from wordcrawl.exceptions import CrawlAbortedError
from wordcrawl.services.crawl_executor import CrawlExecutor


def _setup(fake_clock, parser, depth=2, **kwargs):
    context = CrawlContext(CrawlerConfig(**kwargs), fake_clock)
    task = CrawlTask(url="A", depth_remaining=depth, deadline=fake_clock.now() + timedelta(seconds=10))
    return CrawlExecutor(parser), context, task


def test_visit_merges_counts_and_returns_children(fake_clock, graph_parser, example_graph):
    executor, context, task = _setup(fake_clock, graph_parser(example_graph))

    children = executor.visit(task, context)

    assert [c.url for c in children] == ["B", "C"]
    assert all(c.depth_remaining == 1 for c in children)
    assert context.word_counts.to_dict() == {"x": 1}
    assert context.visited_tracker.is_visited("A")


def test_second_visit_of_same_url_is_a_no_op(fake_clock, graph_parser, example_graph):
    parser = graph_parser(example_graph)
    executor, context, task = _setup(fake_clock, parser)

    executor.visit(task, context)
    assert executor.visit(task, context) == []
    assert parser.calls["A"] == 1
    assert context.word_counts.get("x") == 1


def test_skipped_task_is_not_marked_visited(fake_clock, graph_parser, example_graph):
    executor, context, task = _setup(fake_clock, graph_parser(example_graph), depth=0)
    assert executor.visit(task, context) == []
    assert not context.visited_tracker.is_visited("A")


def test_failed_parse_is_skipped_and_counted(fake_clock, graph_parser, example_graph):
    executor, context, task = _setup(fake_clock, graph_parser(example_graph, failing={"A"}))

    assert executor.visit(task, context) == []
    assert context.urls_failed == 1
    assert context.visited_tracker.is_visited("A")
    assert not context.is_stopped()


def test_failed_parse_aborts_when_configured(fake_clock, graph_parser, example_graph):
    executor, context, task = _setup(
        fake_clock, graph_parser(example_graph, failing={"A"}), on_parse_error="abort"
    )

    with pytest.raises(CrawlAbortedError) as excinfo:
        executor.visit(task, context)

    assert excinfo.value.url == "A"
    assert context.is_stopped()
    assert context.urls_failed == 0


def test_build_result_sorts_and_truncates(fake_clock, graph_parser):
    executor, context, _ = _setup(fake_clock, graph_parser({}), popular_word_count=2)
    context.mark_visited("A")
    context.word_counts.merge({"a": 1, "bbb": 4, "cc": 4})

    result = executor.build_result(context)

    assert list(result.word_counts.items()) == [("bbb", 4), ("cc", 4)]
    assert result.urls_visited == 1
    assert result.urls_failed == 0


def test_build_result_of_empty_crawl(fake_clock, graph_parser):
    executor, context, _ = _setup(fake_clock, graph_parser({}), popular_word_count=5)
    result = executor.build_result(context)
    assert result.word_counts == {}
    assert result.urls_visited == 0
