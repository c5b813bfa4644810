from wordcrawl.services.word_counts import sort_top


def test_orders_by_descending_count():
    result = sort_top({"a": 1, "b": 5, "c": 3}, 3)
    assert list(result.items()) == [("b", 5), ("c", 3), ("a", 1)]


def test_limits_to_popular_word_count():
    result = sort_top({"a": 1, "b": 5, "c": 3}, 2)
    assert list(result) == ["b", "c"]


def test_ties_prefer_longer_words_then_alphabetical():
    result = sort_top({"bb": 2, "a": 2, "ccc": 2, "aa": 2}, 4)
    assert list(result) == ["ccc", "aa", "bb", "a"]


def test_ordering_does_not_depend_on_input_order():
    forward = {"pear": 2, "plum": 2, "fig": 2, "kiwi": 1}
    backward = dict(reversed(list(forward.items())))
    assert list(sort_top(forward, 4).items()) == list(sort_top(backward, 4).items())


def test_zero_popular_word_count_is_empty():
    assert sort_top({"a": 1}, 0) == {}


def test_asking_for_more_than_available_returns_everything():
    assert sort_top({"a": 1}, 10) == {"a": 1}
