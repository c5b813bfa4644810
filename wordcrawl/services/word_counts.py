from typing import Dict, Mapping


def _order_key(item):
    word, count = item
    return (-count, -len(word), word)


def sort_top(word_counts: Mapping[str, int], popular_word_count: int) -> Dict[str, int]:
    """Return the `popular_word_count` most frequent words, most frequent first.

    Ties are broken by longer word first, then alphabetically, so the
    ordering is total and does not depend on the input's iteration order.
    """
    if popular_word_count <= 0:
        return {}
    ordered = sorted(word_counts.items(), key=_order_key)
    return dict(ordered[:popular_word_count])
