from typing import Dict, List, NamedTuple


class PageParseResult(NamedTuple):
    """Words and outgoing links found on a single page."""
    word_counts: Dict[str, int]
    links: List[str]
