"""Teaser generation and search result assembly."""

from teaser.search.teaser import (
    SEARCH_TERM_WEIGHT,
    SENTENCE_START_WEIGHT,
    WORD_WEIGHT,
    WeightedWord,
    make_teaser,
    select_window,
    weigh_words,
    window_sums,
)
from teaser.search.results import (
    Document,
    IndexHit,
    SearchIndex,
    TeaserHit,
    TeaserPage,
    search_teasers,
    split_query,
)

__all__ = [
    "SEARCH_TERM_WEIGHT",
    "SENTENCE_START_WEIGHT",
    "WORD_WEIGHT",
    "WeightedWord",
    "make_teaser",
    "select_window",
    "weigh_words",
    "window_sums",
    "Document",
    "IndexHit",
    "SearchIndex",
    "TeaserHit",
    "TeaserPage",
    "search_teasers",
    "split_query",
]
