"""
Teaser Generation for Search Results

Selects the most relevant run of words from a document body and
emphasizes the words matching the search terms.

The strategy is as follows:
First, assign a value to each word in the document:
  Words that correspond to search terms (stemmer aware): 40
  Normal words: 2
  First word in a sentence: 8
Then slide a window of a constant number of words over the document and
sum the values of the words within it. The window with the maximum sum
becomes the teaser; among equal maxima the earliest one wins. If no
search term occurs in the body, the teaser is the opening window.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from teaser.analyzer import stem as default_stem
from teaser.core.config import settings

SEARCH_TERM_WEIGHT = 40
SENTENCE_START_WEIGHT = 8
WORD_WEIGHT = 2

SENTENCE_DELIMITER = ". "
WORD_DELIMITER = " "

StemFunc = Callable[[str], str]


@dataclass(frozen=True)
class WeightedWord:
    """A lower-cased word with its score and position in the body."""

    text: str
    weight: int
    offset: int  # index of the first character in the body

    @property
    def end(self) -> int:
        return self.offset + len(self.text)


def weigh_words(
    body: str, stemmed_terms: list[str], stem: StemFunc
) -> tuple[list[WeightedWord], bool]:
    """
    Split the body into sentences and words and score every word.

    Returns:
        The non-empty words in document order, and whether any of them
        matched a search term.
    """
    weighted: list[WeightedWord] = []
    search_term_found = False
    index = 0

    for sentence in body.lower().split(SENTENCE_DELIMITER):
        # The sentence bonus goes to the first non-empty word
        value = SENTENCE_START_WEIGHT
        for word in sentence.split(WORD_DELIMITER):
            if word:
                stemmed = stem(word)
                if any(stemmed.startswith(term) for term in stemmed_terms):
                    value = SEARCH_TERM_WEIGHT
                    search_term_found = True
                weighted.append(WeightedWord(word, value, index))
                value = WORD_WEIGHT
            # ' ' or '.' if last word in sentence
            index += len(word) + 1
        # the sentence split consumed two characters
        index += 1

    return weighted, search_term_found


def window_sums(words: list[WeightedWord], window_size: int) -> list[int]:
    """Sum of weights for every window of `window_size` consecutive words."""
    cur_sum = sum(word.weight for word in words[:window_size])
    sums = [cur_sum]
    for i in range(len(words) - window_size):
        cur_sum -= words[i].weight
        cur_sum += words[i + window_size].weight
        sums.append(cur_sum)
    return sums


def select_window(sums: list[int], search_term_found: bool) -> int:
    """Index of the window to show."""
    if not search_term_found:
        return 0

    max_sum = 0
    max_index = 0
    # Backwards; an equal sum further left replaces the current maximum,
    # so the earliest of several maxima is kept
    for i in range(len(sums) - 1, -1, -1):
        if sums[i] >= max_sum:
            max_sum = sums[i]
            max_index = i
    return max_index


def make_teaser(
    body: str,
    search_terms: Iterable[str],
    stem: StemFunc | None = None,
    word_count: int | None = None,
    emphasis: tuple[str, str] | None = None,
) -> str:
    """
    Build a teaser for a document body.

    Args:
        body: The full document text.
        search_terms: Raw search terms, as typed by the user.
        stem: Function reducing a lower-cased word to its root form.
        word_count: Number of words in the teaser window.
        emphasis: Opening and closing markers placed around matched words.

    Returns:
        The slice of the body covered by the best window, with matched
        words wrapped in the emphasis markers.

    Raises:
        TypeError: If body is not a string or search_terms is not a
            collection of strings.
        ValueError: If word_count is less than 1.
    """
    if not isinstance(body, str):
        raise TypeError(f"body must be a str, not {type(body).__name__}")
    if search_terms is None or isinstance(search_terms, str):
        raise TypeError("search_terms must be a collection of strings")
    search_terms = list(search_terms)

    stem = stem or default_stem
    if word_count is None:
        word_count = settings.TEASER_WORD_COUNT
    if word_count < 1:
        raise ValueError(f"word_count must be positive, got {word_count}")
    open_mark, close_mark = emphasis or (
        settings.EMPHASIS_OPEN,
        settings.EMPHASIS_CLOSE,
    )

    stemmed_terms = [stem(term.lower()) for term in search_terms]
    weighted, search_term_found = weigh_words(body, stemmed_terms, stem)

    if not weighted:
        return body

    window_size = min(len(weighted), word_count)
    start = select_window(window_sums(weighted, window_size), search_term_found)

    teaser_split = []
    index = weighted[start].offset
    for word in weighted[start : start + window_size]:
        if index < word.offset:
            # missing text from index to start of `word`
            teaser_split.append(body[index : word.offset])
        matched = word.weight == SEARCH_TERM_WEIGHT
        if matched:
            teaser_split.append(open_mark)
        index = word.end
        teaser_split.append(body[word.offset : index])
        if matched:
            teaser_split.append(close_mark)

    return "".join(teaser_split)
