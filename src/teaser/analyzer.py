"""
English Stemmer (Shared Kernel)

Reduces words to their Porter root form so that morphological variants
of a search term ("sleeps", "sleeping") match the same word.
"""

import logging

from nltk.stem.porter import PorterStemmer

logger = logging.getLogger(__name__)


class EnglishStemmer:
    # Words this short carry no removable suffix
    MIN_LENGTH = 3

    def __init__(self):
        self._porter = PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM)

    def stem(self, word: str) -> str:
        """
        Stem a single lower-cased word.

        Raises:
            Exception: Re-raises stemming errors after logging
        """
        if len(word) < self.MIN_LENGTH:
            return word

        try:
            return self._porter.stem(word)
        except Exception as e:
            logger.error(
                f"Stemming failed for word {word!r}: {e}",
                exc_info=True,
            )
            raise


# Global instance
stemmer = EnglishStemmer()


def stem(word: str) -> str:
    return stemmer.stem(word)
