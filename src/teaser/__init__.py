"""Search-result teaser generation."""

from teaser.search.teaser import make_teaser

__all__ = ["make_teaser"]
