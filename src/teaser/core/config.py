"""
Teaser Configuration

Settings for snippet generation, read from the environment once at import.
"""

import os


class TeaserSettings:
    """Snippet generation configuration"""

    # Number of words in the sliding window
    TEASER_WORD_COUNT: int = int(os.getenv("TEASER_WORD_COUNT", "30"))

    # Markers placed around matched words
    EMPHASIS_OPEN: str = os.getenv("TEASER_EMPHASIS_OPEN", "<em>")
    EMPHASIS_CLOSE: str = os.getenv("TEASER_EMPHASIS_CLOSE", "</em>")


settings = TeaserSettings()


def _validate_settings(settings: TeaserSettings) -> None:
    """Reject settings the teaser builder cannot work with."""
    if settings.TEASER_WORD_COUNT < 1:
        raise RuntimeError(
            f"Invalid TEASER_WORD_COUNT value: {settings.TEASER_WORD_COUNT}. "
            "Must be a positive integer."
        )
    if not settings.EMPHASIS_OPEN or not settings.EMPHASIS_CLOSE:
        raise RuntimeError(
            "TEASER_EMPHASIS_OPEN and TEASER_EMPHASIS_CLOSE must not be empty."
        )


_validate_settings(settings)
