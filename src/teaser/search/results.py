"""
Search Result Teasers

Turns the hits of a search index into displayable results, one teaser
per hit, and renders them as an HTML result list.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from pydantic import AliasChoices, BaseModel, Field

from teaser.search.teaser import StemFunc, make_teaser

logger = logging.getLogger(__name__)


class Document(BaseModel):
    title: str
    body: str


class IndexHit(BaseModel):
    """A single hit as returned by the search index."""

    # elasticlunr names its fields `ref` and `doc`
    reference: str = Field(validation_alias=AliasChoices("reference", "ref"))
    document: Document = Field(validation_alias=AliasChoices("document", "doc"))


class SearchIndex(Protocol):
    def search(self, query: str) -> Iterable[IndexHit | Mapping[str, Any]]: ...


@dataclass
class TeaserHit:
    """A search result ready for display."""

    reference: str
    title: str
    teaser: str  # May include emphasis markup

    def to_html(self) -> str:
        return (
            f'<li><a href="{self.reference}">{self.title}</a>'
            f"<p>{self.teaser}</p></li>"
        )


@dataclass
class TeaserPage:
    """All results for one query."""

    query: str
    hits: list[TeaserHit] = field(default_factory=list)

    def to_html(self) -> str:
        items = "".join(hit.to_html() for hit in self.hits)
        return (
            f"<h2>search results for <tt>{self.query}</tt></h2>"
            f"<ul>{items}</ul>"
        )


def split_query(query: str) -> list[str]:
    """Split a raw query into search terms on single spaces."""
    return query.split(" ")


def search_teasers(
    index: SearchIndex,
    query: str,
    stem: StemFunc | None = None,
    word_count: int | None = None,
) -> TeaserPage:
    """
    Search the index and build a teaser for every hit.

    Args:
        index: Search index collaborator, responsible for ranking.
        query: Raw query string.
        stem: Stemming function passed through to the teaser builder.
        word_count: Teaser window size passed through to the teaser builder.

    Returns:
        TeaserPage with hits in index order
    """
    if not query:
        return TeaserPage(query=query)

    terms = split_query(query)
    page = TeaserPage(query=query)
    for raw in index.search(query):
        hit = raw if isinstance(raw, IndexHit) else IndexHit.model_validate(raw)
        page.hits.append(
            TeaserHit(
                reference=hit.reference,
                title=hit.document.title,
                teaser=make_teaser(
                    hit.document.body, terms, stem=stem, word_count=word_count
                ),
            )
        )

    logger.debug(f"Built {len(page.hits)} teasers for query {query!r}")
    return page
