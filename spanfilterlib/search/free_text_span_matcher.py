"""Free-text span search.

A query is split on whitespace. Tokens starting with "-" are exclusion terms,
everything else is an inclusion term. A span matches when every inclusion
term and none of the exclusion terms is found on it.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from spanfilterlib.models.match_result import MatchResult
from spanfilterlib.models.span import Span
from spanfilterlib.search.attribute_indexer import attribute_pairs
from spanfilterlib.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["SEARCH"])

EXCLUSION_PREFIX: str = "-"


@dataclass(frozen=True)
class ParsedQuery:
    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.include and not self.exclude


def parse_query(query: Optional[str]) -> ParsedQuery:
    """
    Tokenize a free-text query into inclusion and exclusion terms.

    A bare "-" carries no text and is dropped. Quoting is not supported.

    Args:
        query: Raw query text

    Returns:
        The parsed terms in query order
    """
    include: list[str] = []
    exclude: list[str] = []
    for token in (query or "").split():
        if token.startswith(EXCLUSION_PREFIX):
            term = token[len(EXCLUSION_PREFIX) :]
            if term:
                exclude.append(term)
        else:
            include.append(token)
    return ParsedQuery(include=include, exclude=exclude)


def term_matches_span(*, term: str, span: Span) -> bool:
    """
    True if the term equals the span id, or is a case-sensitive substring of
    the operation name, the service name, or any attribute key or value.
    """
    return (
        term == span.span_id
        or term in span.operation_name
        or term in span.process.service_name
        or any(term in pair.key or term in pair.value for pair in attribute_pairs(span))
    )


class FreeTextSpanMatcher:
    def match(self, *, query: Optional[str], spans: Optional[Sequence[Span]]) -> MatchResult:
        """
        Compute the ids of the spans matching a free-text query.

        Args:
            query: Whitespace separated terms, "-term" to exclude
            spans: Spans of one trace, or None if none are loaded

        Returns:
            Set of matching span ids, or None when spans is None or the query has no terms
        """
        if spans is None:
            return None

        parsed = parse_query(query)
        if parsed.is_empty():
            logger.debug("Free-text query %r has no terms", query)
            return None

        matches: set[str] = {
            span.span_id
            for span in spans
            if all(term_matches_span(term=term, span=span) for term in parsed.include)
            and not any(
                term_matches_span(term=term, span=span) for term in parsed.exclude
            )
        }

        logger.debug(
            "Free-text query %r matched %d of %d spans", query, len(matches), len(spans)
        )
        return matches
