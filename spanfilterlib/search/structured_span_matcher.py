import logging
from typing import Optional, Sequence

from spanfilterlib.models.match_result import MatchResult
from spanfilterlib.models.operators import EqualityOperator, FromOperator, ToOperator
from spanfilterlib.models.span import Span
from spanfilterlib.models.structured_filter import StructuredFilter
from spanfilterlib.models.tag_predicate import TagPredicate
from spanfilterlib.search.attribute_indexer import attribute_pairs
from spanfilterlib.search.duration_parser import DurationParser
from spanfilterlib.utilities.logger.log_levels import SRC_LOG_LEVELS

logger = logging.getLogger(__name__)
logger.setLevel(SRC_LOG_LEVELS["SEARCH"])


class StructuredSpanMatcher:
    """
    Evaluates a StructuredFilter against the spans of a trace.

    A span matches only when every configured predicate holds. Unconfigured
    predicates are ignored. Duration bounds are parsed before any span is
    looked at, so a malformed bound fails the whole call.
    """

    def match(
        self, *, filters: StructuredFilter, spans: Optional[Sequence[Span]]
    ) -> MatchResult:
        """
        Compute the ids of the spans matching the filter.

        Args:
            filters: The structured filter to apply
            spans: Spans of one trace, or None if none are loaded

        Returns:
            Set of matching span ids, or None when spans is None or the filter is inactive

        Raises:
            InvalidDurationException: If ``from_`` or ``to`` cannot be parsed
        """
        if spans is None:
            return None
        if not filters.is_active():
            logger.debug("Structured filter has no active predicates")
            return None

        from_micros: Optional[float] = (
            DurationParser.parse(text=filters.from_) if filters.from_ else None
        )
        to_micros: Optional[float] = (
            DurationParser.parse(text=filters.to) if filters.to else None
        )
        tag_predicates = filters.configured_tags()

        matches: set[str] = {
            span.span_id
            for span in spans
            if self._matches_name(
                actual=span.process.service_name,
                expected=filters.service_name,
                operator=filters.service_name_operator,
            )
            and self._matches_name(
                actual=span.operation_name,
                expected=filters.span_name,
                operator=filters.span_name_operator,
            )
            and self._matches_from(
                duration_micros=span.duration_micros,
                bound_micros=from_micros,
                operator=filters.from_operator,
            )
            and self._matches_to(
                duration_micros=span.duration_micros,
                bound_micros=to_micros,
                operator=filters.to_operator,
            )
            and all(
                self._matches_tag(span=span, predicate=predicate)
                for predicate in tag_predicates
            )
        }

        logger.debug(
            "Structured filter matched %d of %d spans", len(matches), len(spans)
        )
        return matches

    @staticmethod
    def _matches_name(
        *,
        actual: str,
        expected: Optional[str],
        operator: Optional[EqualityOperator],
    ) -> bool:
        if not expected:
            return True
        if operator == EqualityOperator.NOT_EQUALS:
            return actual != expected
        return actual == expected

    @staticmethod
    def _matches_from(
        *,
        duration_micros: float,
        bound_micros: Optional[float],
        operator: Optional[FromOperator],
    ) -> bool:
        if bound_micros is None:
            return True
        if operator == FromOperator.GREATER_OR_EQUAL:
            return duration_micros >= bound_micros
        return duration_micros > bound_micros

    @staticmethod
    def _matches_to(
        *,
        duration_micros: float,
        bound_micros: Optional[float],
        operator: Optional[ToOperator],
    ) -> bool:
        if bound_micros is None:
            return True
        if operator == ToOperator.LESS_OR_EQUAL:
            return duration_micros <= bound_micros
        return duration_micros < bound_micros

    @staticmethod
    def _matches_tag(*, span: Span, predicate: TagPredicate) -> bool:
        present = any(
            pair.key == predicate.key
            and (not predicate.has_value() or pair.value == predicate.value)
            for pair in attribute_pairs(span)
        )
        if predicate.operator == EqualityOperator.NOT_EQUALS:
            return not present
        return present
