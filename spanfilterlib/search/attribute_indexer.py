from typing import Iterator

from spanfilterlib.models.key_value_pair import KeyValuePair
from spanfilterlib.models.span import Span


def attribute_pairs(span: Span) -> Iterator[KeyValuePair]:
    """
    Yield every key/value pair visible on a span.

    Order: span tags, then process tags, then the fields of each log event.
    Each call starts a fresh traversal. A span whose ``logs`` is None yields
    no log fields.

    Args:
        span: The span to index

    Returns:
        Lazy iterator over the span's attribute pairs
    """
    yield from span.tags
    yield from span.process.tags
    for log in span.logs or []:
        yield from log.fields
