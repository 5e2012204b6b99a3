"""Converts OpenTelemetry SDK spans into the span search model."""

from typing import Any, Mapping, Optional

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.trace import format_span_id, format_trace_id

from spanfilterlib.models.key_value_pair import KeyValuePair
from spanfilterlib.models.log_event import LogEvent
from spanfilterlib.models.process import Process
from spanfilterlib.models.span import Span
from spanfilterlib.open_telemetry.attribute_names import SpanFilterAttributeNames


def _to_pairs(attributes: Optional[Mapping[str, Any]]) -> list[KeyValuePair]:
    if not attributes:
        return []
    return [
        KeyValuePair(
            key=key,
            value=",".join(str(v) for v in value)
            if isinstance(value, (list, tuple))
            else value,
        )
        for key, value in attributes.items()
    ]


def readable_span_to_span(span: ReadableSpan) -> Span:
    """
    Build a searchable Span from a finished (or in-flight) SDK span.

    - ids are lowercase hex
    - duration is in microseconds, 0 while the span has not ended
    - service.name becomes the process service name, the remaining resource
      attributes become process tags
    - each event becomes a log event whose first field is ``event=<name>``

    Args:
        span: The OpenTelemetry span

    Returns:
        The equivalent search model span
    """
    context = span.context
    span_id = format_span_id(context.span_id) if context is not None else ""
    trace_id = format_trace_id(context.trace_id) if context is not None else None

    duration_micros = 0.0
    if span.start_time is not None and span.end_time is not None:
        duration_micros = max(span.end_time - span.start_time, 0) / 1_000

    resource_attributes: Mapping[str, Any] = (
        span.resource.attributes if span.resource is not None else {}
    )
    service_name = str(
        resource_attributes.get(
            SpanFilterAttributeNames.SERVICE_NAME,
            SpanFilterAttributeNames.DEFAULT_SERVICE_NAME,
        )
    )
    process_tags = _to_pairs(
        {
            key: value
            for key, value in resource_attributes.items()
            if key != SpanFilterAttributeNames.SERVICE_NAME
        }
    )

    logs = [
        LogEvent(
            timestamp=event.timestamp // 1_000 if event.timestamp is not None else None,
            fields=[KeyValuePair(key=SpanFilterAttributeNames.EVENT, value=event.name)]
            + _to_pairs(event.attributes),
        )
        for event in span.events
    ]

    return Span(
        span_id=span_id,
        trace_id=trace_id,
        operation_name=span.name,
        duration_micros=duration_micros,
        process=Process(service_name=service_name, tags=process_tags),
        tags=_to_pairs(span.attributes),
        logs=logs,
    )
