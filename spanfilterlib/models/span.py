from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from spanfilterlib.models.key_value_pair import KeyValuePair
from spanfilterlib.models.log_event import LogEvent
from spanfilterlib.models.process import Process


class Span(BaseModel):
    """
    One timed operation within a trace.

    Field aliases follow the Jaeger trace JSON layout (spanID, operationName,
    duration in microseconds, ...) so a trace document can be loaded with
    ``Span.model_validate(...)``. Python field names are accepted as well.

    ``logs`` may be None, which is treated exactly like an empty list.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    span_id: str = Field(alias="spanID")
    trace_id: Optional[str] = Field(default=None, alias="traceID")
    operation_name: str = Field(alias="operationName")
    duration_micros: float = Field(alias="duration", ge=0)
    process: Process
    tags: list[KeyValuePair] = Field(default_factory=list)
    logs: Optional[list[LogEvent]] = None
