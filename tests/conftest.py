"""
Shared fixtures: a two-span trace whose attribute names deliberately overlap.

span-id-0 carries strings ending in 0 or 1, span-id-2 carries strings ending
in 1 or 2. Keys and values in span-id-2 use different numbers so key-only and
value-only matches can be told apart.
"""

from typing import Any, Dict, List

import pytest

from spanfilterlib.models.span import Span

SPAN_ID_0: str = "span-id-0"
SPAN_ID_2: str = "span-id-2"


def _kv(key: str, value: str) -> Dict[str, str]:
    return {"key": key, "value": value}


SPAN_0_JSON: Dict[str, Any] = {
    "spanID": SPAN_ID_0,
    "operationName": "operationName0",
    "duration": 3050,
    "process": {
        "serviceName": "serviceName0",
        "tags": [
            _kv("processTagKey0", "processTagValue0"),
            _kv("processTagKey1", "processTagValue1"),
        ],
    },
    "tags": [
        _kv("tagKey0", "tagValue0"),
        _kv("tagKey1", "tagValue1"),
    ],
    "logs": [
        {
            "fields": [
                _kv("logFieldKey0", "logFieldValue0"),
                _kv("logFieldKey1", "logFieldValue1"),
            ]
        }
    ],
}

SPAN_2_JSON: Dict[str, Any] = {
    "spanID": SPAN_ID_2,
    "operationName": "operationName2",
    "duration": 5000,
    "process": {
        "serviceName": "serviceName2",
        "tags": [
            _kv("processTagKey2", "processTagValue1"),
            _kv("processTagKey1", "processTagValue2"),
        ],
    },
    "tags": [
        _kv("tagKey2", "tagValue1"),
        _kv("tagKey1", "tagValue2"),
    ],
    "logs": [
        {
            "fields": [
                _kv("logFieldKey2", "logFieldValue1"),
                _kv("logFieldKey1", "logFieldValue2"),
            ]
        }
    ],
}


@pytest.fixture
def span0() -> Span:
    return Span.model_validate(SPAN_0_JSON)


@pytest.fixture
def span2() -> Span:
    return Span.model_validate(SPAN_2_JSON)


@pytest.fixture
def spans(span0: Span, span2: Span) -> List[Span]:
    return [span0, span2]


@pytest.fixture
def null_logs_span() -> Span:
    return Span.model_validate({**SPAN_0_JSON, "logs": None})
