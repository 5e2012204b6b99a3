from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class KeyValuePair(BaseModel):
    """
    A single key/value attribute on a span, a process or a log event.

    Values are normalized to strings so that tag predicates and free-text
    terms always compare text against text.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    value: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, str):
            return value
        return str(value)
