from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from spanfilterlib.models.key_value_pair import KeyValuePair


class LogEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: Optional[int] = None
    fields: list[KeyValuePair] = Field(default_factory=list)
