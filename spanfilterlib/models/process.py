from pydantic import BaseModel, ConfigDict, Field

from spanfilterlib.models.key_value_pair import KeyValuePair


class Process(BaseModel):
    """The service instance that emitted a span, with its own tags."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    service_name: str = Field(alias="serviceName")
    tags: list[KeyValuePair] = Field(default_factory=list)
