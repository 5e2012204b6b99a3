from typing import Optional

from pydantic import BaseModel, ConfigDict

from spanfilterlib.models.operators import EqualityOperator


class TagPredicate(BaseModel):
    """
    Tests for a key (and optionally a value) anywhere in a span's span tags,
    process tags or log fields.

    An empty ``value`` means "match by key presence only". An empty ``key``
    leaves the predicate unconfigured.
    """

    model_config = ConfigDict(frozen=True)

    key: str = ""
    value: Optional[str] = None
    operator: Optional[EqualityOperator] = None

    def is_configured(self) -> bool:
        return bool(self.key)

    def has_value(self) -> bool:
        return bool(self.value)
