from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from spanfilterlib.models.operators import EqualityOperator, FromOperator, ToOperator
from spanfilterlib.models.tag_predicate import TagPredicate


class StructuredFilter(BaseModel):
    """
    Typed span filter: service name, span (operation) name, duration range and
    tag predicates.

    Every field is optional. Operators left as None fall back to their
    defaults when the filter is evaluated: "=" for names and tags, ">" for
    ``from_`` and "<" for ``to``. ``from`` is a Python keyword, so the field
    is ``from_`` and accepts the alias "from".
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    service_name: Optional[str] = Field(default=None, alias="serviceName")
    service_name_operator: Optional[EqualityOperator] = Field(
        default=None, alias="serviceNameOperator"
    )
    span_name: Optional[str] = Field(default=None, alias="spanName")
    span_name_operator: Optional[EqualityOperator] = Field(
        default=None, alias="spanNameOperator"
    )
    from_: Optional[str] = Field(default=None, alias="from")
    from_operator: Optional[FromOperator] = Field(default=None, alias="fromOperator")
    to: Optional[str] = None
    to_operator: Optional[ToOperator] = Field(default=None, alias="toOperator")
    tags: list[TagPredicate] = Field(default_factory=list)

    def configured_tags(self) -> list[TagPredicate]:
        return [tag for tag in self.tags if tag.is_configured()]

    def is_active(self) -> bool:
        """True if at least one predicate would constrain the result."""
        return bool(
            self.service_name
            or self.span_name
            or self.from_
            or self.to
            or self.configured_tags()
        )
