"""Closed operator sets used by structured span filters.

Values are the symbols a filter UI or URL carries ("=", "!=", ">", ...), so
pydantic accepts either the enum member or its symbol and rejects anything
else at construction time.
"""

from enum import Enum


class EqualityOperator(str, Enum):
    EQUALS = "="
    NOT_EQUALS = "!="


class FromOperator(str, Enum):
    GREATER_THAN = ">"
    GREATER_OR_EQUAL = ">="


class ToOperator(str, Enum):
    LESS_THAN = "<"
    LESS_OR_EQUAL = "<="
