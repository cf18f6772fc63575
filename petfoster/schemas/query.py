from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field


class FilterOperation(str, Enum):
    EQ = "EQ"
    IS_NULL = "IS_NULL"
    IN = "IN"
    NOT_IN = "NOT_IN"
    GT = "GT"
    GTE = "GTE"
    LT = "LT"
    LTE = "LTE"


class OrderDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


# IS_NULL -> bool, IN/NOT_IN -> list of strings, everything else -> raw string.
FilterValue = Union[bool, List[str], str]


class FilterClause(BaseModel):
    field: str
    operation: FilterOperation
    value: FilterValue


class OrderClause(BaseModel):
    field: str
    direction: OrderDirection = OrderDirection.ASC


class QueryDescriptor(BaseModel):
    search: Optional[str] = None
    filters: List[FilterClause] = Field(default_factory=list)
    order: Optional[OrderClause] = None
    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)
