"""
Filter Query - Compiles search specifications into the webservice query dialect

The PrestaShop webservice filters collections with bracketed values:
    filter[email]=[john@doe.com]
    filter[id]=>[10]
    filter[lastname]=%[oh]%
    sort=[id_ASC,lastname_DESC]
    limit=50
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

logger = logging.getLogger(__name__)


class ConditionType(Enum):
    """Supported filter operators"""

    EQ = "eq"
    NEQ = "neq"
    GT = "gt"
    LT = "lt"
    IN = "in"  # pipe-separated values, e.g. 1|2|3
    NIN = "nin"
    INTERVAL = "interval"  # comma-separated range, e.g. 10,33
    LIKE = "like"  # SQL wildcard at the beginning, end or both


class SortDirection(Enum):
    ASC = "ASC"
    DESC = "DESC"


# Operator written between "filter[field]" and the bracketed value.
# "nin" shares the negation operator with "neq": the webservice negates
# the whole bracket, so "=![1|2|3]" reads as "not one of 1, 2, 3".
OPERATORS = {
    ConditionType.EQ: "=",
    ConditionType.NEQ: "=!",
    ConditionType.GT: "=>",
    ConditionType.LT: "=<",
    ConditionType.IN: "=",
    ConditionType.NIN: "=!",
    ConditionType.INTERVAL: "=",
    ConditionType.LIKE: "=",
}


@dataclass
class Condition:
    """One filter predicate"""

    field: str
    condition_type: ConditionType = ConditionType.EQ
    value: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Condition":
        """Build from the host's {field, condition_type, value} shape"""
        value = data.get("value")
        return cls(
            field=data["field"],
            condition_type=ConditionType(data.get("condition_type", "eq")),
            value="" if value is None else str(value),
        )


@dataclass
class SortDirective:
    """One sort key; list order gives precedence"""

    field: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SortDirective":
        return cls(
            field=data["field"],
            direction=SortDirection(str(data.get("direction", "ASC")).upper()),
        )


@dataclass
class QuerySpec:
    """Filter, sort and limit for a single collection request"""

    conditions: List[Condition] = field(default_factory=list)
    sort: List[SortDirective] = field(default_factory=list)
    limit: Optional[int] = None  # 0 or None means unlimited

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuerySpec":
        """
        Build a QuerySpec from plain host parameters

        Example:
            {
                "conditions": [{"field": "id", "condition_type": "gt", "value": "10"}],
                "sort": [{"field": "id", "direction": "ASC"}],
                "limit": 5,
            }
        """
        limit = data.get("limit")
        return cls(
            conditions=[Condition.from_dict(c) for c in data.get("conditions") or []],
            sort=[SortDirective.from_dict(s) for s in data.get("sort") or []],
            limit=int(limit) if limit not in (None, "") else None,
        )

    def is_empty(self) -> bool:
        return not self.conditions and not self.sort and not (self.limit and self.limit > 0)


def normalize_like_pattern(value: str) -> str:
    """
    Move SQL wildcards outside the bracketed literal

    "%abc%" -> "%[abc]%", "%abc" -> "%[abc]", "abc%" -> "[abc]%", "abc" -> "[abc]"
    """
    if value.startswith("%") and value.endswith("%"):
        return f"%[{value[1:-1]}]%"
    if value.startswith("%"):
        return f"%[{value[1:]}]"
    if value.endswith("%"):
        return f"[{value[:-1]}]%"
    return f"[{value}]"


def build_filter_clause(condition: Condition) -> str:
    """Compile a single condition into filter[field]<op><value>"""
    operator = OPERATORS[condition.condition_type]

    if condition.condition_type == ConditionType.LIKE:
        value = normalize_like_pattern(condition.value or "")
    else:
        value = f"[{condition.value or ''}]"

    return f"filter[{condition.field}]{operator}{value}"


def build_id_filter(field_name: str, value: Any) -> str:
    """Equality filter used for fixed lookups (stock records, configuration keys)"""
    return build_filter_clause(Condition(field_name, ConditionType.EQ, str(value)))


def compile_query(spec: QuerySpec, extra: Optional[Dict[str, Any]] = None) -> str:
    """
    Compile a QuerySpec into a query-string fragment (no leading "?")

    The limit/sort block is URL-encoded and then has its brackets restored,
    because the webservice expects literal "[" and "]". Filter clauses are
    appended verbatim.

    Args:
        spec: Filter, sort and limit
        extra: Plain parameters appended after the filters (e.g. {"display": "full"})

    Returns:
        str: e.g. "limit=5&sort=[id_ASC]&filter[id]=>[10]"
    """
    params: Dict[str, Any] = {}

    if spec.limit is not None and spec.limit > 0:
        params["limit"] = spec.limit

    if spec.sort:
        params["sort"] = "[" + ",".join(
            f"{s.field}_{s.direction.value}" for s in spec.sort
        ) + "]"

    parts = []

    if params:
        parts.append(urlencode(params).replace("%5B", "[").replace("%5D", "]"))

    parts.extend(build_filter_clause(c) for c in spec.conditions)

    if extra:
        parts.append(urlencode(extra))

    query_string = "&".join(parts)
    logger.debug(f"Compiled query: {query_string}")
    return query_string
