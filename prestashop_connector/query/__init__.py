"""
Query Module

Compiles filter/sort/limit specifications into the webservice's
bracket-and-operator query-string dialect.
"""

from .filter_query import (
    Condition,
    ConditionType,
    QuerySpec,
    SortDirection,
    SortDirective,
    build_filter_clause,
    build_id_filter,
    compile_query,
    normalize_like_pattern,
)

__all__ = [
    "Condition",
    "ConditionType",
    "QuerySpec",
    "SortDirection",
    "SortDirective",
    "build_filter_clause",
    "build_id_filter",
    "compile_query",
    "normalize_like_pattern",
]
