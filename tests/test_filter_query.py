"""
Unit tests for the filter query compiler

Tests:
- compile_query: limit/sort block, filter clauses, ordering, extra params
- build_filter_clause: operator per condition type
- normalize_like_pattern: wildcard placement
- QuerySpec/Condition/SortDirective: construction from host parameters
"""

import pytest

from prestashop_connector.query import (
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


# ============================================================================
# COMPILE QUERY TESTS
# ============================================================================


class TestCompileQuery:
    """Test query string compilation"""

    @pytest.mark.parametrize("limit", [None, 0, -1])
    def test_empty_spec_compiles_to_empty_string(self, limit):
        """No conditions, no sort and no positive limit give nothing"""
        assert compile_query(QuerySpec(limit=limit)) == ""

    def test_limit_only(self):
        assert compile_query(QuerySpec(limit=50)) == "limit=50"

    def test_sort_only(self):
        spec = QuerySpec(sort=[SortDirective("id", SortDirection.ASC)])
        assert compile_query(spec) == "sort=[id_ASC]"

    def test_single_equality_filter(self):
        spec = QuerySpec(conditions=[Condition("email", ConditionType.EQ, "a@b.com")])
        assert compile_query(spec) == "filter[email]=[a@b.com]"

    def test_limit_sort_then_filters(self):
        """limit/sort block comes first, filters after, joined with &"""
        spec = QuerySpec(
            conditions=[Condition("id", ConditionType.GT, "10")],
            sort=[SortDirective("id")],
            limit=5,
        )
        assert compile_query(spec) == "limit=5&sort=[id_ASC]&filter[id]=>[10]"

    def test_brackets_are_never_percent_encoded(self):
        spec = QuerySpec(sort=[SortDirective("id"), SortDirective("lastname", SortDirection.DESC)])
        query = compile_query(spec)

        assert "%5B" not in query
        assert "%5D" not in query
        assert query.startswith("sort=[id_ASC")
        assert query.endswith("lastname_DESC]")

    def test_multiple_filters_keep_order(self):
        spec = QuerySpec(
            conditions=[
                Condition("lastname", ConditionType.LIKE, "%oh%"),
                Condition("active", ConditionType.EQ, "1"),
            ]
        )
        assert compile_query(spec) == "filter[lastname]=%[oh]%&filter[active]=[1]"

    def test_extra_parameters_appended_last(self):
        spec = QuerySpec(conditions=[Condition("id", ConditionType.EQ, "3")])
        query = compile_query(spec, extra={"display": "full"})
        assert query == "filter[id]=[3]&display=full"


# ============================================================================
# FILTER CLAUSE TESTS
# ============================================================================


class TestFilterClause:
    """Test single condition compilation"""

    @pytest.mark.parametrize(
        "condition_type,value,expected",
        [
            (ConditionType.EQ, "5", "filter[id]=[5]"),
            (ConditionType.NEQ, "5", "filter[id]=![5]"),
            (ConditionType.GT, "5", "filter[id]=>[5]"),
            (ConditionType.LT, "5", "filter[id]=<[5]"),
            (ConditionType.IN, "1|2|3", "filter[id]=[1|2|3]"),
            (ConditionType.NIN, "1|2|3", "filter[id]=![1|2|3]"),
            (ConditionType.INTERVAL, "10,33", "filter[id]=[10,33]"),
        ],
    )
    def test_operators(self, condition_type, value, expected):
        assert build_filter_clause(Condition("id", condition_type, value)) == expected

    def test_like_clause(self):
        clause = build_filter_clause(Condition("name", ConditionType.LIKE, "abc%"))
        assert clause == "filter[name]=[abc]%"

    def test_id_filter(self):
        assert build_id_filter("id_product", 7) == "filter[id_product]=[7]"


# ============================================================================
# LIKE PATTERN TESTS
# ============================================================================


class TestLikePattern:
    """Test wildcard translation"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("%abc%", "%[abc]%"),
            ("%abc", "%[abc]"),
            ("abc%", "[abc]%"),
            ("abc", "[abc]"),
        ],
    )
    def test_wildcards_move_outside_brackets(self, value, expected):
        assert normalize_like_pattern(value) == expected

    def test_lone_wildcard(self):
        assert normalize_like_pattern("%") == "%[]%"


# ============================================================================
# HOST PARAMETER TESTS
# ============================================================================


class TestFromDict:
    """Test construction from host parameters"""

    def test_query_spec_from_dict(self):
        spec = QuerySpec.from_dict(
            {
                "conditions": [{"field": "id", "condition_type": "gt", "value": 10}],
                "sort": [{"field": "id", "direction": "asc"}],
                "limit": "5",
            }
        )

        assert spec.limit == 5
        assert spec.conditions[0].condition_type == ConditionType.GT
        assert spec.conditions[0].value == "10"
        assert spec.sort[0].direction == SortDirection.ASC
        assert compile_query(spec) == "limit=5&sort=[id_ASC]&filter[id]=>[10]"

    def test_condition_defaults_to_equality(self):
        condition = Condition.from_dict({"field": "email", "value": None})

        assert condition.condition_type == ConditionType.EQ
        assert condition.value == ""

    def test_unknown_condition_type_rejected(self):
        with pytest.raises(ValueError):
            Condition.from_dict({"field": "id", "condition_type": "between", "value": "1"})

    def test_is_empty(self):
        assert QuerySpec().is_empty()
        assert QuerySpec(limit=0).is_empty()
        assert not QuerySpec(limit=1).is_empty()
