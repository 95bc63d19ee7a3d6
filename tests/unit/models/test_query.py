"""Tests for query classification."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import BaseModel

from searchmodel.models.query import (
    FreeTextQuery,
    JsonQuery,
    StructuredQuery,
    as_mapping,
    classify_query,
)


class _DslQuery:
    """Stand-in for a DSL object exposing ``to_dict()``."""

    def __init__(self, body: dict[str, Any]) -> None:
        self._body = body

    def to_dict(self) -> dict[str, Any]:
        return self._body


class _MatchQuery(BaseModel):
    query: dict[str, Any]
    size: int | None = None


# ── Structured ───────────────────────────────────────────────────────────────


class TestStructuredQueries:
    def test_dict(self) -> None:
        result = classify_query({"query": {"match": {"title": "foo"}}})
        assert isinstance(result, StructuredQuery)
        assert result.body == {"query": {"match": {"title": "foo"}}}

    def test_to_dict_object(self) -> None:
        result = classify_query(_DslQuery({"query": {"match_all": {}}}))
        assert isinstance(result, StructuredQuery)
        assert result.body == {"query": {"match_all": {}}}

    def test_pydantic_model_drops_unset_none(self) -> None:
        result = classify_query(_MatchQuery(query={"term": {"tag": "x"}}))
        assert isinstance(result, StructuredQuery)
        assert result.body == {"query": {"term": {"tag": "x"}}}

    def test_non_string_keys_pass_through(self) -> None:
        key = ("title", 1)
        query = {"query": {"match_all": {}}, 1: "x", key: {2: "y"}}
        result = classify_query(query)
        assert isinstance(result, StructuredQuery)
        assert result.body == query
        assert result.body[key] == {2: "y"}

    def test_non_callable_to_dict_is_not_structured(self) -> None:
        class Odd:
            to_dict = "nope"

        odd = Odd()
        assert as_mapping(odd) is None
        assert isinstance(classify_query(odd), FreeTextQuery)


# ── JSON text ────────────────────────────────────────────────────────────────


class TestJsonQueries:
    def test_json_string_kept_verbatim(self) -> None:
        text = '{"query":{"match_all":{}}}'
        result = classify_query(text)
        assert isinstance(result, JsonQuery)
        assert result.body == text

    def test_leading_whitespace(self) -> None:
        text = '\n   { "query" : { "match_all" : {} } }'
        result = classify_query(text)
        assert isinstance(result, JsonQuery)
        assert result.body == text

    def test_invalid_json_is_not_parsed(self) -> None:
        result = classify_query("{ not json")
        assert isinstance(result, JsonQuery)
        assert result.body == "{ not json"


# ── Free text ────────────────────────────────────────────────────────────────


class TestFreeTextQueries:
    @pytest.mark.parametrize("text", ["foo", "title:foo AND bar", "foo {bar}", ""])
    def test_plain_text(self, text: str) -> None:
        result = classify_query(text)
        assert isinstance(result, FreeTextQuery)
        assert result.q == text

    def test_other_objects_pass_through(self) -> None:
        result = classify_query(42)
        assert isinstance(result, FreeTextQuery)
        assert result.q == 42

    def test_already_classified_is_returned_as_is(self) -> None:
        query = JsonQuery(body="{}")
        assert classify_query(query) is query
