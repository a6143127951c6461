"""Tests for filter decoding and predicate building."""

from datetime import datetime, timezone

import pytest

from database.models import External, Post
from database.query import (
    InvalidQueryInput,
    PredicateBuilder,
    StringFilter,
    article_predicates,
    decode_article_unique,
    decode_article_where,
    decode_external_where,
    decode_topic_unique,
    decode_topic_where,
    external_predicates,
)
from database.query.filters import DateTimeNullableFilter


def test_empty_filter_decodes_to_no_predicates():
    assert len(article_predicates(decode_article_where(None))) == 0
    assert len(article_predicates(decode_article_where({}))) == 0


def test_wire_aliases_are_accepted():
    where = decode_article_where({
        "isAdult": {"equals": True},
        "slug": {"in": ["a", "b"], "not": {"equals": "c"}},
    })
    assert where.is_adult.equals is True
    assert where.slug.in_ == ["a", "b"]
    assert where.slug.not_.equals == "c"


def test_unknown_field_is_rejected():
    with pytest.raises(InvalidQueryInput, match="post where"):
        decode_article_where({"headline": {"equals": "x"}})


def test_scalar_in_place_of_filter_is_rejected():
    with pytest.raises(InvalidQueryInput):
        decode_article_where({"slug": "post-a"})


def test_non_object_input_is_rejected():
    with pytest.raises(InvalidQueryInput, match="expected an object"):
        decode_topic_where(["slug"])


def test_nested_relation_filter_shape_is_checked():
    with pytest.raises(InvalidQueryInput):
        decode_article_where({"sections": {"some": {"title": {"equals": "x"}}}})


def test_topic_id_must_be_numeric():
    with pytest.raises(InvalidQueryInput):
        decode_article_where({"topics": {"id": {"equals": "12a"}}})
    where = decode_article_where({"topics": {"id": {"equals": 12}}})
    assert where.topics.id.equals == "12"


@pytest.mark.parametrize("raw", ["²", "١٢", "１２", "-1", ""])
def test_ids_accept_only_ascii_digits(raw):
    with pytest.raises(InvalidQueryInput):
        decode_article_unique({"id": raw})
    with pytest.raises(InvalidQueryInput):
        decode_article_where({"topics": {"id": {"equals": raw}}})


def test_unique_id_must_be_numeric():
    with pytest.raises(InvalidQueryInput, match="post unique where"):
        decode_article_unique({"id": "abc"})
    assert decode_topic_unique({"name": "Arts"}).name == "Arts"


def test_empty_in_contributes_nothing():
    builder = PredicateBuilder().string(Post.slug, StringFilter(in_=[]))
    assert len(builder) == 0


def test_not_with_empty_inner_filter_contributes_nothing():
    builder = PredicateBuilder().string(Post.slug, StringFilter(not_=StringFilter()))
    assert len(builder) == 0


def test_each_string_branch_adds_one_clause():
    f = StringFilter(equals="a", in_=["a", "b"], not_=StringFilter(equals="c"))
    assert len(PredicateBuilder().string(Post.slug, f)) == 3


def test_relation_filter_without_some_is_unconstrained():
    where = decode_article_where({"sections": {}, "categories": {}})
    assert len(article_predicates(where)) == 0


def test_relation_filter_with_empty_some_still_emits_exists():
    where = decode_article_where({"sections": {"some": {}}})
    clauses = article_predicates(where).clauses
    assert len(clauses) == 1
    assert "EXISTS" in str(clauses[0])


def test_explicit_null_equals_means_is_null():
    where = decode_external_where({"publishedDate": {"equals": None}})
    assert where.published_date.is_set("equals")
    clause = external_predicates(where).clauses[0]
    assert "IS NULL" in str(clause)


def test_absent_equals_adds_nothing():
    where = decode_external_where({"publishedDate": {}})
    assert len(external_predicates(where)) == 0


def test_not_without_equals_means_is_not_null():
    builder = PredicateBuilder().nullable_datetime(
        External.published_date, DateTimeNullableFilter(not_=DateTimeNullableFilter())
    )
    assert "IS NOT NULL" in str(builder.clauses[0])


def test_partner_filter_uses_subquery():
    where = decode_external_where({"partner": {"slug": {"equals": "partner-x"}}})
    clause = str(external_predicates(where).clauses[0])
    assert '"External".partner IN' in clause
    assert '"Partner"' in clause


def test_normalized_ignores_field_order_and_timezone():
    first = decode_external_where({
        "state": {"equals": "published"},
        "publishedDate": {"equals": "2024-01-01T08:00:00+08:00"},
    })
    second = decode_external_where({
        "publishedDate": {"equals": datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)},
        "state": {"equals": "published"},
    })
    assert first.normalized() == second.normalized()


def test_normalized_drops_meaningless_nulls():
    assert decode_article_where({"slug": None}).normalized() == {}
    assert decode_external_where({"publishedDate": {"equals": None}}).normalized() == {
        "publishedDate": {"equals": None}
    }
