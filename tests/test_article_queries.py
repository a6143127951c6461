"""Tests for article listing, counting and lookup."""

import pytest

from database.query import InvalidQueryInput

STATICS_HOST = "https://statics.example.com/images"

# One primary statement plus at most one per post relation kind:
# sections, categories, 6 contact roles, tags, tags_algo, relateds,
# singular relateds, videos, topics, category sections, media
MAX_ARTICLE_STATEMENTS = 1 + 17


def test_default_listing_is_newest_first_with_undated_last(service):
    articles = service.list_articles()
    assert [a.slug for a in articles] == ["post-a", "post-b", "post-c", "post-undated"]


def test_take_truncates_the_page(service):
    articles = service.list_articles(take=2)
    assert [a.slug for a in articles] == ["post-a", "post-b"]


def test_skip_past_the_end_is_empty(service):
    assert service.list_articles(skip=10) == []


def test_non_positive_take_and_skip_are_ignored(service):
    assert len(service.list_articles(take=0, skip=-1)) == 4


def test_invalid_take_is_rejected(service):
    with pytest.raises(InvalidQueryInput):
        service.list_articles(take="ten")


def test_explicit_order(service):
    articles = service.list_articles(order_by=[{"title": "asc"}])
    assert [a.title for a in articles] == ["Post A", "Post B", "Post C", "Undated"]


def test_unknown_order_field_uses_default(service):
    default = [a.slug for a in service.list_articles()]
    assert [a.slug for a in service.list_articles(order_by=[{"nope": "asc"}])] == default


def test_ascending_publish_date_keeps_nulls_last(service):
    articles = service.list_articles(order_by=[{"publishedDate": "asc"}])
    assert [a.slug for a in articles] == ["post-c", "post-b", "post-a", "post-undated"]


def test_filters(service):
    def slugs(where):
        return [a.slug for a in service.list_articles(where=where)]

    assert slugs({"slug": {"not": {"equals": "post-a"}}}) == ["post-b", "post-c", "post-undated"]
    assert slugs({"slug": {"in": ["post-b", "post-c", "post-draft"]}}) == ["post-b", "post-c"]
    assert slugs({"isAdult": {"equals": True}}) == ["post-b"]
    assert slugs({"isFeatured": {"equals": True}}) == ["post-a"]
    assert slugs({"sections": {"some": {"slug": {"equals": "news"}}}}) == ["post-a"]
    assert slugs({"categories": {"some": {"isMemberOnly": {"equals": True}}}}) == ["post-b"]
    assert slugs({"topics": {"id": {"equals": "1"}}}) == ["post-a"]


def test_invalid_filter_fails_before_database_access(service, statements):
    with pytest.raises(InvalidQueryInput):
        service.list_articles(where={"slug": {"startsWith": "post"}})
    assert statements.count == 0


def test_count(service):
    assert service.count_articles() == 4
    assert service.count_articles({"sections": {"some": {}}}) == 2
    assert service.count_articles({"state": {"equals": "draft"}}) == 1


def test_full_hydration(service):
    article = service.article_by_key({"slug": "post-a"})

    assert article.id == "1"
    assert article.published_date == "2024-01-03T08:30:00.123Z"
    assert article.updated_at == "2024-01-04T00:00:00.000Z"
    assert article.subtitle == ""
    assert article.content == {"blocks": ["body"]}
    assert article.trimmed_content == article.content

    assert [s.slug for s in article.sections] == ["news"]
    assert article.sections_in_input_order == article.sections
    assert [c.slug for c in article.categories] == ["politics"]
    assert [s.slug for s in article.categories[0].sections] == ["news"]
    assert [w.name for w in article.writers] == ["Alice", "Bob"]
    assert article.writers_in_input_order == article.writers
    assert [p.name for p in article.photographers] == ["Bob"]
    assert article.vocals == []
    assert [t.slug for t in article.tags] == ["election"]
    assert [t.slug for t in article.tags_algo] == ["ai"]

    assert article.hero_image.resized.original == f"{STATICS_HOST}/img-hero.png"
    assert article.hero_image.image_file.width == 1200
    assert article.og_image.resized.w480 == f"{STATICS_HOST}/img-og-w480.jpg"
    assert article.hero_video.video_src == "https://video.example.com/clip.mp4"
    assert article.hero_video.hero_image.resized.original == f"{STATICS_HOST}/img-video.jpg"

    assert article.topics.to_dict()["slug"] == "elections"
    assert article.topics.name == "Elections"
    assert article.topics.hero_image is None


def test_related_articles_are_symmetric(service):
    a = service.article_by_key({"slug": "post-a"})
    b = service.article_by_key({"slug": "post-b"})
    c = service.article_by_key({"slug": "post-c"})

    assert [r.slug for r in a.relateds] == ["post-b", "post-c"]
    assert [r.slug for r in b.relateds] == ["post-a"]
    assert [r.slug for r in c.relateds] == ["post-a"]
    assert a.relateds_in_input_order == a.relateds


def test_related_articles_use_narrow_projection(service):
    article = service.article_by_key({"slug": "post-a"})
    related = article.relateds[0]
    assert related.hero_image.resized.original == f"{STATICS_HOST}/img-related.jpg"
    assert related.sections == []
    assert related.published_date == ""


def test_singular_related_slot_is_not_enriched(service):
    article = service.article_by_key({"slug": "post-a"})
    assert article.relateds_one.slug == "post-c"
    assert article.relateds_one.relateds == []
    assert article.relateds_one.hero_image.id == "3"
    assert article.relateds_two is None


def test_non_object_json_content_becomes_none(service):
    article = service.article_by_key({"slug": "post-c"})
    assert article.content is None


def test_lookup_by_missing_slug_is_absent(service):
    assert service.article_by_key({"slug": "does-not-exist"}) is None


def test_lookup_precedence_and_published_only(service):
    assert service.article_by_key({"id": "1", "slug": "post-b"}).slug == "post-a"
    assert service.article_by_key({"id": 2}).slug == "post-b"
    assert service.article_by_key({"id": "4"}) is None
    assert service.article_by_key({}) is None


def test_lookup_with_bad_id_is_an_input_error(service):
    with pytest.raises(InvalidQueryInput):
        service.article_by_key({"id": "post-a"})


def test_non_ascii_digits_fail_before_any_query(service, statements):
    statements.reset()
    with pytest.raises(InvalidQueryInput):
        service.article_by_key({"id": "²"})
    with pytest.raises(InvalidQueryInput):
        service.list_articles(where={"topics": {"id": {"equals": "²"}}})
    assert statements.count == 0


def test_statement_count_does_not_grow_with_batch_size(service, statements):
    service.list_articles(take=1)
    single = statements.count
    statements.reset()

    service.list_articles()
    full = statements.count

    assert single <= MAX_ARTICLE_STATEMENTS
    assert full <= MAX_ARTICLE_STATEMENTS


def test_wire_names_in_output(service):
    data = service.article_by_key({"slug": "post-a"}).to_dict()
    for key in ("publishedDate", "heroImage", "relatedsOne", "tags_algo", "camera_man",
                "sectionsInInputOrder", "trimmedContent", "isFeatured"):
        assert key in data
    assert data["heroImage"]["resizedWebp"]["original"] == f"{STATICS_HOST}/img-hero.webp"
