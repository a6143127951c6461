"""Tests for the BatchLoader primitive and relation fetchers."""

import pytest

from database.deadline import Deadline, QueryDeadlineExceeded
from database.loaders.batch import BatchLoader, LoaderSet
from database.loaders.relations import fetch_related_posts, join_fetcher
from database.models import Tag
from database.models.associations import post_tags


class RecordingFetch:
    def __init__(self, rows):
        self.rows = rows
        self.calls = []

    def __call__(self, session, ids):
        self.calls.append(list(ids))
        return [row for row in self.rows if row[0] in ids]


def test_no_keys_means_no_query():
    fetch = RecordingFetch([])
    loader = BatchLoader("kind", fetch)
    assert loader.load(session=None) == {}
    assert fetch.calls == []
    assert loader.queries == 0


def test_zero_and_none_keys_are_skipped():
    fetch = RecordingFetch([])
    loader = BatchLoader("kind", fetch)
    loader.add_all([0, None, 0])
    loader.load(session=None)
    assert fetch.calls == []


def test_keys_are_deduplicated_into_one_query():
    fetch = RecordingFetch([(1, "a"), (2, "b")])
    loader = BatchLoader("kind", fetch)
    loader.add_all([2, 1, 2, 1, 0])
    assert loader.load(session=None) == {1: "a", 2: "b"}
    assert fetch.calls == [[1, 2]]


def test_many_loader_groups_values_per_key():
    fetch = RecordingFetch([(1, "a"), (1, "b"), (2, "c")])
    loader = BatchLoader("kind", fetch, many=True)
    loader.add_all([1, 2, 3])
    assert loader.load(session=None) == {1: ["a", "b"], 2: ["c"]}


def test_expired_deadline_stops_the_query():
    fetch = RecordingFetch([(1, "a")])
    loader = BatchLoader("kind", fetch)
    loader.add(1)
    with pytest.raises(QueryDeadlineExceeded):
        loader.load(session=None, deadline=Deadline(0, "test"))
    assert fetch.calls == []


class RecordingDeadline(Deadline):
    def __init__(self, seconds):
        super().__init__(seconds, "hydrate")
        self.applied = 0

    def apply(self, session):
        self.applied += 1
        super().apply(session)


def test_budget_is_reapplied_before_every_query(db):
    deadline = RecordingDeadline(30)
    loaders = LoaderSet()
    tags = loaders.new("post.tags", join_fetcher(post_tags.c.A, post_tags.c.B, Tag), many=True)
    unused = loaders.new("unused", RecordingFetch([]))
    tags.add(1)
    with db.read_scope() as session:
        tags.load(session, deadline)
        unused.load(session, deadline)
        tags.load(session, deadline)
    assert deadline.applied == 2


def test_fetch_errors_propagate():
    def broken(session, ids):
        raise RuntimeError("relation query failed")

    loader = BatchLoader("kind", broken)
    loader.add(1)
    with pytest.raises(RuntimeError):
        loader.load(session=None)


def test_loader_set_counts_queries():
    loaders = LoaderSet()
    first = loaders.new("one", RecordingFetch([(1, "a")]))
    loaders.new("two", RecordingFetch([]))
    first.add(1)
    first.load(session=None)
    assert loaders.queries == 1


def test_join_fetcher_reads_owner_side(db):
    fetch = join_fetcher(post_tags.c.A, post_tags.c.B, Tag)
    with db.read_scope() as session:
        rows = fetch(session, [1, 2])
        assert [(owner, tag.slug) for owner, tag in rows] == [(1, "election")]


def test_related_posts_are_symmetric(db):
    with db.read_scope() as session:
        rows = fetch_related_posts(session, [1, 2, 3])
    neighbors = {}
    for owner, row in rows:
        neighbors.setdefault(owner, []).append(row.slug)
    assert neighbors == {1: ["post-b", "post-c"], 2: ["post-a"], 3: ["post-a"]}
