"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest
import redis
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from database.base import Base
from database.database import DatabaseManager
from database.deadline import QueryTimeouts
from database.enums import ContactRole
from database.models import (
    Category,
    Contact,
    External,
    Image,
    Partner,
    Post,
    Section,
    Tag,
    Topic,
    Video,
)
from database.models.associations import (
    category_posts,
    category_sections,
    external_tags,
    post_contacts,
    post_relateds,
    post_sections,
    post_tags,
    post_tags_algo,
    topic_slideshow_images,
    topic_tags,
)
from src.cache import QueryCache
from src.context import QueryContext
from src.services import ContentQueryService

STATICS_HOST = "https://statics.example.com/images"


class StatementCounter:
    """Counts SQL statements sent to the database."""

    def __init__(self):
        self.count = 0

    def __call__(self, conn, cursor, statement, parameters, context, executemany):
        self.count += 1

    def reset(self) -> None:
        self.count = 0


class FakeRedis:
    """Dictionary-backed stand-in for redis.Redis (GET / SET EX only)."""

    def __init__(self):
        self.store = {}
        self.expiry = {}
        self.fail = False

    def get(self, key):
        if self.fail:
            raise redis.ConnectionError("redis unavailable")
        return self.store.get(key)

    def set(self, key, value, ex=None):
        if self.fail:
            raise redis.ConnectionError("redis unavailable")
        self.store[key] = value
        self.expiry[key] = ex
        return True

    def close(self):
        pass


def _seed(session: Session) -> None:
    session.add_all([
        Image(id=1, name="hero", file_id="img-hero", file_extension="png", width=1200, height=800),
        Image(id=2, name="og", file_id="img-og", width=600, height=315),
        Image(id=3, name="related", file_id="img-related", file_extension="jpg"),
        Image(id=4, name="video poster", file_id="img-video", file_extension="jpg"),
        Image(id=5, name="slide one", file_id="img-slide-1", file_extension="jpg"),
        Image(id=6, name="slide two", file_id="img-slide-2", file_extension="jpg"),
        Image(id=7, name="topic hero", file_id="img-topic", file_extension="jpg"),
    ])
    session.add(Video(id=1, name="clip", url_original="https://video.example.com/clip.mp4", hero_image_id=4))

    session.add_all([
        Section(id=1, name="News", slug="news", state="active"),
        Section(id=2, name="Culture", slug="culture", state="active"),
        Category(id=1, name="Politics", slug="politics", state="active", is_member_only=False),
        Category(id=2, name="Arts", slug="arts", state="active", is_member_only=True),
        Contact(id=1, name="Alice"),
        Contact(id=2, name="Bob"),
        Tag(id=1, name="Election", slug="election"),
        Tag(id=2, name="AI", slug="ai"),
    ])

    session.add_all([
        Topic(id=1, name="Elections", slug="elections", state="published", sort_order=1,
              hero_image_id=7, brief={"blocks": []}, type="list",
              created_at=datetime(2024, 1, 1)),
        Topic(id=2, name="Arts", slug="arts", state="published", sort_order=None,
              created_at=datetime(2024, 2, 1)),
        Topic(id=3, name="Drafts", slug="drafts", state="draft", sort_order=0,
              created_at=datetime(2024, 1, 5)),
        Topic(id=4, name="Sports", slug="sports", state="published", sort_order=1,
              created_at=datetime(2024, 3, 1)),
    ])

    session.add_all([
        Post(id=1, slug="post-a", title="Post A", state="published", style="article",
             published_date=datetime(2024, 1, 3, 8, 30, 0, 123000),
             updated_at=datetime(2024, 1, 4),
             hero_image_id=1, og_image_id=2, hero_video_id=1, topic_id=1, relateds_one_id=3,
             is_featured=True, brief={"blocks": ["brief"]}, content={"blocks": ["body"]}),
        Post(id=2, slug="post-b", title="Post B", state="published",
             published_date=datetime(2024, 1, 2), hero_image_id=3, is_adult=True),
        Post(id=3, slug="post-c", title="Post C", state="published",
             published_date=datetime(2024, 1, 1), hero_image_id=3, content=["not", "an", "object"]),
        Post(id=4, slug="post-draft", title="Draft", state="draft",
             published_date=datetime(2024, 1, 4)),
        Post(id=5, slug="post-undated", title="Undated", state="published", published_date=None),
    ])

    session.add(Partner(id=1, slug="partner-x", name="Partner X", show_on_index=True))
    session.add_all([
        External(id=1, slug="ext-1", title="External 1", state="published",
                 published_date=datetime(2024, 2, 1), updated_at=datetime(2024, 2, 1), partner_id=1),
        External(id=2, slug="ext-2", title="External 2", state="published",
                 published_date=None, updated_at=datetime(2024, 3, 1)),
        External(id=3, slug="ext-3", title="External 3", state="draft",
                 published_date=datetime(2024, 2, 2)),
        External(id=4, slug="ext-4", title="External 4", state="published",
                 published_date=datetime(2024, 1, 15), updated_at=datetime(2024, 1, 15)),
    ])
    session.flush()

    session.execute(post_sections.insert(), [{"A": 1, "B": 1}, {"A": 2, "B": 2}])
    session.execute(category_posts.insert(), [{"A": 1, "B": 1}, {"A": 2, "B": 2}])
    session.execute(category_sections.insert(), [{"A": 1, "B": 1}, {"A": 2, "B": 2}])
    session.execute(post_contacts[ContactRole.WRITERS].insert(), [{"A": 1, "B": 1}, {"A": 2, "B": 1}])
    session.execute(post_contacts[ContactRole.PHOTOGRAPHERS].insert(), [{"A": 2, "B": 1}])
    session.execute(post_tags.insert(), [{"A": 1, "B": 1}])
    session.execute(post_tags_algo.insert(), [{"A": 1, "B": 2}])
    # Edge (1, 2) stored once; edge (3, 1) stored with post 1 on the B side
    session.execute(post_relateds.insert(), [{"A": 1, "B": 2}, {"A": 3, "B": 1}])
    session.execute(external_tags.insert(), [{"A": 1, "B": 2}])
    session.execute(topic_tags.insert(), [{"A": 1, "B": 2}])
    session.execute(topic_slideshow_images.insert(), [{"A": 1, "B": 5}, {"A": 1, "B": 6}])
    session.commit()


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every connection of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        _seed(session)
    yield engine
    engine.dispose()


@pytest.fixture
def statements(engine):
    counter = StatementCounter()
    event.listen(engine, "before_cursor_execute", counter)
    yield counter
    event.remove(engine, "before_cursor_execute", counter)


@pytest.fixture
def db(engine):
    return DatabaseManager(engine=engine)


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def context(db):
    return QueryContext(db=db, statics_host=STATICS_HOST, timeouts=QueryTimeouts())


@pytest.fixture
def service(context):
    """Façade with caching disabled."""
    return ContentQueryService(context)


@pytest.fixture
def cached_service(db, fake_redis):
    """Façade backed by the fake Redis client."""
    context = QueryContext(
        db=db,
        statics_host=STATICS_HOST,
        cache=QueryCache(client=fake_redis, ttl=60),
    )
    return ContentQueryService(context)
