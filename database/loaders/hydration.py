"""
Relation hydration for primary result batches.

Each hydrator takes the PrimaryRows of one query, resolves every relation
kind with one BatchLoader query, then attaches the results to the
entities in place. The number of statements depends only on which
relation kinds have keys, never on the batch size. A failing relation
query aborts the whole pass.
"""

from typing import Dict, Iterable, List, Optional

from sqlalchemy.orm import Session

from database.deadline import Deadline
from database.decoding import (
    PrimaryRow,
    category_from_row,
    contact_from_row,
    narrow_article,
    narrow_topic,
    partner_from_row,
    photo_from_image,
    render_id,
    render_text,
    section_from_row,
    tag_from_row,
)
from database.enums import ContactRole
from database.loaders.batch import LoaderSet
from database.loaders.relations import (
    RELATED_POST_COLUMNS,
    entity_fetcher,
    fetch_related_posts,
    join_fetcher,
    pair_fetcher,
    projection_fetcher,
)
from database.models import Category, Contact, Image, Partner, Post, Section, Tag, Topic, Video
from database.models.associations import (
    category_posts,
    category_sections,
    external_tags,
    post_contacts,
    post_sections,
    post_tags,
    post_tags_algo,
    topic_slideshow_images,
    topic_tags,
)
from database.schemas import content as schemas
from src.logging import get_logger

logger = get_logger(__name__)


class MediaIndex:
    """Images resolved by the shared media query, rendered on demand."""

    def __init__(self, images: Dict[int, Image], statics_host: str):
        self.images = images
        self.statics_host = statics_host

    def photo(self, image_id: Optional[int]) -> Optional[schemas.Photo]:
        image = self.images.get(image_id) if image_id else None
        if image is None:
            return None
        return photo_from_image(image, self.statics_host)


def _load_media(loaders: LoaderSet, session: Session, deadline: Optional[Deadline],
                image_ids: Iterable[Optional[int]], statics_host: str) -> MediaIndex:
    media = loaders.new("media.images", entity_fetcher(Image))
    media.add_all(image_ids)
    return MediaIndex(media.load(session, deadline), statics_host)


class PostHydrator:
    """
    Attach sections, categories, contributors, tags, media, topic and
    related articles to a batch of decoded posts.
    """

    def __init__(self, statics_host: str):
        self.statics_host = statics_host

    def hydrate(self, session: Session, rows: List[PrimaryRow],
                deadline: Optional[Deadline] = None) -> List[schemas.Article]:
        if not rows:
            return []

        loaders = LoaderSet()
        post_ids = [row.id for row in rows]

        sections = loaders.new(
            "post.sections", join_fetcher(post_sections.c.A, post_sections.c.B, Section), many=True)
        categories = loaders.new(
            "post.categories", join_fetcher(category_posts.c.B, category_posts.c.A, Category), many=True)
        contacts = {
            role: loaders.new(
                f"post.{role.value}",
                join_fetcher(post_contacts[role].c.B, post_contacts[role].c.A, Contact),
                many=True,
            )
            for role in ContactRole
        }
        tags = loaders.new("post.tags", join_fetcher(post_tags.c.A, post_tags.c.B, Tag), many=True)
        tags_algo = loaders.new(
            "post.tags_algo", join_fetcher(post_tags_algo.c.A, post_tags_algo.c.B, Tag), many=True)
        relateds = loaders.new("post.relateds", fetch_related_posts, many=True)

        for loader in [sections, categories, tags, tags_algo, relateds, *contacts.values()]:
            loader.add_all(post_ids)

        singular = loaders.new(
            "post.relateds_singular", projection_fetcher(Post.id, *RELATED_POST_COLUMNS))
        videos = loaders.new("post.videos", entity_fetcher(Video))
        topics = loaders.new("post.topics", projection_fetcher(Topic.id, Topic.name, Topic.slug))
        for row in rows:
            singular.add(row.key("relatedsOne"))
            singular.add(row.key("relatedsTwo"))
            videos.add(row.key("heroVideo"))
            topics.add(row.key("topics"))

        sections_by_post = sections.load(session, deadline)
        categories_by_post = categories.load(session, deadline)
        contacts_by_post = {role: loader.load(session, deadline) for role, loader in contacts.items()}
        tags_by_post = tags.load(session, deadline)
        tags_algo_by_post = tags_algo.load(session, deadline)
        relateds_by_post = relateds.load(session, deadline)
        singular_by_id = singular.load(session, deadline)
        videos_by_id = videos.load(session, deadline)
        topics_by_id = topics.load(session, deadline)

        category_section_loader = loaders.new(
            "category.sections",
            join_fetcher(category_sections.c.A, category_sections.c.B, Section),
            many=True,
        )
        for found in categories_by_post.values():
            category_section_loader.add_all(category.id for category in found)
        sections_by_category = category_section_loader.load(session, deadline)

        image_ids = []
        for row in rows:
            image_ids.extend([row.key("heroImage"), row.key("og_image")])
        for neighbors in relateds_by_post.values():
            image_ids.extend(neighbor.hero_image_id for neighbor in neighbors)
        image_ids.extend(related.hero_image_id for related in singular_by_id.values())
        image_ids.extend(video.hero_image_id for video in videos_by_id.values())
        media = _load_media(loaders, session, deadline, image_ids, self.statics_host)

        def related_article(projection) -> schemas.Article:
            article = narrow_article(projection)
            article.hero_image = media.photo(projection.hero_image_id)
            return article

        def singular_slot(post_id: int) -> Optional[schemas.Article]:
            projection = singular_by_id.get(post_id) if post_id else None
            return related_article(projection) if projection is not None else None

        articles = []
        for row in rows:
            article: schemas.Article = row.entity

            article.sections = [section_from_row(s) for s in sections_by_post.get(row.id, [])]
            article.sections_in_input_order = list(article.sections)

            article.categories = []
            for category in categories_by_post.get(row.id, []):
                item = category_from_row(category)
                item.sections = [
                    section_from_row(s) for s in sections_by_category.get(category.id, [])
                ]
                article.categories.append(item)
            article.categories_in_input_order = list(article.categories)

            for role in ContactRole:
                people = [contact_from_row(c) for c in contacts_by_post[role].get(row.id, [])]
                setattr(article, role.value, people)
            article.writers_in_input_order = list(article.writers)

            article.tags = [tag_from_row(t) for t in tags_by_post.get(row.id, [])]
            article.tags_algo = [tag_from_row(t) for t in tags_algo_by_post.get(row.id, [])]

            article.hero_image = media.photo(row.key("heroImage"))
            article.og_image = media.photo(row.key("og_image"))

            video = videos_by_id.get(row.key("heroVideo"))
            if video is not None:
                article.hero_video = schemas.Video(
                    id=render_id(video.id),
                    video_src=render_text(video.url_original),
                    hero_image=media.photo(video.hero_image_id),
                )

            topic = topics_by_id.get(row.key("topics"))
            if topic is not None:
                article.topics = narrow_topic(topic)

            article.relateds = [related_article(p) for p in relateds_by_post.get(row.id, [])]
            article.relateds_in_input_order = list(article.relateds)
            article.relateds_one = singular_slot(row.key("relatedsOne"))
            article.relateds_two = singular_slot(row.key("relatedsTwo"))

            articles.append(article)

        logger.hydration_complete("post", len(articles), loaders.queries)
        return articles


class ExternalHydrator:
    """Attach partner and tags to a batch of decoded external items."""

    def hydrate(self, session: Session, rows: List[PrimaryRow],
                deadline: Optional[Deadline] = None) -> List[schemas.ExternalItem]:
        if not rows:
            return []

        loaders = LoaderSet()
        partners = loaders.new("external.partner", entity_fetcher(Partner))
        tags = loaders.new(
            "external.tags", join_fetcher(external_tags.c.A, external_tags.c.B, Tag), many=True)
        for row in rows:
            partners.add(row.key("partner"))
            tags.add(row.id)

        partners_by_id = partners.load(session, deadline)
        tags_by_external = tags.load(session, deadline)

        items = []
        for row in rows:
            item: schemas.ExternalItem = row.entity
            partner = partners_by_id.get(row.key("partner"))
            item.partner = partner_from_row(partner) if partner is not None else None
            item.tags = [tag_from_row(t) for t in tags_by_external.get(row.id, [])]
            items.append(item)

        logger.hydration_complete("external", len(items), loaders.queries)
        return items


class TopicHydrator:
    """Attach tags, slideshow images and hero/og images to a batch of decoded topics."""

    def __init__(self, statics_host: str):
        self.statics_host = statics_host

    def hydrate(self, session: Session, rows: List[PrimaryRow],
                deadline: Optional[Deadline] = None) -> List[schemas.Topic]:
        if not rows:
            return []

        loaders = LoaderSet()
        tags = loaders.new("topic.tags", join_fetcher(topic_tags.c.A, topic_tags.c.B, Tag), many=True)
        slideshow = loaders.new(
            "topic.slideshow_images",
            pair_fetcher(topic_slideshow_images.c.A, topic_slideshow_images.c.B),
            many=True,
        )
        for row in rows:
            tags.add(row.id)
            slideshow.add(row.id)

        tags_by_topic = tags.load(session, deadline)
        slides_by_topic = slideshow.load(session, deadline)

        image_ids = []
        for row in rows:
            image_ids.extend([row.key("heroImage"), row.key("og_image")])
        for slides in slides_by_topic.values():
            image_ids.extend(slides)
        media = _load_media(loaders, session, deadline, image_ids, self.statics_host)

        topics = []
        for row in rows:
            topic: schemas.Topic = row.entity
            topic.tags = [tag_from_row(t) for t in tags_by_topic.get(row.id, [])]
            photos = [media.photo(image_id) for image_id in slides_by_topic.get(row.id, [])]
            topic.slideshow_images = [photo for photo in photos if photo is not None]
            topic.slideshow_images_in_input_order = list(topic.slideshow_images)
            topic.hero_image = media.photo(row.key("heroImage"))
            topic.og_image = media.photo(row.key("og_image"))
            topics.append(topic)

        logger.hydration_complete("topic", len(topics), loaders.queries)
        return topics
