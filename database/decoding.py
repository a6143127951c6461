"""
Row decoding.

Turns ORM rows into the output schemas. Primary rows keep their foreign
keys in PrimaryRow.keys for the batch loaders; supporting rows are
converted directly.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from database.media import build_resized_urls, build_webp_urls
from database.models import Category, Contact, External, Image, Partner, Post, Section, Tag, Topic
from database.schemas import content as schemas


@dataclass
class PrimaryRow:
    """
    One decoded primary entity plus the foreign keys it references.

    `keys` maps a relation name (e.g. "heroImage") to the referenced id;
    only the loaders read it, it never reaches the caller.
    """
    id: int
    entity: Any
    keys: Dict[str, int] = field(default_factory=dict)

    def key(self, name: str) -> int:
        return self.keys.get(name) or 0


def render_timestamp(value: Optional[datetime]) -> str:
    """UTC ISO-8601 with millisecond precision, or "" when unset."""
    if value is None:
        return ""
    if value.tzinfo is None:
        # SQLite hands back naive values; they are stored as UTC
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def render_text(value: Any) -> str:
    return "" if value is None else str(value)


def render_id(value: Any) -> str:
    return str(int(value))


def render_json_object(value: Any) -> Optional[Dict[str, Any]]:
    """Decode a JSON column; anything but an object becomes None."""
    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value)
        except ValueError:
            return None
    return value if isinstance(value, dict) else None


# ─── Supporting entities ─────────────────────────────────────────────

def photo_from_image(image: Image, statics_host: str) -> schemas.Photo:
    file_id = image.file_id or ""
    return schemas.Photo(
        id=render_id(image.id),
        image_file=schemas.ImageFile(width=image.width or 0, height=image.height or 0),
        resized=build_resized_urls(statics_host, file_id, image.file_extension or ""),
        resized_webp=build_webp_urls(statics_host, file_id),
    )


def section_from_row(section: Section) -> schemas.Section:
    return schemas.Section(
        id=render_id(section.id),
        name=render_text(section.name),
        slug=render_text(section.slug),
        state=render_text(section.state),
    )


def category_from_row(category: Category) -> schemas.Category:
    return schemas.Category(
        id=render_id(category.id),
        name=render_text(category.name),
        slug=render_text(category.slug),
        state=render_text(category.state),
        is_member_only=bool(category.is_member_only),
    )


def contact_from_row(contact: Contact) -> schemas.Contact:
    return schemas.Contact(id=render_id(contact.id), name=render_text(contact.name))


def tag_from_row(tag: Tag) -> schemas.Tag:
    return schemas.Tag(id=render_id(tag.id), name=render_text(tag.name), slug=render_text(tag.slug))


def partner_from_row(partner: Partner) -> schemas.Partner:
    return schemas.Partner(
        id=render_id(partner.id),
        slug=render_text(partner.slug),
        name=render_text(partner.name),
        show_on_index=bool(partner.show_on_index),
        show_thumb=True if partner.show_thumb is None else partner.show_thumb,
        show_brief=bool(partner.show_brief),
    )


def narrow_topic(row: Any) -> schemas.Topic:
    """Topic reference as carried on an article: id, name and slug."""
    return schemas.Topic(id=render_id(row.id), name=render_text(row.name), slug=render_text(row.slug))


def narrow_article(row: Any) -> schemas.Article:
    """Related-article projection: id, slug and title (hero image attached later)."""
    return schemas.Article(id=render_id(row.id), slug=render_text(row.slug), title=render_text(row.title))


# ─── Primary entities ────────────────────────────────────────────────

def decode_post(post: Post) -> PrimaryRow:
    content = render_json_object(post.content)
    article = schemas.Article(
        id=render_id(post.id),
        slug=render_text(post.slug),
        title=render_text(post.title),
        subtitle=render_text(post.subtitle),
        state=render_text(post.state),
        style=render_text(post.style),
        published_date=render_timestamp(post.published_date),
        updated_at=render_timestamp(post.updated_at),
        is_member=bool(post.is_member),
        is_adult=bool(post.is_adult),
        extend_byline=render_text(post.extend_byline),
        hero_caption=render_text(post.hero_caption),
        brief=render_json_object(post.brief),
        content=content,
        trimmed_content=content,
        redirect=render_text(post.redirect),
        og_title=render_text(post.og_title),
        og_description=render_text(post.og_description),
        hidden_advertised=bool(post.hidden_advertised),
        is_advertised=bool(post.is_advertised),
        is_featured=bool(post.is_featured),
    )
    return PrimaryRow(
        id=post.id,
        entity=article,
        keys={
            "heroImage": post.hero_image_id or 0,
            "heroVideo": post.hero_video_id or 0,
            "og_image": post.og_image_id or 0,
            "topics": post.topic_id or 0,
            "relatedsOne": post.relateds_one_id or 0,
            "relatedsTwo": post.relateds_two_id or 0,
        },
    )


def decode_external(external: External) -> PrimaryRow:
    item = schemas.ExternalItem(
        id=render_id(external.id),
        slug=render_text(external.slug),
        title=render_text(external.title),
        state=render_text(external.state),
        published_date=render_timestamp(external.published_date),
        extend_byline=render_text(external.extend_byline),
        thumb=render_text(external.thumb),
        thumb_caption=render_text(external.thumb_caption),
        brief=render_text(external.brief),
        content=render_text(external.content),
        updated_at=render_timestamp(external.updated_at),
    )
    return PrimaryRow(id=external.id, entity=item, keys={"partner": external.partner_id or 0})


def decode_topic(topic: Topic) -> PrimaryRow:
    item = schemas.Topic(
        id=render_id(topic.id),
        name=render_text(topic.name),
        slug=render_text(topic.slug),
        sort_order=topic.sort_order,
        state=render_text(topic.state),
        brief=render_json_object(topic.brief),
        hero_url=render_text(topic.hero_url),
        leading=render_text(topic.leading),
        og_title=render_text(topic.og_title),
        og_description=render_text(topic.og_description),
        is_featured=bool(topic.is_featured),
        title_style=render_text(topic.title_style),
        type=render_text(topic.type),
        style=render_text(topic.style),
        javascript=render_text(topic.javascript),
        dfp=render_text(topic.dfp),
        mobile_dfp=render_text(topic.mobile_dfp),
        created_at=render_timestamp(topic.created_at),
        updated_at=render_timestamp(topic.updated_at),
    )
    return PrimaryRow(
        id=topic.id,
        entity=item,
        keys={"heroImage": topic.hero_image_id or 0, "og_image": topic.og_image_id or 0},
    )
