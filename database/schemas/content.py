"""
Pydantic models for hydrated content returned by the query layer.

Field names follow Python conventions; aliases carry the wire names the
API has always exposed (publishedDate, heroImage, og_title, ...).
Serialise with `to_dict()` (or `model_dump(by_alias=True)`).
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ContentModel(BaseModel):
    """Base for every hydrated entity."""

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict using wire field names."""
        return self.model_dump(mode="json", by_alias=True)


class ImageFile(ContentModel):
    width: int = 0
    height: int = 0


class Resized(ContentModel):
    """Derived variant URLs for one image file."""
    original: str = ""
    w480: str = ""
    w800: str = ""
    w1200: str = ""
    w1600: str = ""
    w2400: str = ""


class Photo(ContentModel):
    id: str
    image_file: ImageFile = Field(default_factory=ImageFile, alias="imageFile")
    resized: Resized = Field(default_factory=Resized)
    resized_webp: Resized = Field(default_factory=Resized, alias="resizedWebp")


class Section(ContentModel):
    id: str
    name: str = ""
    slug: str = ""
    state: str = ""


class Category(ContentModel):
    id: str
    name: str = ""
    slug: str = ""
    state: str = ""
    is_member_only: bool = Field(False, alias="isMemberOnly")
    sections: List[Section] = Field(default_factory=list)


class Contact(ContentModel):
    id: str
    name: str = ""


class Tag(ContentModel):
    id: str
    name: str = ""
    slug: str = ""


class Video(ContentModel):
    id: str
    video_src: str = Field("", alias="videoSrc")
    hero_image: Optional[Photo] = Field(None, alias="heroImage")


class Partner(ContentModel):
    id: str
    slug: str = ""
    name: str = ""
    show_on_index: bool = Field(False, alias="showOnIndex")
    show_thumb: bool = Field(True, alias="showThumb")
    show_brief: bool = Field(False, alias="showBrief")


class Topic(ContentModel):
    """
    A curated collection of articles.

    When reached through an article's `topics` reference only id, name
    and slug are populated.
    """
    id: str
    name: str = ""
    slug: str = ""
    sort_order: Optional[int] = Field(None, alias="sortOrder")
    state: str = ""
    brief: Optional[Dict[str, Any]] = None
    hero_image: Optional[Photo] = Field(None, alias="heroImage")
    hero_url: str = Field("", alias="heroUrl")
    leading: str = ""
    og_title: str = ""
    og_description: str = ""
    og_image: Optional[Photo] = None
    is_featured: bool = Field(False, alias="isFeatured")
    title_style: str = ""
    type: str = ""
    style: str = ""
    tags: List[Tag] = Field(default_factory=list)
    slideshow_images: List[Photo] = Field(default_factory=list)
    slideshow_images_in_input_order: List[Photo] = Field(
        default_factory=list, alias="slideshow_imagesInInputOrder"
    )
    posts: List["Article"] = Field(default_factory=list)
    javascript: str = ""
    dfp: str = ""
    mobile_dfp: str = ""
    created_at: str = Field("", alias="createdAt")
    updated_at: str = Field("", alias="updatedAt")


class Article(ContentModel):
    """
    A fully hydrated Post.

    `relateds` holds both directions of the related-post edge set.
    `relateds`, `relateds_one` and `relateds_two` carry only id, slug,
    title and hero image; they are never hydrated further.
    """
    id: str
    slug: str = ""
    title: str = ""
    subtitle: str = ""
    state: str = ""
    style: str = ""
    published_date: str = Field("", alias="publishedDate")
    updated_at: str = Field("", alias="updatedAt")
    is_member: bool = Field(False, alias="isMember")
    is_adult: bool = Field(False, alias="isAdult")
    sections: List[Section] = Field(default_factory=list)
    sections_in_input_order: List[Section] = Field(default_factory=list, alias="sectionsInInputOrder")
    categories: List[Category] = Field(default_factory=list)
    categories_in_input_order: List[Category] = Field(default_factory=list, alias="categoriesInInputOrder")
    writers: List[Contact] = Field(default_factory=list)
    writers_in_input_order: List[Contact] = Field(default_factory=list, alias="writersInInputOrder")
    photographers: List[Contact] = Field(default_factory=list)
    camera_man: List[Contact] = Field(default_factory=list)
    designers: List[Contact] = Field(default_factory=list)
    engineers: List[Contact] = Field(default_factory=list)
    vocals: List[Contact] = Field(default_factory=list)
    extend_byline: str = ""
    tags: List[Tag] = Field(default_factory=list)
    tags_algo: List[Tag] = Field(default_factory=list)
    hero_video: Optional[Video] = Field(None, alias="heroVideo")
    hero_image: Optional[Photo] = Field(None, alias="heroImage")
    hero_caption: str = Field("", alias="heroCaption")
    brief: Optional[Dict[str, Any]] = None
    trimmed_content: Optional[Dict[str, Any]] = Field(None, alias="trimmedContent")
    content: Optional[Dict[str, Any]] = None
    relateds: List["Article"] = Field(default_factory=list)
    relateds_in_input_order: List["Article"] = Field(default_factory=list, alias="relatedsInInputOrder")
    relateds_one: Optional["Article"] = Field(None, alias="relatedsOne")
    relateds_two: Optional["Article"] = Field(None, alias="relatedsTwo")
    redirect: str = ""
    og_title: str = ""
    og_image: Optional[Photo] = None
    og_description: str = ""
    hidden_advertised: bool = Field(False, alias="hiddenAdvertised")
    is_advertised: bool = Field(False, alias="isAdvertised")
    is_featured: bool = Field(False, alias="isFeatured")
    topics: Optional[Topic] = None


class ExternalItem(ContentModel):
    id: str
    slug: str = ""
    partner: Optional[Partner] = None
    title: str = ""
    state: str = ""
    published_date: str = Field("", alias="publishedDate")
    extend_byline: str = ""
    thumb: str = ""
    thumb_caption: str = Field("", alias="thumbCaption")
    brief: str = ""
    content: str = ""
    updated_at: str = Field("", alias="updatedAt")
    tags: List[Tag] = Field(default_factory=list)


Topic.model_rebuild()
Article.model_rebuild()
