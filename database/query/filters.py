"""
Filter input models and their decoders.

Every filter the query surface accepts is declared here as a pydantic
model with `extra="forbid"`, so a malformed filter tree is rejected as a
whole before any SQL is built. Field aliases are the wire names clients
send (`isAdult`, `in`, `not`, ...).
"""

import re
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class InvalidQueryInput(ValueError):
    """Raised when a filter, order or unique-key argument has the wrong shape."""
    pass


def _validate_numeric_id(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not re.fullmatch(r"[0-9]+", value):
        raise ValueError(f"id must be a decimal string, got {value!r}")
    return value


class FilterInput(BaseModel):
    """Base for all filter inputs."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    # Fields where an explicit null means something (e.g. `equals: null`
    # on a nullable date means IS NULL). Elsewhere null equals absent.
    null_significant: ClassVar[FrozenSet[str]] = frozenset()

    def is_set(self, name: str) -> bool:
        """True if the field carries a value, or an explicit meaningful null."""
        if getattr(self, name) is not None:
            return True
        return name in self.null_significant and name in self.model_fields_set

    def normalized(self) -> Dict[str, Any]:
        """
        Canonical dict form of the filter using wire names.

        Absent fields are dropped, datetimes are rendered in UTC and `in`
        lists are deduplicated and sorted, so two semantically identical
        filters always normalize to equal dicts.
        """
        out: Dict[str, Any] = {}
        for name, field in type(self).model_fields.items():
            if not self.is_set(name):
                continue
            value = getattr(self, name)
            if isinstance(value, FilterInput):
                value = value.normalized()
            elif isinstance(value, datetime):
                if value.tzinfo is not None:
                    value = value.astimezone(timezone.utc)
                value = value.isoformat()
            elif isinstance(value, (list, tuple)):
                # membership lists are sets
                value = sorted(set(value))
            out[field.alias or name] = value
        return out


# ─── Scalar filters ──────────────────────────────────────────────────

class StringFilter(FilterInput):
    equals: Optional[str] = None
    in_: Optional[List[str]] = Field(None, alias="in")
    not_: Optional["StringFilter"] = Field(None, alias="not")


class BooleanFilter(FilterInput):
    equals: Optional[bool] = None


class DateTimeNullableFilter(FilterInput):
    null_significant: ClassVar[FrozenSet[str]] = frozenset({"equals"})

    equals: Optional[datetime] = None
    not_: Optional["DateTimeNullableFilter"] = Field(None, alias="not")


class IDFilter(FilterInput):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    equals: Optional[str] = None

    @field_validator("equals")
    @classmethod
    def check_equals(cls, value: Optional[str]) -> Optional[str]:
        return _validate_numeric_id(value)


StringFilter.model_rebuild()
DateTimeNullableFilter.model_rebuild()


# ─── Relation filters ────────────────────────────────────────────────

class SectionWhere(FilterInput):
    slug: Optional[StringFilter] = None
    state: Optional[StringFilter] = None


class SectionManyRelationFilter(FilterInput):
    some: Optional[SectionWhere] = None


class CategoryWhere(FilterInput):
    slug: Optional[StringFilter] = None
    state: Optional[StringFilter] = None
    is_member_only: Optional[BooleanFilter] = Field(None, alias="isMemberOnly")


class CategoryManyRelationFilter(FilterInput):
    some: Optional[CategoryWhere] = None


class PartnerWhere(FilterInput):
    slug: Optional[StringFilter] = None


class ArticleTopicWhere(FilterInput):
    id: Optional[IDFilter] = None


# ─── Entity filters ──────────────────────────────────────────────────

class ArticleWhere(FilterInput):
    slug: Optional[StringFilter] = None
    state: Optional[StringFilter] = None
    sections: Optional[SectionManyRelationFilter] = None
    categories: Optional[CategoryManyRelationFilter] = None
    is_adult: Optional[BooleanFilter] = Field(None, alias="isAdult")
    is_member: Optional[BooleanFilter] = Field(None, alias="isMember")
    is_featured: Optional[BooleanFilter] = Field(None, alias="isFeatured")
    topics: Optional[ArticleTopicWhere] = None


class ExternalWhere(FilterInput):
    slug: Optional[StringFilter] = None
    state: Optional[StringFilter] = None
    partner: Optional[PartnerWhere] = None
    published_date: Optional[DateTimeNullableFilter] = Field(None, alias="publishedDate")


class TopicWhere(FilterInput):
    slug: Optional[StringFilter] = None
    name: Optional[StringFilter] = None
    state: Optional[StringFilter] = None
    is_featured: Optional[BooleanFilter] = Field(None, alias="isFeatured")
    type: Optional[StringFilter] = None
    style: Optional[StringFilter] = None


# ─── Unique keys ─────────────────────────────────────────────────────

class ArticleWhereUnique(FilterInput):
    """Lookup by id or slug; id wins when both are given."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: Optional[str] = None
    slug: Optional[str] = None

    @field_validator("id")
    @classmethod
    def check_id(cls, value: Optional[str]) -> Optional[str]:
        return _validate_numeric_id(value)


class TopicWhereUnique(FilterInput):
    """Lookup by id, slug or name, in that precedence."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: Optional[str] = None
    slug: Optional[str] = None
    name: Optional[str] = None

    @field_validator("id")
    @classmethod
    def check_id(cls, value: Optional[str]) -> Optional[str]:
        return _validate_numeric_id(value)


# ─── Decoders ────────────────────────────────────────────────────────

F = TypeVar("F", bound=FilterInput)


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(part) for part in err.get("loc", ())) or "<root>"
        parts.append(f"{location}: {err.get('msg')}")
    return "; ".join(parts)


def decode(model: Type[F], raw: Any, label: str) -> F:
    """
    Decode a raw (JSON-like) filter into its model.

    Args:
        model: Filter model to decode into
        raw: None, a mapping, or an already-decoded instance
        label: Name used in error messages (e.g. "post where")

    Returns:
        The decoded filter; None decodes to an empty filter

    Raises:
        InvalidQueryInput: If raw does not match the recognized shape
    """
    if raw is None:
        return model()
    if isinstance(raw, model):
        return raw
    if not isinstance(raw, dict):
        raise InvalidQueryInput(f"{label}: expected an object, got {type(raw).__name__}")
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise InvalidQueryInput(f"{label}: {_describe(e)}") from e


def decode_article_where(raw: Any) -> ArticleWhere:
    return decode(ArticleWhere, raw, "post where")


def decode_article_unique(raw: Any) -> ArticleWhereUnique:
    return decode(ArticleWhereUnique, raw, "post unique where")


def decode_external_where(raw: Any) -> ExternalWhere:
    return decode(ExternalWhere, raw, "external where")


def decode_topic_where(raw: Any) -> TopicWhere:
    return decode(TopicWhere, raw, "topic where")


def decode_topic_unique(raw: Any) -> TopicWhereUnique:
    return decode(TopicWhereUnique, raw, "topic unique where")
