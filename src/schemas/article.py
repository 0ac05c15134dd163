"""Article schema for authored posts."""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator


class Article(BaseModel):
    """A single authored post as supplied by the content loader.

    Front-matter keys use the site's camelCase names (``publishDate``,
    ``updatedDate``); the model accepts either those aliases or the
    field names.

    Attributes:
        id: Path of the post relative to the content directory, without
            file suffix (e.g. "demo/markdown-elements")
        draft: Drafts are never published
        publish_date: Calendar date the post was published
        tags: Tag names in authored order, duplicates allowed
        title: Display title
        description: Short summary shown in listings
        updated_date: Date of the last meaningful revision
    """

    id: str
    draft: bool = False
    publish_date: date = Field(alias="publishDate")
    tags: list[str] = []
    title: str | None = None
    description: str | None = None
    updated_date: date | None = Field(default=None, alias="updatedDate")

    model_config = {"extra": "allow", "populate_by_name": True, "frozen": True}

    @field_validator("publish_date", "updated_date", mode="before")
    @classmethod
    def _truncate_datetime(cls, value):
        # YAML timestamps with a time component load as datetime
        if isinstance(value, datetime):
            return value.date()
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _empty_tags(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @property
    def year(self) -> int:
        return self.publish_date.year
