"""Data models for the book structure parsed from enriched Markdown."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from bloom_gen.models.layout import Layout


class BookMetadata(BaseModel):
    """Book-level metadata from the YAML frontmatter."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    all_titles: dict[str, str] = Field(alias="allTitles")
    languages: dict[str, str]  # code -> display name
    l1: str  # primary language
    l2: str | None = None  # secondary language
    cover_image: str | None = Field(default=None, alias="coverImage")
    isbn: str | None = None
    license: str | None = None
    copyright: str | None = None


class ImageElement(BaseModel):
    """Image reference on a page."""

    type: Literal["image"] = "image"
    src: str = Field(min_length=1)


class TextBlockElement(BaseModel):
    """Text for one or more languages, keyed by language code.

    Keys keep the order in which the languages were first encountered.
    """

    type: Literal["text"] = "text"
    content: dict[str, str] = Field(default_factory=dict)


PageElement = Annotated[
    Union[ImageElement, TextBlockElement], Field(discriminator="type")
]


class PageContent(BaseModel):
    """One page of the book."""

    model_config = ConfigDict(populate_by_name=True)

    layout: Layout
    elements: list[PageElement] = Field(min_length=1)
    appears_to_be_bilingual: bool = Field(
        default=False, alias="appearsToBeBilingualPage"
    )


class Book(BaseModel):
    """Complete parsed book."""

    metadata: BookMetadata
    pages: list[PageContent] = Field(default_factory=list)
