"""Feed and item data models parsed from the upstream RSS channel."""

from pydantic import BaseModel, Field


class Item(BaseModel):
    """A single syndicated post.

    The link doubles as the item's identity (Atom entry id). The
    description starts as the upstream HTML and is replaced in place
    once the post images have been appended.
    """

    title: str = Field(default="", description="Post title")
    link: str = Field(..., description="Post page URL, also the entry id")
    description: str = Field(default="", description="Post description, may contain HTML")


class Feed(BaseModel):
    """Upstream channel metadata plus its items in upstream order."""

    title: str = Field(default="", description="Channel title")
    link: str = Field(default="", description="Channel link")
    description: str = Field(default="", description="Channel description")
    last_build_date: str | None = Field(default=None, description="Raw lastBuildDate value")
    docs: str | None = Field(default=None, description="RSS docs URL")
    language: str | None = Field(default=None, description="Channel language code")
    version: str = Field(default="2.0", description="RSS version attribute")
    items: list[Item] = Field(default_factory=list)
