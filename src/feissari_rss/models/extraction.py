"""Tagged result of an image extraction attempt."""

from enum import Enum

from pydantic import BaseModel, Field


class Outcome(str, Enum):
    """Severity of a pipeline step result."""

    SUCCESS = "success"
    RECOVERABLE = "recoverable"
    FATAL = "fatal"


class ImageExtraction(BaseModel):
    """Images found on one item page, or why none could be read.

    A ``recoverable`` outcome always carries an empty image list and the
    error message; callers log it and carry on with the next item.
    """

    page_url: str
    images: list[str] = Field(default_factory=list)
    outcome: Outcome = Outcome.SUCCESS
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS
