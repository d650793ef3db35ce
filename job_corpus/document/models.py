"""Data models for the tagged document format."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Serialized order of the metadata tags. The first three are always written.
METADATA_FIELDS: tuple[str, ...] = (
    "jobboard",
    "employer",
    "title",
    "what",
    "where",
    "timestamp",
)
REQUIRED_FIELDS: tuple[str, ...] = ("jobboard", "employer", "title")


class TaggedDocument(BaseModel):
    """One extracted job posting as stored on disk.

    Attributes:
        jobboard: Identifier of the job board the posting came from.
        employer: Employer name (inner markup of the employer region).
        title: Job title (page title of the result view).
        body_html: Raw description markup, stored verbatim.
        what: Search query that produced the posting.
        where: Search location that produced the posting.
        timestamp: ISO-8601 extraction time.
    """

    jobboard: str = Field(..., description="Job board identifier, e.g. 'indeed.com'")
    employer: str = Field(..., description="Employer name")
    title: str = Field(..., description="Job title")
    body_html: str = Field(default="", description="Raw description markup")
    what: str | None = Field(default=None, description="Search query")
    where: str | None = Field(default=None, description="Search location")
    timestamp: str | None = Field(default=None, description="Extraction time")

    def metadata(self) -> dict[str, str]:
        """Return all metadata fields, missing ones as empty strings."""
        return {name: getattr(self, name) or "" for name in METADATA_FIELDS}
