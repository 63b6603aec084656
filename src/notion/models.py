"""Pydantic models for Notion discovery results."""

from typing import Any

from pydantic import BaseModel, Field


class TopLevelPage(BaseModel):
    """A page sitting at the root of the workspace.

    Either its parent is the workspace itself, or a page the integration
    has no access to.
    """

    page_id: str = Field(..., min_length=1, description="Notion page ID")
    page_name: str | None = Field(None, description="Page title, None if untitled")
    page_parent: dict[str, Any] = Field(default_factory=dict, description="Raw parent reference")


class InlineDatabase(BaseModel):
    """A database embedded as a child block of a page."""

    database_id: str = Field(..., min_length=1, description="Notion database ID")
    database_name: str = Field("", description="Database title")
