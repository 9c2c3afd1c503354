"""Pydantic schemas for the records rendered on the site pages."""

from datetime import date
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    """A labelled outbound link shown on the home page."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Label shown to the visitor")
    url: str = Field(..., description="Target URL (http(s) or mailto)")


class PageData(BaseModel):
    """Profile information rendered on the home page."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Heading of the home page")
    name: str = Field(..., description="Display name")
    bio: str = Field(..., description="Biography paragraph")
    links: List[Link] = Field(default_factory=list, description="Ordered profile links")


class Track(BaseModel):
    """A released track on the music page."""

    model_config = ConfigDict(frozen=True)

    title: str
    flac_url: Optional[str] = Field(None, description="Lossless download")
    mp3_url: Optional[str] = Field(None, description="Lossy download")
    youtube_url: Optional[str] = Field(None, description="Video stream")
    soundcloud_url: Optional[str] = Field(None, description="Soundcloud stream")
    release_date: date
    cover_image: str = Field(..., description="Filename under static/images/covers/")


class Project(BaseModel):
    """A software project on the projects page."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    repo_url: str = Field(..., description="Source repository URL")
    tech_stack: str = Field(..., description="Languages and frameworks used")
