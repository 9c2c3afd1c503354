"""Schemas package for the trigex.moe portfolio site."""

from .site_schemas import (
    Link,
    PageData,
    Track,
    Project,
)

__all__ = [
    "Link",
    "PageData",
    "Track",
    "Project",
]
