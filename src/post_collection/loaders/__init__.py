"""Loaders that supply posts to the collection."""

from .content_loader import ContentLoader, post_id_for, split_front_matter
from .exceptions import (
    ContentNotFoundError,
    FrontMatterError,
    LoaderError,
    ReadError,
    ValidationError,
)

__all__ = [
    "ContentLoader",
    "ContentNotFoundError",
    "FrontMatterError",
    "LoaderError",
    "ReadError",
    "ValidationError",
    "post_id_for",
    "split_front_matter",
]
