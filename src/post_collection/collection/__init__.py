"""Published-set filtering and the views derived from it."""

from .grouping import group_by_year
from .index import build_index
from .tags import all_tags, tag_counts, unique_tags
from .visibility import demo_path_predicate, filter_visible, is_visible

__all__ = [
    "all_tags",
    "build_index",
    "demo_path_predicate",
    "filter_visible",
    "group_by_year",
    "is_visible",
    "tag_counts",
    "unique_tags",
]
