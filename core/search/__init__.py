# Path: core/search/__init__.py
# Purpose: Package initializer for query matching and pipeline orchestration.
# Layer: core/search.
# Details: Exposes the match predicate and the main directory pipeline entrypoint.

from .filters import filter_users, matches, normalize_query
from .pipeline import DirectoryPipeline

__all__ = ["DirectoryPipeline", "filter_users", "matches", "normalize_query"]
