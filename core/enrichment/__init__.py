# Path: core/enrichment/__init__.py
# Purpose: Package initializer for user enrichment.
# Layer: core/enrichment.
# Details: Exposes the per-user enrichment functions and the dangling-friend placeholder.

from .enricher import UNKNOWN_FRIEND, enrich, enrich_all, highest_ranking_friend, resolve_friend_names

__all__ = ["UNKNOWN_FRIEND", "enrich", "enrich_all", "highest_ranking_friend", "resolve_friend_names"]
