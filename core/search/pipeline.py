# Path: core/search/pipeline.py
# Purpose: Orchestrate the filter and enrichment stages over the current registry snapshot.
# Layer: core/search.
# Details: Results are a pure function of (snapshot, query); the last result is cached per that key.

from __future__ import annotations

from typing import Optional, Tuple

from core.enrichment.enricher import enrich_all
from core.models.domain import EnrichedUser
from core.registry.user_registry import UserRegistry
from .filters import filter_users, normalize_query

CacheKey = Tuple[int, int, str]


class DirectoryPipeline:
    """High-level service turning the registry and a query into enriched results."""

    def __init__(self, registry: UserRegistry, memoize: bool = True) -> None:
        self.registry = registry
        self.memoize = memoize
        self._cache_key: Optional[CacheKey] = None
        self._cache_value: Tuple[EnrichedUser, ...] = ()

    def results(self, query: str) -> Tuple[EnrichedUser, ...]:
        """
        Filter the snapshot by ``query`` and enrich the survivors in registry order.

        External calls:
        - core/search/filters.py::filter_users - selects matching raw users.
        - core/enrichment/enricher.py::enrich_all - derives friend names and top friend.
        """

        key = (id(self.registry), self.registry.generation, normalize_query(query))
        if self.memoize and key == self._cache_key:
            return self._cache_value

        filtered = filter_users(self.registry.all(), query, self.registry)
        enriched = enrich_all(filtered, self.registry)
        if self.memoize:
            self._cache_key = key
            self._cache_value = enriched
        return enriched

    def clear_cache(self) -> None:
        self._cache_key = None
        self._cache_value = ()
