# Path: gui/view_models.py
# Purpose: Provide view models mediating between GUI interactions and the directory pipeline.
# Layer: gui.
# Details: Reacts to load, query, and proximity events and presents the revealed page for rendering.

from __future__ import annotations

import logging
from typing import Optional, Tuple

from config.settings import AppSettings
from core.models.domain import EnrichedUser, RevealedPage
from core.registry.user_registry import UserRegistry
from core.search.filters import normalize_query
from core.search.pipeline import DirectoryPipeline
from core.window.controller import WindowController, is_near_bottom

logger = logging.getLogger(__name__)


class DirectoryViewModel:
    """View model encapsulating the filter, enrich, and window stages for the GUI.

    All events are handled synchronously on the caller's thread; each one recomputes the
    results before returning, so no two recomputations overlap.
    """

    def __init__(
        self,
        registry: UserRegistry,
        pipeline: Optional[DirectoryPipeline] = None,
        settings: Optional[AppSettings] = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self.registry = registry
        self.pipeline = pipeline or DirectoryPipeline(registry, memoize=self.settings.memoize)
        self.window = WindowController(self.settings.window)
        self.query = ""
        self.selected_user_id: Optional[str] = None
        self._results: Tuple[EnrichedUser, ...] = ()
        self._seen_generation = registry.generation
        if registry.generation:
            self._recompute()
            self.window.on_query_change(len(self._results))

    def _recompute(self) -> None:
        # core/search/pipeline.py::DirectoryPipeline.results - filter then enrich the snapshot.
        self._results = self.pipeline.results(self.query)

    def on_users_loaded(self) -> None:
        """Recompute after the registry received a new snapshot."""

        self._seen_generation = self.registry.generation
        self._recompute()
        # An empty window cannot grow by scrolling, so a snapshot with results reopens it.
        if self.window.visible_count == 0:
            self.window.on_query_change(len(self._results))
        else:
            self.window.on_result_set_size_change(len(self._results))
        logger.debug("Snapshot %s: %d results for %r", self._seen_generation, len(self._results), self.query)

    def on_query_changed(self, query: str) -> bool:
        """Apply a new query; returns False when it normalizes to the active one."""

        if normalize_query(query) == normalize_query(self.query):
            self.query = query
            return False
        self.query = query
        self._recompute()
        self.window.on_query_change(len(self._results))
        return True

    def on_near_bottom(self) -> bool:
        """Reveal more results; returns False when everything is already shown."""

        return self.window.on_near_bottom_signal()

    def on_scroll(self, position: int, maximum: int) -> bool:
        """Translate a scroll position into a near-bottom signal using the configured threshold."""

        if is_near_bottom(position, maximum, self.settings.window.proximity_threshold):
            return self.on_near_bottom()
        return False

    def select(self, user_id: Optional[str]) -> None:
        self.selected_user_id = user_id

    @property
    def results(self) -> Tuple[EnrichedUser, ...]:
        """Every filtered, enriched result, revealed or not."""

        return self._results

    def revealed(self) -> RevealedPage:
        """Return the slice handed to the presentation layer."""

        return RevealedPage(
            users=tuple(self.window.window(self._results)),
            visible_count=self.window.visible_count,
            total=self.window.total,
        )
