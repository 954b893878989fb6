# Path: core/window/controller.py
# Purpose: Track how many filtered results are revealed and grow that count on demand.
# Layer: core/window.
# Details: A bounded counter driven by query changes, near-bottom signals, and result size changes.

from __future__ import annotations

from typing import Optional, Sequence, TypeVar

from config.settings import WindowSettings

T = TypeVar("T")


def is_near_bottom(position: int, maximum: int, threshold: int) -> bool:
    """Return True when ``position`` is within ``threshold`` of ``maximum``."""

    return maximum - position <= threshold


class WindowController:
    """State machine over a single revealed-count integer.

    ``visible_count`` stays within ``[0, total]`` and only grows between query changes.
    """

    def __init__(self, settings: Optional[WindowSettings] = None, total: int = 0) -> None:
        self.settings = settings or WindowSettings()
        self._total = self._checked(total)
        self._visible_count = min(self.settings.initial_window, self._total)

    @staticmethod
    def _checked(total: int) -> int:
        if total < 0:
            raise ValueError(f"Result set size must not be negative, got {total}")
        return total

    @property
    def visible_count(self) -> int:
        return self._visible_count

    @property
    def total(self) -> int:
        return self._total

    @property
    def has_more(self) -> bool:
        return self._visible_count < self._total

    def on_query_change(self, total: Optional[int] = None) -> None:
        """Reset to the initial window, optionally adopting a new result size first."""

        if total is not None:
            self._total = self._checked(total)
        self._visible_count = min(self.settings.initial_window, self._total)

    def on_near_bottom_signal(self) -> bool:
        """Reveal the next increment; returns False when everything is already shown."""

        if not self.has_more:
            return False
        self._visible_count = min(self._visible_count + self.settings.increment, self._total)
        return True

    def on_result_set_size_change(self, total: int) -> None:
        self._total = self._checked(total)
        self._visible_count = min(self._visible_count, self._total)

    def window(self, items: Sequence[T]) -> Sequence[T]:
        """Return the revealed prefix of ``items``."""

        return items[: self._visible_count]
