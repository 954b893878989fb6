# Path: gui/widgets/user_list.py
# Purpose: Provide a scroll-friendly vertical list of UserTile widgets.
# Layer: gui.
# Details: Supports full replacement and appending so the window can grow without rebuilding tiles.

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtWidgets import QSizePolicy, QVBoxLayout, QWidget

from core.datasource.http_source import fetch_bytes
from core.models.domain import EnrichedUser
from .user_tile import UserTile


class _LoaderSignals(QObject):
    imageLoaded = Signal(str, QImage)


class UserList(QWidget):
    """Vertical container that arranges UserTile widgets."""

    userClicked = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None, image_timeout: float = 10.0) -> None:
        super().__init__(parent)
        self._layout = QVBoxLayout(self)
        self._layout.setSpacing(8)
        self._layout.setContentsMargins(8, 8, 8, 8)
        self._layout.addStretch(1)
        self._tiles: List[UserTile] = []
        self._url_to_tiles: Dict[str, List[UserTile]] = {}
        self._selected_id: Optional[str] = None
        self._image_timeout = image_timeout
        self._loader_signals = _LoaderSignals()
        self._loader_signals.imageLoaded.connect(self._on_image_loaded)
        self._thread_pool = QThreadPool.globalInstance()
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)

    @property
    def count(self) -> int:
        return len(self._tiles)

    def set_users(self, users: Iterable[EnrichedUser]) -> None:
        self._destroy_tiles()
        self.append_users(users)

    def append_users(self, users: Iterable[EnrichedUser]) -> None:
        for user in users:
            tile = UserTile(user)
            tile.clicked.connect(self.userClicked)
            tile.set_selected(user.id == self._selected_id)
            self._tiles.append(tile)
            # Keep the trailing stretch last.
            self._layout.insertWidget(self._layout.count() - 1, tile)
            if user.image:
                pending = self._url_to_tiles.setdefault(user.image, [])
                pending.append(tile)
                if len(pending) == 1:
                    self._queue_load(user.image)

    def set_selected(self, user_id: Optional[str]) -> None:
        self._selected_id = user_id
        for tile in self._tiles:
            tile.set_selected(tile.user.id == user_id)

    def _destroy_tiles(self) -> None:
        for tile in self._tiles:
            self._layout.removeWidget(tile)
            tile.setParent(None)
            tile.deleteLater()
        self._tiles = []
        self._url_to_tiles.clear()

    def _queue_load(self, url: str) -> None:
        task = _AvatarLoadTask(url, self._image_timeout, self._loader_signals)
        self._thread_pool.start(task)

    def _on_image_loaded(self, url: str, image: QImage) -> None:
        tiles = self._url_to_tiles.get(url)
        if not tiles:
            return
        pixmap = None if image.isNull() else QPixmap.fromImage(image)
        for tile in tiles:
            tile.set_avatar(pixmap)


class _AvatarLoadTask(QRunnable):
    """Download and decode avatar images off the UI thread."""

    def __init__(self, url: str, timeout: float, signals: _LoaderSignals) -> None:
        super().__init__()
        self.url = url
        self.timeout = timeout
        self.signals = signals

    def run(self) -> None:
        image = QImage()
        # core/datasource/http_source.py::fetch_bytes - returns None for unreachable or malformed URLs.
        content = fetch_bytes(self.url, timeout=self.timeout)
        if content is not None:
            image.loadFromData(content)
        self.signals.imageLoaded.emit(self.url, image)
