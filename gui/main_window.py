# Path: gui/main_window.py
# Purpose: Define the main desktop window for browsing and searching the user directory.
# Layer: gui.
# Details: Implements search box, infinite-scroll user list, background loading (F5), and fullscreen toggle (F11).

from __future__ import annotations

from typing import List, Optional

from PySide6.QtCore import QEvent, Qt, QThread, Signal
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QApplication,
    QLabel,
    QLineEdit,
    QMainWindow,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from config import AppSettings, configure_logging
from core.datasource import DataSource, FetchError, build_source
from core.models.domain import RawUser
from core.registry import RegistryLoader, UserRegistry
from .view_models import DirectoryViewModel
from .widgets.user_list import UserList


class _LoadWorker(QThread):
    """Background worker fetching user records without blocking the GUI thread."""

    loaded = Signal(int, list)
    failed = Signal(int, str)

    def __init__(self, source: DataSource, ticket: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._source = source
        self._ticket = ticket

    def run(self) -> None:  # type: ignore[override]
        """
        External calls:
        - core/datasource/base.py::DataSource.load_all - fetch and decode the user records.
        """

        try:
            users = self._source.load_all()
        except FetchError as exc:
            self.failed.emit(self._ticket, str(exc))
            return
        self.loaded.emit(self._ticket, users)


class MainWindow(QMainWindow):
    """Main application window hosting the search box and the user list."""

    def __init__(self, settings: Optional[AppSettings] = None, source: Optional[DataSource] = None) -> None:
        super().__init__()
        self.settings = settings or AppSettings()
        self.registry = UserRegistry()
        self.loader = RegistryLoader(source or build_source(self.settings.data_source), self.registry)
        self.view_model = DirectoryViewModel(self.registry, settings=self.settings)
        self._workers: List[_LoadWorker] = []
        self._rendered = 0
        self.setWindowTitle("User Directory")
        self.setCentralWidget(self._build_central())
        self._configure_shortcuts()
        self.reload()

    def _configure_shortcuts(self) -> None:
        toggle_action = QAction(self)
        toggle_action.setShortcut(QKeySequence(Qt.Key_F11))
        toggle_action.triggered.connect(self.toggle_fullscreen)
        self.addAction(toggle_action)

        reload_action = QAction(self)
        reload_action.setShortcut(QKeySequence(Qt.Key_F5))
        reload_action.triggered.connect(self.reload)
        self.addAction(reload_action)

    def _build_central(self) -> QWidget:
        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search by name, ID, or friend's name")
        self.search_input.textChanged.connect(self._on_query_changed)
        layout.addWidget(self.search_input)

        self.status_label = QLabel("Loading users...")
        layout.addWidget(self.status_label)

        self.user_list = UserList(image_timeout=self.settings.data_source.timeout)
        self.user_list.userClicked.connect(self._on_user_clicked)
        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setWidget(self.user_list)
        scroll_area.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        scroll_area.verticalScrollBar().valueChanged.connect(self._on_scroll)
        self.scroll_area = scroll_area
        scroll_area.viewport().installEventFilter(self)
        layout.addWidget(scroll_area, 1)

        self.more_label = QLabel("Loading more...")
        self.more_label.setAlignment(Qt.AlignCenter)
        self.more_label.setVisible(False)
        layout.addWidget(self.more_label)
        return container

    def reload(self) -> None:
        """Start a background load; results from superseded loads are dropped."""

        ticket = self.loader.begin()
        worker = _LoadWorker(self.loader.source, ticket, self)
        worker.loaded.connect(self._on_loaded)
        worker.failed.connect(self._on_load_failed)
        worker.finished.connect(lambda: self._workers.remove(worker))
        self._workers.append(worker)
        worker.start()

    def _on_loaded(self, ticket: int, users: List[RawUser]) -> None:
        # core/registry/loader.py::RegistryLoader.complete - last-write-wins snapshot swap.
        if not self.loader.complete(ticket, users):
            return
        self.view_model.on_users_loaded()
        self._render(reset=True)

    def _on_load_failed(self, ticket: int, message: str) -> None:
        self.loader.fail(ticket, FetchError(message))
        if not len(self.registry):
            self.status_label.setText("Could not load users. Press F5 to retry.")

    def _on_query_changed(self, text: str) -> None:
        if self.view_model.on_query_changed(text):
            self._render(reset=True)

    def _on_scroll(self, value: int) -> None:
        maximum = self.scroll_area.verticalScrollBar().maximum()
        if self.view_model.on_scroll(value, maximum):
            self._render(reset=False)

    def _on_user_clicked(self, user_id: str) -> None:
        self.view_model.select(user_id)
        self.user_list.set_selected(user_id)

    def _render(self, reset: bool) -> None:
        page = self.view_model.revealed()
        if reset or page.visible_count < self._rendered:
            self.user_list.set_selected(self.view_model.selected_user_id)
            self.user_list.set_users(page.users)
            self.scroll_area.verticalScrollBar().setValue(0)
        else:
            self.user_list.append_users(page.users[self._rendered :])
        self._rendered = page.visible_count
        self.status_label.setText(f"Showing {page.visible_count} of {page.total} users")
        self.more_label.setVisible(page.has_more)

    def toggle_fullscreen(self) -> None:
        if self.isFullScreen():
            self.showNormal()
        else:
            self.showFullScreen()

    def eventFilter(self, watched, event):  # type: ignore[override]
        # A short list leaves no scroll range, so a resize may already put us at the bottom.
        if watched is self.scroll_area.viewport() and event.type() == QEvent.Resize:
            self._on_scroll(self.scroll_area.verticalScrollBar().value())
        return super().eventFilter(watched, event)


def main() -> int:
    import sys

    settings = AppSettings.from_env()
    configure_logging(settings.log_level)
    app = QApplication(sys.argv)
    window = MainWindow(settings)
    window.resize(720, 900)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
