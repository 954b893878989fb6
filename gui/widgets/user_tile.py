# Path: gui/widgets/user_tile.py
# Purpose: Provide a card widget displaying one enriched user.
# Layer: gui.
# Details: Shows avatar, name, email, friend names, and the top-ranked friend; clicks select the card.

from __future__ import annotations

import html
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout

from core.models.domain import EnrichedUser

_BASE_STYLE = "QFrame#userTile {{ border: 1px solid {color}; border-radius: 6px; background: {background}; }}"


def name_markup(name: str) -> str:
    """Bold rich-text label for a user name; the name itself is shown literally."""

    return f"<b>{html.escape(name)}</b>"


class UserTile(QFrame):
    """Lightweight user card that can be reused across views."""

    clicked = Signal(str)

    def __init__(self, user: EnrichedUser, parent=None, avatar_size: int = 64) -> None:
        super().__init__(parent)
        self.user = user
        self.avatar_size = avatar_size
        self._selected = False
        self.setObjectName("userTile")

        self.avatar = QLabel("image")
        self.avatar.setAlignment(Qt.AlignCenter)
        self.avatar.setFixedSize(avatar_size, avatar_size)

        self.name_label = QLabel(name_markup(user.name))
        self.email_label = QLabel(f"Email: {user.email}")
        friends = ", ".join(user.friend_names) if user.friend_names else "No friends listed"
        self.friends_label = QLabel(f"Friends: {friends}")
        self.friends_label.setWordWrap(True)
        self.top_friend_label = QLabel(f"Highest ranking friend: {self._top_friend_name()}")

        text_layout = QVBoxLayout()
        text_layout.setSpacing(2)
        for label in (self.name_label, self.email_label, self.friends_label, self.top_friend_label):
            text_layout.addWidget(label)
        for label in (self.email_label, self.friends_label, self.top_friend_label):
            label.setTextFormat(Qt.PlainText)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.addWidget(self.avatar)
        layout.addLayout(text_layout, 1)
        self._apply_style()

    def _top_friend_name(self) -> str:
        friend_id = self.user.highest_ranking_friend
        if friend_id is None:
            return "n/a"
        index = self.user.friends.index(friend_id)
        return self.user.friend_names[index]

    def set_avatar(self, pixmap: Optional[QPixmap] = None) -> None:
        if pixmap is None or pixmap.isNull():
            self.avatar.setPixmap(QPixmap())
            self.avatar.setText("image")
            return
        self.avatar.setText("")
        self.avatar.setPixmap(
            pixmap.scaled(self.avatar.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation)
        )

    def set_selected(self, selected: bool) -> None:
        self._selected = selected
        self._apply_style()

    def _apply_style(self) -> None:
        if self._selected:
            self.setStyleSheet(_BASE_STYLE.format(color="#1976d2", background="#e3f2fd"))
        else:
            self.setStyleSheet(_BASE_STYLE.format(color="#4caf50", background="transparent"))

    def mousePressEvent(self, event) -> None:  # type: ignore[override]
        if event.button() == Qt.LeftButton:
            self.clicked.emit(self.user.id)
        super().mousePressEvent(event)
