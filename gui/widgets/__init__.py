# Path: gui/widgets/__init__.py
# Purpose: Package initializer for reusable Qt widgets.
# Layer: gui.
# Details: Exposes the user card and the scrollable user list.

from .user_list import UserList
from .user_tile import UserTile

__all__ = ["UserList", "UserTile"]
