# Path: core/window/__init__.py
# Purpose: Package initializer for progressive result disclosure.
# Layer: core/window.
# Details: Exposes the window state machine and the proximity helper used by viewports.

from .controller import WindowController, is_near_bottom

__all__ = ["WindowController", "is_near_bottom"]
