# Path: gui/__init__.py
# Purpose: Package initializer for GUI layer.
# Layer: gui.
# Details: Provide lightweight exports without importing Qt widgets to avoid side effects.

from .view_models import DirectoryViewModel

__all__ = ["DirectoryViewModel"]
