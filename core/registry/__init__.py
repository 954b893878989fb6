# Path: core/registry/__init__.py
# Purpose: Package initializer for the user registry and its loader.
# Layer: core/registry.
# Details: Exposes the id-indexed snapshot and the last-write-wins load coordinator.

from .user_registry import UserRegistry
from .loader import RegistryLoader

__all__ = ["UserRegistry", "RegistryLoader"]
