# Path: core/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: core/models.
# Details: Exposes dataclasses used across registry, enrichment, search, and window layers.

from .domain import EnrichedUser, RawUser, RevealedPage

__all__ = ["EnrichedUser", "RawUser", "RevealedPage"]
