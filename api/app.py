# Path: api/app.py
# Purpose: Expose a FastAPI application for browsing the user directory over HTTP.
# Layer: api.
# Details: Provides health checks, a revealed-page endpoint, and a reload trigger delegating to the core pipeline.

from __future__ import annotations

from typing import Any, Dict, Optional

from config import AppSettings
from core.models.domain import RevealedPage
from core.registry import RegistryLoader, UserRegistry
from core.search.pipeline import DirectoryPipeline
from core.window.controller import WindowController


def create_app(
    registry: Optional[UserRegistry] = None,
    loader: Optional[RegistryLoader] = None,
    settings: Optional[AppSettings] = None,
):  # type: ignore[override]
    """Create a FastAPI app instance serving the provided registry snapshot."""

    from fastapi import FastAPI, HTTPException, Query

    settings = settings or AppSettings()
    if registry is None and loader is not None:
        registry = loader.registry
    pipeline = DirectoryPipeline(registry, memoize=settings.memoize) if registry is not None else None

    app = FastAPI(title="UserDirectory API", version="0.1.0")

    @app.get("/health")
    def health() -> Dict[str, Any]:
        """Return a simple health status payload."""

        return {"status": "ok", "users": len(registry) if registry is not None else 0}

    @app.get("/users")
    def users(q: str = "", pages: int = Query(default=0, ge=0)) -> Dict[str, Any]:
        """Return the revealed page for ``q`` after ``pages`` near-bottom signals."""

        if pipeline is None:
            raise HTTPException(status_code=500, detail="User registry is not configured.")

        results = pipeline.results(q)
        window = WindowController(settings.window, total=len(results))
        for _ in range(pages):
            if not window.on_near_bottom_signal():
                break
        page = RevealedPage(
            users=tuple(window.window(results)), visible_count=window.visible_count, total=window.total
        )
        return page.to_dict()

    @app.post("/reload")
    def reload() -> Dict[str, Any]:
        """Fetch a fresh snapshot; the previous one stays in place on failure."""

        if loader is None:
            raise HTTPException(status_code=500, detail="User source is not configured.")
        if not loader.load():
            raise HTTPException(status_code=502, detail="User source failed; keeping previous snapshot.")
        return {"status": "ok", "users": len(loader.registry)}

    return app
