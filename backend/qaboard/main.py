"""FastAPI application factory."""
from __future__ import annotations
import logging
import os
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from qaboard import __version__
from qaboard.api import answers, auth, health, questions
from qaboard.api.errors import install_error_handlers
from qaboard.container import build_store
from qaboard.core.config import Settings, load_settings
from qaboard.persistence.interfaces.document_store import DocumentStore

logger = logging.getLogger(__name__)


class SPAStaticFiles(StaticFiles):
    """Static files with index.html as the fallback for client-side routes."""

    async def get_response(self, path: str, scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as e:
            if e.status_code != 404:
                raise
            return await super().get_response("index.html", scope)


def create_app(settings: Optional[Settings] = None, store: Optional[DocumentStore] = None) -> FastAPI:
    settings = settings or load_settings()
    store = store or build_store(settings)

    # ------------------------------------------------------------------
    # App creation
    # ------------------------------------------------------------------
    app = FastAPI(
        title="qaboard API",
        description="Questions and answers over JSON document storage",
        version=__version__,
    )
    app.state.settings = settings
    app.state.store = store

    install_error_handlers(app)

    # CORS: the bundled front-end and third-party clients call from anywhere
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Storage-Backend"],
    )

    # ------------------------------------------------------------------
    # Routers
    # ------------------------------------------------------------------
    app.include_router(health.router)
    app.include_router(questions.router)
    app.include_router(answers.router)
    app.include_router(auth.router)

    # ------------------------------------------------------------------
    # Serve the web front-end as a static site
    # ------------------------------------------------------------------
    # Mounted LAST so it doesn't shadow the API routes.
    if settings.web_root and os.path.isdir(settings.web_root):
        app.mount("/", SPAStaticFiles(directory=settings.web_root, html=True), name="web")
    elif settings.web_root:
        logger.warning("WEB_ROOT %s is not a directory; static files disabled", settings.web_root)

    logger.info(
        "qaboard %s ready (storage=%s, auth required=%s)",
        __version__, store.describe(), settings.require_auth,
    )
    return app
