"""Command line entry point: run the server or seed the storage target."""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from qaboard.container import build_store
from qaboard.core.config import ConfigError, load_settings
from qaboard.core.log import configure_logging
from qaboard.main import create_app
from qaboard.persistence.interfaces.document_store import StorageError
from qaboard.persistence.seed import init_store

logger = logging.getLogger("qaboard")


def _serve(settings) -> int:
    app = create_app(settings)
    logger.info("API + Web on http://%s:%s (storage=%s)", settings.host, settings.port, app.state.store.describe())
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


def _init_store(settings, force: bool) -> int:
    store = build_store(settings)
    try:
        outcome = init_store(store, force=force)
    except StorageError as e:
        logger.error("Could not initialise %s: %s", store.describe(), e)
        return 1
    for key, state in outcome.items():
        print(f"  • {state} {key}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="qaboard", description="Q&A forum backend")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("serve", help="run the HTTP server (default)")
    seed = sub.add_parser("init-store", help="create empty collections that do not exist yet")
    seed.add_argument("--force", action="store_true", help="reset existing collections to []")
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as e:
        configure_logging()
        logger.error("Startup failed: %s", e)
        return 1

    configure_logging(settings.log_level)
    if args.command == "init-store":
        return _init_store(settings, args.force)
    return _serve(settings)


if __name__ == "__main__":
    sys.exit(main())
