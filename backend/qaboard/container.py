"""Dependency wiring: builds the store once per process, services once per request."""
from __future__ import annotations
from fastapi import Request

from qaboard.application.auth_app_service import AuthAppService
from qaboard.application.forum_app_service import ForumAppService
from qaboard.core.config import ConfigError, Settings
from qaboard.persistence.interfaces.document_store import DocumentStore
from qaboard.persistence.repositories.json.json_repositories import JsonForumRepository, JsonUserRepository
from qaboard.persistence.stores.fallback_store import FallbackDocumentStore
from qaboard.persistence.stores.local_store import LocalDocumentStore
from qaboard.persistence.stores.s3_store import S3DocumentStore


def build_store(settings: Settings) -> DocumentStore:
    if settings.storage_mode == "local":
        return LocalDocumentStore(settings.data_dir)
    s3 = S3DocumentStore(settings.bucket, region=settings.region, prefix=settings.storage_prefix)
    if settings.storage_mode == "s3":
        return s3
    if settings.storage_mode == "fallback":
        return FallbackDocumentStore(primary=s3, secondary=LocalDocumentStore(settings.data_dir))
    raise ConfigError(f"Unknown storage mode '{settings.storage_mode}'.")


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


# Repositories track which backend served them, so services are per request.
def get_forum_app_service(request: Request) -> ForumAppService:
    return ForumAppService(repo=JsonForumRepository(get_store(request)))


def get_auth_app_service(request: Request) -> AuthAppService:
    return AuthAppService(repo=JsonUserRepository(get_store(request)))
