from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any, cast
from urllib.parse import urlparse

import structlog
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from blogdesk.config import Config
from blogdesk.errors import NotConfiguredError

logger = structlog.get_logger(__name__)


class Service:
    """Base class for services with optional direct database access.

    `database` is None when no durable store is configured.
    """

    def __init__(self, database: AsyncDatabase[dict[str, Any]] | None) -> None:
        self.database = database
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core

    def require_database(self) -> AsyncDatabase[dict[str, Any]]:
        """Get the database, or raise NotConfiguredError when none is configured."""
        if self.database is None:
            raise NotConfiguredError("Database not configured. Set BLOGDESK_DATABASE_URL to enable articles.")
        return self.database


class Services:
    """Service registry that automatically discovers and initializes services."""

    from blogdesk.core.modules.article.service import ArticleService  # noqa: PLC0415
    from blogdesk.core.modules.counter.service import CounterService  # noqa: PLC0415
    from blogdesk.core.modules.session.service import SessionService  # noqa: PLC0415
    from blogdesk.core.modules.upload.service import UploadService  # noqa: PLC0415

    session: SessionService
    counter: CounterService
    article: ArticleService
    upload: UploadService

    def __init__(self, database: AsyncDatabase[dict[str, Any]] | None) -> None:
        """Initialize all services automatically using service configuration."""
        self._services: list[Service] = []
        self._database = database

        # Service configuration: (attribute_name, module_path, class_name)
        # Order matters for initialization - session store schema first
        service_configs = [
            ("session", "blogdesk.core.modules.session.service", "SessionService"),
            ("counter", "blogdesk.core.modules.counter.service", "CounterService"),
            ("article", "blogdesk.core.modules.article.service", "ArticleService"),
            ("upload", "blogdesk.core.modules.upload.service", "UploadService"),
        ]

        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(database)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        """Start all services that have startup logic."""
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        """Stop all services that have cleanup logic."""
        for service in self._services:
            await service.on_stop()


class Core:
    """Container providing config, the optional database, and all service instances."""

    config: Config
    mongo_client: AsyncMongoClient[dict[str, Any]] | None
    database: AsyncDatabase[dict[str, Any]] | None
    services: Services

    def __init__(self, config: Config) -> None:
        """Initialize core with config, MongoDB (when configured), and auto-register services."""
        self.config = config
        self.mongo_client = None
        self.database = None
        if config.database_url:
            self.mongo_client = AsyncMongoClient(config.database_url, uuidRepresentation="standard")
            self.database = self.mongo_client.get_database(urlparse(config.database_url).path[1:])
        else:
            logger.warning("database_not_configured", detail="sessions are kept in process memory")
        self.services = Services(self.database)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        await self.services.start_all()

    async def on_stop(self) -> None:
        """Stop services and close MongoDB connection on shutdown."""
        await self.services.stop_all()
        if self.mongo_client is not None:
            await self.mongo_client.aclose()
