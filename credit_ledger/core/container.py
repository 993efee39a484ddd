"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from credit_ledger.core.config import Settings, get_settings
from credit_ledger.infrastructure.database import Database
from credit_ledger.infrastructure.random_org import RandomStringClient


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    database: Database
    random_strings: RandomStringClient

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        """Build infrastructure singletons (database engine, provider clients) from settings."""
        return cls(
            settings=settings,
            database=Database(settings.database, debug=settings.debug),
            random_strings=RandomStringClient(settings.random_org),
        )

    async def shutdown(self) -> None:
        await self.database.dispose()


@lru_cache()
def get_container() -> ApplicationContainer:
    return ApplicationContainer.from_settings(get_settings())


__all__ = ["ApplicationContainer", "get_container"]
