"""
Initialize the ledger schema.

Creates the users, operations and records tables when they are missing and
seeds the default operation catalog.
"""
import asyncio

from credit_ledger.core.config import get_settings
from credit_ledger.core.container import ApplicationContainer
from credit_ledger.core.logging import configure_logging
from credit_ledger.infrastructure.database import bootstrap_schema


async def initialize_database() -> None:
    settings = get_settings()
    configure_logging(level=settings.logging.level, json_logs=settings.logging.json_logs)

    container = ApplicationContainer.from_settings(settings)
    try:
        report = await bootstrap_schema(container.database)
    finally:
        await container.shutdown()

    print(f"Existing tables: {', '.join(report.existing_tables) or '-'}")
    print(f"Created tables: {', '.join(report.created_tables) or '-'}")
    print(report.summary)


if __name__ == "__main__":
    asyncio.run(initialize_database())
