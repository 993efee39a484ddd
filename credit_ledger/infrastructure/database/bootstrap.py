"""Guarded schema bootstrap: create the ledger tables only when they are missing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy import inspect, insert
from sqlalchemy.ext.asyncio import AsyncConnection

from .base import Base
from .session import Database

logger = logging.getLogger(__name__)

LEDGER_TABLES: tuple[str, ...] = ("users", "operations", "records")


class SchemaBootstrapError(RuntimeError):
    """Raised when a table is still missing after the initialization script ran."""


@dataclass(slots=True)
class BootstrapReport:
    existing_tables: list[str] = field(default_factory=list)
    created_tables: list[str] = field(default_factory=list)

    @property
    def summary(self) -> str:
        if self.created_tables:
            return f"Database initialized successfully. Created tables: {', '.join(self.created_tables)}"
        return "All tables already exist. No initialization needed."


async def _table_exists(conn: AsyncConnection, table: str) -> bool:
    return await conn.run_sync(lambda sync_conn: inspect(sync_conn).has_table(table))


async def _run_initialization_script(conn: AsyncConnection, created: list[str]) -> None:
    # Deferred imports: the models module imports this package for Base.
    from credit_ledger.db import models
    from credit_ledger.modules.operations.models import DEFAULT_OPERATION_COSTS

    await conn.run_sync(Base.metadata.create_all)
    if "operations" in created:
        await conn.execute(
            insert(models.Operation),
            [
                {"id": models.generate_uuid(), "type": op_type.value, "cost": cost}
                for op_type, cost in DEFAULT_OPERATION_COSTS.items()
            ],
        )


async def bootstrap_schema(database: Database) -> BootstrapReport:
    """Create missing ledger tables, seed the operation catalog, and verify the result."""
    report = BootstrapReport()

    async with database.engine.begin() as conn:
        for table in LEDGER_TABLES:
            if await _table_exists(conn, table):
                report.existing_tables.append(table)
            else:
                report.created_tables.append(table)

        if report.created_tables:
            logger.info("Creating missing tables: %s", ", ".join(report.created_tables))
            await _run_initialization_script(conn, report.created_tables)

            for table in report.created_tables:
                if not await _table_exists(conn, table):
                    raise SchemaBootstrapError(f"Table '{table}' was not created.")

    logger.info(report.summary)
    return report


__all__ = ["BootstrapReport", "LEDGER_TABLES", "SchemaBootstrapError", "bootstrap_schema"]
