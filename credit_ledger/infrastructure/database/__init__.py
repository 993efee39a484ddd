"""Database infrastructure helpers (engine, sessions, schema bootstrap)."""

from .base import Base
from .bootstrap import BootstrapReport, SchemaBootstrapError, bootstrap_schema
from .session import Database

__all__ = ["Base", "BootstrapReport", "Database", "SchemaBootstrapError", "bootstrap_schema"]
