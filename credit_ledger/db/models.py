"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import expression, func

from credit_ledger.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True)
    email = Column(String(255))
    username = Column(String(255), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="active", server_default="active")
    balance = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Operation(Base):
    __tablename__ = "operations"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    type = Column(String(50), nullable=False, unique=True)
    cost = Column(Integer, nullable=False, default=0)


class Record(Base):
    __tablename__ = "records"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)
    operation_id = Column(String(36), ForeignKey("operations.id"), nullable=False, index=True)
    amount = Column(Integer, nullable=False)
    user_balance = Column(Integer, nullable=False)
    operation_response = Column(Text)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    deleted = Column(Boolean, nullable=False, default=False, server_default=expression.false())
