"""SQLAlchemy ORM models for scanned transactions and system configuration"""

import uuid
from sqlalchemy import Column, String, Float, DateTime, Text, JSON
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class ScannedTransaction(Base):
    """A transaction submitted for scanning together with its risk verdict"""

    __tablename__ = "transactions"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Text, nullable=False, index=True)
    amount = Column(Float, nullable=False)
    location = Column(String(16), nullable=False)
    type = Column(String(32), nullable=False)
    time_of_day = Column(Float, nullable=False)
    risk_score = Column(Float, nullable=False)
    status = Column(String(16), nullable=False, index=True)  # Safe | Review | Fraud
    risk_reason = Column(Text, nullable=True)
    source = Column(String(16), nullable=False, default="heuristic")  # remote | heuristic
    model_version = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class SystemConfig(Base):
    """Admin-editable settings stored as JSON documents keyed by name"""

    __tablename__ = "system_config"

    key = Column(Text, primary_key=True)
    value = Column(JSON, nullable=False)
    updated_by = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())
