"""SQLAlchemy declarative base and ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""


class DiscoveryModel(Base):
    """ORM model for scanned discoveries.

    The collection is append-only; ``row_id`` preserves insertion order.
    """

    __tablename__ = "discoveries"

    row_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    discovery_id: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    species: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    fun_fact: Mapped[str] = mapped_column(Text, nullable=False)
    icon: Mapped[str] = mapped_column(String, nullable=False)
    rarity: Mapped[str] = mapped_column(String, nullable=False)
    theme: Mapped[str] = mapped_column(String, nullable=False)
    scannable_type: Mapped[str] = mapped_column(String, nullable=False)
    energy_level: Mapped[int] = mapped_column(Integer, nullable=False)
    discovered_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    __table_args__ = (Index("idx_discovery_theme", "theme"),)
