"""PostgreSQL implementation of ConversionRepositoryPort using SQLAlchemy async."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import Column, DateTime, Index, String, Text
from sqlalchemy.dialects.postgresql import JSON
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.future import select

from backend.src.core.entities.conversion import Conversion
from backend.src.infrastructure.database import Base

logger = logging.getLogger(__name__)


class ConversionModel(Base):  # type: ignore[misc]
    """SQLAlchemy model for the ``conversions`` table."""

    __tablename__ = "conversions"
    __table_args__ = (Index("ix_conversions_user_created", "user_id", "created_at"),)

    id = Column(String(36), primary_key=True)
    user_id = Column(String(128), nullable=False)
    image_url = Column(Text, nullable=False, default="")
    generated_code = Column(Text, nullable=False, default="")
    format = Column(String(32), nullable=False, default="html")
    quality = Column(JSON, nullable=True)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def to_entity(self) -> Conversion:
        return Conversion(
            id=self.id,
            user_id=self.user_id,
            image_url=self.image_url,
            generated_code=self.generated_code,
            format=self.format,
            quality=self.quality,
            created_at=self.created_at,
        )

    @classmethod
    def from_entity(cls, conversion: Conversion) -> ConversionModel:
        return cls(
            id=conversion.id,
            user_id=conversion.user_id,
            image_url=conversion.image_url,
            generated_code=conversion.generated_code,
            format=conversion.format,
            quality=conversion.quality,
            created_at=conversion.created_at,
        )


class PostgresConversionRepository:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def save(self, conversion: Conversion) -> Conversion:
        async with self._session_factory() as session:
            session.add(ConversionModel.from_entity(conversion))
            await session.commit()
        logger.debug("Saved conversion %s to PostgreSQL", conversion.id)
        return conversion

    async def list_by_user(self, user_id: str, limit: int = 50) -> list[Conversion]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(ConversionModel)
                .where(ConversionModel.user_id == user_id)
                .order_by(ConversionModel.created_at.desc())
                .limit(limit)
            )
            return [row.to_entity() for row in result.scalars().all()]
