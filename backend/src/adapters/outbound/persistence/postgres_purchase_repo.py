"""PostgreSQL implementation of PurchaseRepositoryPort using SQLAlchemy async."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, Float, Integer, String
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.future import select

from backend.src.core.entities.purchase import Purchase
from backend.src.infrastructure.database import Base

logger = logging.getLogger(__name__)


class PurchaseModel(Base):  # type: ignore[misc]
    """SQLAlchemy model for the ``purchases`` table."""

    __tablename__ = "purchases"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(128), nullable=False, index=True)
    stripe_session_id = Column(String(255), nullable=False, unique=True)
    credits_purchased = Column(Integer, nullable=False)
    amount_paid = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def to_entity(self) -> Purchase:
        return Purchase(
            id=self.id,
            user_id=self.user_id,
            stripe_session_id=self.stripe_session_id,
            credits_purchased=self.credits_purchased,
            amount_paid=self.amount_paid,
            created_at=self.created_at,
        )


class PostgresPurchaseRepository:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def save(self, purchase: Purchase) -> Purchase:
        async with self._session_factory() as session:
            session.add(
                PurchaseModel(
                    id=purchase.id,
                    user_id=purchase.user_id,
                    stripe_session_id=purchase.stripe_session_id,
                    credits_purchased=purchase.credits_purchased,
                    amount_paid=purchase.amount_paid,
                    created_at=purchase.created_at,
                )
            )
            await session.commit()
        logger.debug("Recorded purchase %s in PostgreSQL", purchase.id)
        return purchase

    async def get_by_session_id(self, session_id: str) -> Optional[Purchase]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(PurchaseModel).where(PurchaseModel.stripe_session_id == session_id)
            )
            row = result.scalars().first()
            return row.to_entity() if row is not None else None

    async def claim(self, purchase: Purchase) -> bool:
        """Insert keyed on the unique session id; a conflicting insert claims nothing."""
        async with self._session_factory() as session:
            result = await session.execute(
                insert(PurchaseModel)
                .values(
                    id=purchase.id,
                    user_id=purchase.user_id,
                    stripe_session_id=purchase.stripe_session_id,
                    credits_purchased=purchase.credits_purchased,
                    amount_paid=purchase.amount_paid,
                    created_at=purchase.created_at,
                )
                .on_conflict_do_nothing(index_elements=[PurchaseModel.stripe_session_id])
                .returning(PurchaseModel.id)
            )
            claimed = result.first() is not None
            await session.commit()
        logger.debug("Claim for session %s: %s", purchase.stripe_session_id, claimed)
        return claimed
