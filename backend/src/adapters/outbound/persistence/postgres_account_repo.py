"""PostgreSQL implementation of AccountRepositoryPort using SQLAlchemy async."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, Integer, String, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.future import select

from backend.src.core.entities.account import FREE_CREDITS, Account
from backend.src.infrastructure.database import Base

logger = logging.getLogger(__name__)


class AccountModel(Base):  # type: ignore[misc]
    """SQLAlchemy model for the ``accounts`` table."""

    __tablename__ = "accounts"

    user_id = Column(String(128), primary_key=True)
    email = Column(String(320), nullable=False, default="")
    credits = Column(Integer, nullable=False, default=FREE_CREDITS)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_entity(self) -> Account:
        return Account(
            user_id=self.user_id,
            email=self.email,
            credits=self.credits,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_entity(cls, account: Account) -> AccountModel:
        return cls(
            user_id=account.user_id,
            email=account.email,
            credits=account.credits,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


class PostgresAccountRepository:
    """Implements :class:`AccountRepositoryPort` backed by PostgreSQL."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_by_user_id(self, user_id: str) -> Optional[Account]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(AccountModel).where(AccountModel.user_id == user_id)
            )
            row = result.scalars().first()
            return row.to_entity() if row is not None else None

    async def save(self, account: Account) -> Account:
        """Insert or update the account row (single-row read-modify-write)."""
        account.updated_at = datetime.utcnow()
        async with self._session_factory() as session:
            merged = await session.merge(AccountModel.from_entity(account))
            await session.commit()
            logger.debug("Saved account %s to PostgreSQL (credits=%d)", account.user_id, account.credits)
            return merged.to_entity()

    async def get_or_create(self, account: Account) -> tuple[Account, bool]:
        """Single-statement insert so concurrent first contacts cannot reset a balance."""
        async with self._session_factory() as session:
            inserted = await session.execute(
                insert(AccountModel)
                .values(
                    user_id=account.user_id,
                    email=account.email,
                    credits=account.credits,
                    created_at=account.created_at,
                    updated_at=account.updated_at,
                )
                .on_conflict_do_nothing(index_elements=[AccountModel.user_id])
                .returning(AccountModel.user_id)
            )
            created = inserted.first() is not None
            if not created and account.email:
                await session.execute(
                    update(AccountModel)
                    .where(AccountModel.user_id == account.user_id, AccountModel.email == "")
                    .values(email=account.email, updated_at=datetime.utcnow())
                )
            await session.commit()

            result = await session.execute(
                select(AccountModel).where(AccountModel.user_id == account.user_id)
            )
            return result.scalars().one().to_entity(), created

    async def adjust_credits(self, user_id: str, delta: int) -> Optional[Account]:
        """Apply *delta* under a row lock; raises before commit if it would overdraw."""
        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(
                    select(AccountModel)
                    .where(AccountModel.user_id == user_id)
                    .with_for_update()
                )
                row = result.scalars().first()
                if row is None:
                    return None
                account = row.to_entity()
                account.apply_credit_delta(delta)
                row.credits = account.credits
                row.updated_at = account.updated_at
            logger.debug("Adjusted credits for %s by %d (credits=%d)", user_id, delta, account.credits)
            return account
