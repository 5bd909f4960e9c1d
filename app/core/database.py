from typing import AsyncGenerator
from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy.ext.asyncio import (
    create_async_engine,
    async_sessionmaker,
    AsyncEngine,
    AsyncSession,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import DateTime, Uuid
from sqlalchemy.sql import func

from app.core.config import settings


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    # sqlite picks its own pool; the sizing only applies to server databases
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=echo, future=True)
    return create_async_engine(
        url,
        echo=echo,
        pool_size=10,
        max_overflow=20,
        pool_recycle=1800,
        future=True,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        index=True,
        default=uuid4,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def create_tables(bind: AsyncEngine | None = None):
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
