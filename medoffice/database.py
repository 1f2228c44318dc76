from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase

from medoffice.config import settings
from medoffice.errors import normalize_error


# Set echo=False to disable SQL query logging (too verbose for development)
engine = create_async_engine(
    settings.database_url,
    echo=False,
    future=True,
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


@asynccontextmanager
async def session_scope(factory: async_sessionmaker = AsyncSessionLocal) -> AsyncIterator[AsyncSession]:
    """Open a session, commit on success and roll back on failure.

    Driver and ORM errors are re-raised as ``DataAccessError`` so that the
    routes never see backend-specific exception shapes.
    """
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            raise normalize_error(e) from e
        except Exception:
            await session.rollback()
            raise


async def init_db():
    """Initialize database tables."""
    # Import models so their tables are registered on Base.metadata
    import medoffice.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db():
    """Close database connections."""
    await engine.dispose()
