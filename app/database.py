from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import declarative_base, sessionmaker
import logging

from app.config import DATABASE_URL, SQL_ECHO

logger = logging.getLogger(__name__)


def build_engine(url: str, echo: bool = False):
    """Create an async engine; SQLite connections get foreign keys switched on."""
    engine = create_async_engine(url, echo=echo)

    if engine.dialect.name == "sqlite":
        # SQLite ignores ON DELETE CASCADE unless asked per connection
        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def build_session_factory(bind):
    return sessionmaker(
        bind=bind,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )


# ✅ Use create_async_engine for async operations
engine = build_engine(DATABASE_URL, echo=SQL_ECHO)

# ✅ Create an async session
SessionLocal = build_session_factory(engine)

# ✅ Define Base for models
Base = declarative_base()


# ✅ Dependency to get the async session, one per request
async def get_db():
    async with SessionLocal() as session:
        try:
            yield session
        except Exception:
            logger.debug("Rolling back request session after error")
            await session.rollback()
            raise


async def init_db(bind=None):
    # Import models so they register on Base.metadata
    from app import models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready.")


async_session = SessionLocal
