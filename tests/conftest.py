import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.database import build_engine, build_session_factory, get_db, init_db


def _override(factory):
    async def override_get_db():
        async with factory() as session:
            yield session
    return override_get_db


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'player_stats_test.db'}")
    await init_db(engine)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory):
    app.dependency_overrides[get_db] = _override(session_factory)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def broken_client(tmp_path):
    # Schema never created, so every query fails inside the store
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    app.dependency_overrides[get_db] = _override(build_session_factory(engine))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    await engine.dispose()
