"""
Tests for the lazily configured engine and session factory.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ats_engine.core import database

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(autouse=True)
def fresh_database(monkeypatch):
    monkeypatch.setattr(database, "_engine", None)
    monkeypatch.setattr(database, "_session_factory", None)


class TestSessionFactory:

    def test_factory_bound_to_engine(self):
        factory = database.get_session_factory(MEMORY_URL)

        assert isinstance(factory, async_sessionmaker)
        assert factory.kw["bind"] is database.get_engine()

    def test_engine_configured_once(self):
        engine = database.get_engine(MEMORY_URL)

        assert database.get_engine() is engine
        assert str(engine.url) == MEMORY_URL

    @pytest.mark.asyncio
    async def test_session_dependency_yields_session(self):
        database.get_engine(MEMORY_URL)
        sessions = database.get_db_session()

        session = await sessions.__anext__()
        try:
            assert isinstance(session, AsyncSession)
        finally:
            await sessions.aclose()
            await database.get_engine().dispose()
