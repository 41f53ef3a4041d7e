# Engine lifecycle: startup retries and re-initialization after dispose
import asyncio

import pytest
from sqlalchemy.exc import OperationalError


def test_init_db_retries_then_raises(database_module, tmp_path, monkeypatch):
    unreachable = tmp_path / "missing" / "dir" / "bots.db"
    monkeypatch.setattr(database_module.settings, "DATABASE_URL", f"sqlite+aiosqlite:///{unreachable}")

    attempts = []
    real_create_engine = database_module.create_async_engine

    def counting_create_engine(*args, **kwargs):
        attempts.append(args[0])
        return real_create_engine(*args, **kwargs)

    monkeypatch.setattr(database_module, "create_async_engine", counting_create_engine)

    with pytest.raises(OperationalError):
        asyncio.run(database_module.init_db())

    assert len(attempts) == 2
    assert database_module.async_engine is None
    assert database_module.AsyncSessionLocal is None


def test_init_db_after_dispose_creates_new_engine(database_module):
    async def cycle():
        await database_module.init_db()
        first = database_module.async_engine
        assert first is not None

        await database_module.dispose_db()
        assert database_module.async_engine is None
        assert database_module.AsyncSessionLocal is None

        await database_module.init_db()
        second = database_module.async_engine
        await database_module.dispose_db()
        return first, second

    first, second = asyncio.run(cycle())
    assert second is not None
    assert second is not first
