import logging

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from app.models.system_log import LogPriority, LogType
from app.services.activity_log import ActivityLog, activity_log


async def test_append_and_list_newest_first(db):
    await activity_log.append("first", origin=("Tests", "one"))
    await activity_log.append("second", LogPriority.High, LogType.Error, origin=("Tests", "two"))

    entries = await activity_log.list(db)

    assert [e.message for e in entries] == ["second", "first"]
    newest = entries[0]
    assert newest.priority == LogPriority.High
    assert newest.type == LogType.Error
    assert newest.project == "CMD-Telehealth"
    assert (newest.class_name, newest.method) == ("Tests", "two")


async def test_list_filters_and_limit(db):
    await activity_log.append("a", LogPriority.Low, LogType.Info)
    await activity_log.append("b", LogPriority.Medium, LogType.Warning)
    await activity_log.append("c", LogPriority.High, LogType.Error)
    await activity_log.append("d", LogPriority.Medium, LogType.Info)

    assert [e.message for e in await activity_log.list(db, type=LogType.Info)] == ["d", "a"]
    assert [e.message for e in await activity_log.list(db, priority=LogPriority.Medium)] == ["d", "b"]
    assert [e.message for e in await activity_log.list(db, type=LogType.Warning, priority=LogPriority.Medium)] == ["b"]
    assert len(await activity_log.list(db, limit=2)) == 2


async def test_clear_removes_everything(db):
    await activity_log.append("x")
    await activity_log.append("y", LogPriority.Critical, LogType.Error)

    removed = await activity_log.clear(db)

    assert removed == 2
    assert await activity_log.list(db) == []
    assert await activity_log.list(db, type=LogType.Error) == []


async def test_append_never_raises(tmp_path, caplog):
    broken = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/missing/dir/logs.db")
    log = ActivityLog(async_sessionmaker(broken, expire_on_commit=False))

    with caplog.at_level(logging.WARNING, logger="app.services.activity_log"):
        await log.append("will not persist", LogPriority.High, LogType.Error, origin=("Tests", "broken"))

    assert "could not persist activity log entry" in caplog.text
    await broken.dispose()


async def test_append_mirrors_to_python_logger(seeded, caplog):
    with caplog.at_level(logging.INFO, logger="app.services.activity_log"):
        await activity_log.append("hello", LogPriority.Low, LogType.Warning, origin=("Tests", "mirror"))

    assert "[Warning] Tests.mirror: hello" in caplog.text
