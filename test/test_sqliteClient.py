import sys
import os

current_file_dir = os.path.dirname(os.path.abspath(__file__))
parent_dir = os.path.dirname(current_file_dir)
if parent_dir not in sys.path:
    sys.path.append(parent_dir)
import asyncio
import json
import pickle
import sqlite3
import pytest
from sqliteClient import SqliteClient, AsyncSqliteClient
from flycatcher import Flycatcher, AsyncFlycatcher

dbSettings = {
    "PATH": ":memory:",
    "DATABASE": "main",
    "DEBUGLEVEL": "NONE",
    "LOGNAMES": ["None"],
}

peopleColumns = {
    "id": {"type": "INTEGER", "primary_key": True},
    "name": {"type": "VARCHAR", "length": 32},
    "tag": {"type": "VARCHAR", "length": 16},
    "meta": {"type": "TEXT"},
    "blob": {"type": "BLOB"},
}


@pytest.fixture
def fc():
    client = SqliteClient(dbSettings)
    yield Flycatcher(client, ['None'])
    client.close()


def test_existsBeforeAndAfterCreate(fc):
    assert fc.exists("people") is False
    fc.create("people", peopleColumns)
    assert fc.exists("people") is True
    assert fc.exists("ghosts") is False


def test_createIsIdempotent(fc):
    fc.create("people", peopleColumns)
    fc.create("people", peopleColumns)
    columns = [row[1] for row in fc.client.query('PRAGMA table_info("people")').fetchall()]
    assert columns == list(peopleColumns.keys())


def test_existsIsSchemaScoped(fc):
    fc.client.exec("ATTACH DATABASE ':memory:' AS other")
    fc.create("other.archive", {"id": {"type": "INT"}})
    assert fc.exists("archive") is False
    fc.client.databaseName = "other"
    assert fc.exists("archive") is True


def test_fanOutInsertsRowsInOrder(fc):
    fc.create("people", peopleColumns)
    fc.insert("people", {"name": ["ann", "bob"], "tag": ["x", "y", "z"]})
    rows = fc.client.query('SELECT id, name, tag FROM people ORDER BY id').fetchall()
    assert rows == [
        (1, "ann", "x"),
        (2, "ann", "y"),
        (3, "ann", "z"),
        (4, "bob", "x"),
        (5, "bob", "y"),
        (6, "bob", "z"),
    ]


def test_jsonAndSerializedColumnsAreEncoded(fc):
    fc.create("people", peopleColumns)
    fc.insert("people", {"name": "ann", "meta(JSON)": {"likes": ["tea"]}, "blob(SERIALIZE)": [1, 2]})
    meta, blob = fc.client.query("SELECT meta, blob FROM people").fetchone()
    assert json.loads(meta) == {"likes": ["tea"]}
    assert pickle.loads(blob) == [1, 2]


def test_databaseErrorsPropagate(fc):
    with pytest.raises(sqlite3.OperationalError):
        fc.insert("missing", {"id": [1, 2]})


def test_execReturnsRowCount(fc):
    fc.create("people", peopleColumns)
    fc.insert("people", {"name": ["a", "b", "c"]})
    assert fc.client.exec("UPDATE people SET tag = ?", ("t",)) == 3


def test_asyncClientEndToEnd():

    async def run():
        async with AsyncSqliteClient(dbSettings) as client:
            fc = AsyncFlycatcher(client, ['None'])
            before = await fc.exists("people")
            await fc.create("people", peopleColumns)
            after = await fc.exists("people")
            await fc.insert("people", {"name": "ann", "tag": ["x", "y"], "meta(JSON)": [1]})
            cursor = await client.query("SELECT name, tag, meta FROM people ORDER BY id")
            return before, after, await cursor.fetchall()

    before, after, rows = asyncio.run(run())
    assert (before, after) == (False, True)
    assert rows == [("ann", "x", "[1]"), ("ann", "y", "[1]")]


def test_asyncFromConfig():

    async def run():
        fc = await AsyncFlycatcher.fromConfig({"DBSETTINGS": {"LOGNAMES": ["None"]}})
        await fc.create("t", {"id": {"type": "INT"}})
        found = await fc.exists("t")
        await fc.client.close()
        return found

    assert asyncio.run(run()) is True
