import json
import pickle
import sqlite3
import aiosqlite
from logger import Logger
from rowValues import JSON_TAG
from SqlGenerators import build_insert_sql

# values the wrapped client stores as opaque blobs unless tagged (JSON)
containerTypes = (list, tuple, dict, set)


def encodeRow(data):
    columns = []
    values = []
    for columnName, value in data.items():
        if JSON_TAG in columnName:
            columnName = columnName.replace(JSON_TAG, "").strip()
            value = json.dumps(value)
        elif isinstance(value, containerTypes):
            value = pickle.dumps(value)
        columns.append(columnName)
        values.append(value)
    return columns, values


class SqliteClient(Logger):
    dialect = "sqlite"
    placeHolder = '?'

    def __init__(self, dbSettings, con=None):
        super().__init__('db', dbSettings["LOGNAMES"], dbSettings["DEBUGLEVEL"])
        self.loadSettings(dbSettings)
        self.con = con if con is not None else sqlite3.connect(self.path)

    def loadSettings(self, cfg):
        self.path = cfg["PATH"]
        self.databaseName = cfg["DATABASE"]

    def insert(self, table, data):
        columns, values = encodeRow(data)
        query = build_insert_sql(columns, table, self.placeHolder)
        self.logDebug(f"{query} {values}")
        cursor = self.con.execute(query, values)
        self.con.commit()
        return cursor

    def query(self, query, params=()):
        self.logDebug(f"{query} {params}")
        return self.con.execute(query, params)

    def exec(self, query, params=()):
        self.logDebug(f"{query} {params}")
        cursor = self.con.execute(query, params)
        self.con.commit()
        return cursor.rowcount

    def close(self):
        self.con.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()


class AsyncSqliteClient(Logger):
    dialect = "sqlite"
    placeHolder = '?'

    def __init__(self, dbSettings):
        super().__init__('db', dbSettings["LOGNAMES"], dbSettings["DEBUGLEVEL"])
        self.loadSettings(dbSettings)
        self.con = None

    def loadSettings(self, cfg):
        self.path = cfg["PATH"]
        self.databaseName = cfg["DATABASE"]

    async def connect(self):
        if self.con is None:
            self.con = await aiosqlite.connect(self.path)
            self.logInfo(f"connected to {self.path}")
        return self

    async def insert(self, table, data):
        columns, values = encodeRow(data)
        query = build_insert_sql(columns, table, self.placeHolder)
        self.logDebug(f"{query} {values}")
        cursor = await self.con.execute(query, values)
        await self.con.commit()
        return cursor

    async def query(self, query, params=()):
        self.logDebug(f"{query} {params}")
        return await self.con.execute(query, params)

    async def exec(self, query, params=()):
        self.logDebug(f"{query} {params}")
        cursor = await self.con.execute(query, params)
        await self.con.commit()
        return cursor.rowcount

    async def close(self):
        if self.con is not None:
            await self.con.close()
            self.con = None

    async def __aenter__(self):
        return await self.connect()

    async def __aexit__(self, *args):
        await self.close()
