from logger import Logger
from configLoader import ConfigurationError, loadConfig
from SqlGenerators import sql_create_table, sql_table_exists
from rowValues import expandRow
from sqliteClient import SqliteClient, AsyncSqliteClient

__all__ = ["Flycatcher", "AsyncFlycatcher", "ConfigurationError"]


# count is returned as a string by some drivers
def countFromRows(result):
    if not result:
        return 0
    return int(result[0][0] or 0)


class Flycatcher(Logger):
    """
    Table creation, existence checks and fan-out inserts on top of a client.

    The client owns the connection and must provide ``insert(table, data)``,
    ``query(sql, params)`` returning a cursor, ``exec(sql, params)``
    returning the affected row count, plus ``dialect`` and ``databaseName``.
    """

    def __init__(self, client, loggers=['default'], debugLevel="NORMAL"):
        super().__init__('fc', loggers, debugLevel)
        self.client = client

    @classmethod
    def fromConfig(cls, config):
        dbSettings = loadConfig(config)
        return cls(SqliteClient(dbSettings), dbSettings["LOGNAMES"], dbSettings["DEBUGLEVEL"])

    def exists(self, tableName):
        query, params = sql_table_exists(self.client.databaseName, tableName, self.client.dialect)
        result = self.client.query(query, params).fetchall()
        rows = countFromRows(result)
        self.logDebug(f"{tableName} exists in {self.client.databaseName}: {bool(rows)}")
        return bool(rows)

    def create(self, tableName, columns, tableOptions=None):
        query = sql_create_table(tableName, columns)
        self.logInfo(f"creating {tableName}")
        return self.client.exec(query)

    def insert(self, tableName, data):
        inserted = 0
        for row in expandRow(data):
            self.client.insert(tableName, row)
            inserted += 1
        self.logInfo(f"{inserted} rows inserted into {tableName}")


class AsyncFlycatcher(Logger):

    def __init__(self, client, loggers=['default'], debugLevel="NORMAL"):
        super().__init__('fc', loggers, debugLevel)
        self.client = client

    @classmethod
    async def fromConfig(cls, config):
        dbSettings = loadConfig(config)
        client = await AsyncSqliteClient(dbSettings).connect()
        return cls(client, dbSettings["LOGNAMES"], dbSettings["DEBUGLEVEL"])

    async def exists(self, tableName):
        query, params = sql_table_exists(self.client.databaseName, tableName, self.client.dialect)
        cursor = await self.client.query(query, params)
        rows = countFromRows(await cursor.fetchall())
        self.logDebug(f"{tableName} exists in {self.client.databaseName}: {bool(rows)}")
        return bool(rows)

    async def create(self, tableName, columns, tableOptions=None):
        query = sql_create_table(tableName, columns)
        self.logInfo(f"creating {tableName}")
        return await self.client.exec(query)

    async def insert(self, tableName, data):
        inserted = 0
        for row in expandRow(data):
            await self.client.insert(tableName, row)
            inserted += 1
        self.logInfo(f"{inserted} rows inserted into {tableName}")
