import logging
from typing import Any, Callable, List, Mapping, Optional, Union

import click
from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import Executable

from retail.core.config import DB_DRIVER, DB_HOST

Base = declarative_base()

logger = logging.getLogger(__name__)

Statement = Union[str, Executable]


class StoreConnectionError(ConnectionError):
    """Не удалось установить соединение с базой данных."""


class StatementError(Exception):
    """Ошибка выполнения запроса: синтаксис, ограничения БД и т.п."""


def build_database_url(
    dbname: str,
    port: int,
    user: str,
    password: Optional[str] = None,
    host: str = DB_HOST,
    driver: str = DB_DRIVER,
) -> URL:
    return URL.create(
        driver,
        username=user,
        password=password or None,
        host=host,
        port=port,
        database=dbname,
    )


def _driver_message(error: Exception) -> str:
    """Первая строка сообщения драйвера, без обертки SQLAlchemy."""
    orig = getattr(error, "orig", None)
    message = str(orig if orig is not None else error).strip()
    return message.splitlines()[0] if message else error.__class__.__name__


def _as_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


class StoreGateway:
    """
    Единственное соединение с базой данных на всё время работы процесса.

    Каждый вызов execute_* выполняется в отдельной транзакции и сразу
    фиксируется. Запросы выполняются строго последовательно.
    """

    def __init__(
        self,
        url: Union[str, URL, None] = None,
        engine: Optional[AsyncEngine] = None,
        echo: Callable[[str], None] = click.echo,
    ):
        if engine is None and url is None:
            raise ValueError("Нужно указать url или engine")
        self._url = url
        self._engine = engine
        self._owns_engine = engine is None
        self._conn: Optional[AsyncConnection] = None
        self.echo = echo

    @property
    def connected(self) -> bool:
        return self._conn is not None

    async def connect(self) -> None:
        if self._conn is not None:
            return
        try:
            if self._engine is None:
                self._engine = create_async_engine(self._url, echo=False)
            self._conn = await self._engine.connect()
        except (SQLAlchemyError, OSError) as e:
            logger.info("Не удалось подключиться к базе данных: %s", e)
            if self._owns_engine and self._engine is not None:
                await self._engine.dispose()
                self._engine = None
            raise StoreConnectionError(_driver_message(e)) from e
        logger.info("Соединение с базой данных установлено")

    def _require_connection(self) -> AsyncConnection:
        if self._conn is None:
            raise StatementError("Нет соединения с базой данных")
        return self._conn

    async def _execute(self, statement: Statement, params: Optional[Mapping] = None):
        conn = self._require_connection()
        if isinstance(statement, str):
            statement = text(statement)
        try:
            result = await conn.execute(statement, params)
            await conn.commit()
        except SQLAlchemyError as e:
            logger.info("Ошибка выполнения запроса: %s", e)
            await conn.rollback()
            raise StatementError(_driver_message(e)) from e
        return result

    async def execute_update(
        self, statement: Statement, params: Optional[Mapping] = None
    ) -> int:
        """Выполнить INSERT/UPDATE/DELETE. Возвращает число затронутых строк."""
        result = await self._execute(statement, params)
        return result.rowcount

    async def execute_insert(
        self, statement: Statement, params: Optional[Mapping] = None
    ) -> Any:
        """Выполнить INSERT одной строки и вернуть сгенерированный ключ."""
        result = await self._execute(statement, params)
        key = result.inserted_primary_key
        return key[0] if key else None

    async def execute_query_print(
        self, statement: Statement, params: Optional[Mapping] = None
    ) -> int:
        """
        Выполнить запрос и вывести результат в консоль.

        Заголовок (имена колонок через табуляцию) печатается перед первой
        строкой результата; пустой результат ничего не выводит.

        Returns:
            int: Количество строк в результате
        """
        result = await self._execute(statement, params)
        columns = list(result.keys())
        row_count = 0
        for row in result.fetchall():
            if row_count == 0:
                self.echo("\t".join(columns))
            self.echo("\t".join(str(value) for value in row))
            row_count += 1
        return row_count

    async def execute_query_rows(
        self, statement: Statement, params: Optional[Mapping] = None
    ) -> List[List[Optional[str]]]:
        result = await self._execute(statement, params)
        return [[_as_text(value) for value in row] for row in result.fetchall()]

    async def execute_query_count(
        self, statement: Statement, params: Optional[Mapping] = None
    ) -> int:
        result = await self._execute(statement, params)
        return len(result.fetchall())

    async def close(self) -> None:
        # Ошибки отключения ни на что не влияют, движок освобождается в любом случае
        conn, self._conn = self._conn, None
        if conn is not None:
            try:
                await conn.close()
            except Exception as e:
                logger.warning("Ошибка при закрытии соединения: %s", e)

        if self._owns_engine and self._engine is not None:
            engine, self._engine = self._engine, None
            try:
                await engine.dispose()
            except Exception as e:
                logger.warning("Ошибка при освобождении пула соединений: %s", e)
        logger.info("Соединение с базой данных закрыто")
