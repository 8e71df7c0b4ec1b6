from __future__ import annotations

from typing import Optional

import mysql.connector

from ..core.exceptions import PersistenceError
from ..database.bootstrap import STORAGE_TABLE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import Storage


class MySQLStorage(Storage):
    """Key-value rows in the ``local_storage`` table (see ``database.bootstrap``)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_item(self, key: str) -> Optional[str]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"SELECT storage_value FROM `{STORAGE_TABLE}` WHERE storage_key=%s",
                    (key,),
                )
                row = fetchone(cur)
                return row["storage_value"] if row else None
        except mysql.connector.Error as e:
            raise PersistenceError(f"Cannot read {key!r}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO `{STORAGE_TABLE}`(storage_key, storage_value)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE storage_value=VALUES(storage_value)
                    """,
                    (key, str(value)),
                )
        except mysql.connector.Error as e:
            raise PersistenceError(f"Cannot write {key!r}: {e}") from e

    def remove_item(self, key: str) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(f"DELETE FROM `{STORAGE_TABLE}` WHERE storage_key=%s", (key,))
        except mysql.connector.Error as e:
            raise PersistenceError(f"Cannot remove {key!r}: {e}") from e
