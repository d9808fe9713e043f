from __future__ import annotations

import json

import mysql.connector

from ..core.exceptions import PersistenceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from ..logging import get_logger
from .repository import ContinuityRepository
from .state import ContinuityState

log = get_logger(__name__)


class MySQLContinuityRepository(ContinuityRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self, owner_id: str) -> ContinuityState:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "SELECT payload FROM continuity_documents WHERE owner_id=%s",
                    (str(owner_id),),
                )
                r = fetchone(cur)
        except mysql.connector.Error as e:
            log.error("continuity_load_failed", owner_id=owner_id, error=str(e))
            raise PersistenceError(f"Could not load continuity data for {owner_id}") from e

        if not r:
            return ContinuityState.empty()

        try:
            payload = r["payload"]
            if isinstance(payload, (bytes, bytearray)):
                payload = payload.decode("utf-8")
            if isinstance(payload, str):
                payload = json.loads(payload)
            return ContinuityState.from_dict(payload)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            log.error("continuity_document_unreadable", owner_id=owner_id, error=repr(e))
            raise PersistenceError(f"Stored continuity data for {owner_id} is unreadable") from e

    def save(self, owner_id: str, state: ContinuityState) -> bool:
        payload = json.dumps(state.to_dict(), ensure_ascii=False)
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO continuity_documents(owner_id, payload)
                    VALUES(%s,%s)
                    ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                    """,
                    (str(owner_id), payload),
                )
        except mysql.connector.Error as e:
            log.error("continuity_save_failed", owner_id=owner_id, error=str(e))
            return False
        return True
