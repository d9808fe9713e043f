from __future__ import annotations

from dataclasses import dataclass

from .continuity.mysql_continuity_repository import MySQLContinuityRepository
from .continuity.repository import ContinuityRepository
from .continuity.service import ContinuityService
from .database.connection import DBConfig, DatabaseConnection


@dataclass(frozen=True)
class Container:
    documents: ContinuityRepository
    continuity_service: ContinuityService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_settings(db_config))
    return build_container_for(MySQLContinuityRepository(conn))


def build_container_for(documents: ContinuityRepository) -> Container:
    return Container(documents=documents, continuity_service=ContinuityService(documents))
