"""Database connection and transaction handling."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine, make_url

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """Connection settings for the PostgreSQL database."""

    db_name: str
    host_port: str
    username: str
    password: str

    def url(self) -> str:
        return (
            f"postgres://{self.username}:{self.password}@{self.host_port}/"
            f"{self.db_name}?sslmode=disable&timezone=UTC"
        )


def _engine_url(config: Config):
    url = make_url(config.url().replace("postgres://", "postgresql://", 1))
    return url.difference_update_query(["timezone"]).update_query_dict(
        {"options": "-c timezone=UTC"}
    )


class Database:
    """A pooled database with transactional access."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @classmethod
    def from_config(cls, config: Config) -> Database:
        """Connect to the database described by the config and check it answers."""
        database = cls(create_engine(_engine_url(config)))
        database.ping()
        return database

    def ping(self) -> None:
        """Run a trivial query; raises if the database cannot be reached."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Yield a connection inside a transaction.

        The transaction commits when the block ends normally and rolls back
        when it raises; the exception is then re-raised.
        """
        with self.engine.connect() as conn:
            trans = conn.begin()
            try:
                yield conn
            except BaseException:
                _log.error("tx finished with err", exc_info=True)
                trans.rollback()
                raise
            trans.commit()

    def close(self) -> None:
        """Release every pooled connection."""
        self.engine.dispose()