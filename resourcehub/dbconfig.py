"""Database connection settings."""

from __future__ import annotations

from dataclasses import dataclass

PASSWORD = "password"


@dataclass
class DbConfig:
    """Where and how to connect to the database; the timeout is in seconds."""

    host: str = "localhost"
    port: int = 5432
    username: str = "postgres"
    password: str = PASSWORD
    database: str = "app_db"
    max_connections: int = 10
    connection_timeout: float = 5.0


def build_connection_string(config: DbConfig) -> str:
    """Return the ``postgres://`` URL for ``config``."""
    return (
        f"postgres://{config.username}:{config.password}"
        f"@{config.host}:{config.port}/{config.database}"
    )