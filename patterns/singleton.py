"""Singleton pattern: one shared database connection.

Every service asks the class for the connection instead of constructing
one, so the whole process shares a single connection with a single config.

Example domain: a user service and an order service both needing the DB.
"""

from __future__ import annotations

import threading
from typing import ClassVar, Optional

from core.narration import narrate
from patterns.domain_config import DatabaseConfig

_ACCESSOR_TOKEN = object()


class DBConnection:
    """Process-wide database connection.

    Usage::

        db1 = DBConnection.get_instance()
        db2 = DBConnection.get_instance()
        assert db1 is db2

    Constructing ``DBConnection()`` directly raises TypeError.
    """

    _instance: ClassVar[Optional["DBConnection"]] = None
    _count: ClassVar[int] = 0
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, config: DatabaseConfig, _token: object = None):
        if _token is not _ACCESSOR_TOKEN:
            raise TypeError("DBConnection is a singleton; use DBConnection.get_instance()")
        type(self)._count += 1
        self.host = config.host
        self.port = config.port
        narrate(f"Connection #{type(self)._count} created -> {config.address}")

    @classmethod
    def get_instance(cls, config: Optional[DatabaseConfig] = None) -> "DBConnection":
        """Return the shared connection, creating it on first use.

        ``config`` only matters for the call that creates the connection.
        """
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(config or DatabaseConfig(), _token=_ACCESSOR_TOKEN)
        return cls._instance

    @classmethod
    def connection_count(cls) -> int:
        """Number of connections ever created."""
        return cls._count

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared connection and its counter."""
        with cls._lock:
            cls._instance = None
            cls._count = 0

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"
