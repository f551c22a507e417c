"""Without singleton: every service opens its own connection.

Nothing stops a caller from constructing another connection, or from
pointing it at the wrong server.
"""

from __future__ import annotations

from typing import ClassVar

from core.narration import narrate


class DBConnection:
    _count: ClassVar[int] = 0

    def __init__(self, host: str, port: int):
        type(self)._count += 1
        self.host = host
        self.port = port
        narrate(f"Connection #{type(self)._count} created -> {host}:{port}")

    @classmethod
    def connection_count(cls) -> int:
        return cls._count

    @classmethod
    def reset_count(cls) -> None:
        cls._count = 0
