"""Singleton scenarios: one connection per service vs one shared connection."""

from __future__ import annotations

from core.narration import narrate
from core.registry import register_demo
from naive import singleton as naive
from patterns.domain_config import DemoConfig
from patterns.singleton import DBConnection

_ROLES = ["Singleton: DBConnection", "Accessor: DBConnection.get_instance()"]


@register_demo(
    "singleton", "without",
    title="Every service opens its own connection",
    summary="Services construct connections directly, so two services hold two connections.",
    roles=_ROLES,
)
def run_without(config: DemoConfig) -> None:
    narrate("=== WITHOUT SINGLETON ===")
    narrate("")
    naive.DBConnection.reset_count()

    db = config.database
    db1 = naive.DBConnection(db.host, db.port)  # user service
    db2 = naive.DBConnection(db.host, db.port)  # order service

    narrate("")
    narrate(f">> Total connections: {naive.DBConnection.connection_count()}")
    narrate(f">> db1 is db2 ? {db1 is db2}")


@register_demo(
    "singleton", "with",
    title="One shared connection",
    summary="Every caller goes through get_instance() and receives the same connection.",
    roles=_ROLES,
)
def run_with(config: DemoConfig) -> None:
    narrate("=== WITH SINGLETON ===")
    narrate("")
    DBConnection.reset_instance()

    db1 = DBConnection.get_instance(config.database)
    db2 = DBConnection.get_instance(config.database)

    narrate("")
    narrate(f">> Total connections: {DBConnection.connection_count()}")
    narrate(f">> db1 is db2 ? {db1 is db2}")
