"""Shared fixtures."""
import pytest

from naive import singleton as naive_singleton
from patterns.singleton import DBConnection


@pytest.fixture(autouse=True)
def reset_connections():
    DBConnection.reset_instance()
    naive_singleton.DBConnection.reset_count()
    yield
    DBConnection.reset_instance()
    naive_singleton.DBConnection.reset_count()
