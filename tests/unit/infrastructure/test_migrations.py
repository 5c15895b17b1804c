"""Tests for the initial schema migration against an in-memory SQLite database."""

import importlib.util
from collections.abc import Callable, Iterator
from pathlib import Path
from types import ModuleType

import pytest
from sqlalchemy import Connection, create_engine, inspect

import bizhub.models  # noqa: F401
from alembic.migration import MigrationContext
from alembic.operations import Operations
from bizhub.database import Base

INITIAL_MIGRATION = (
    Path(__file__).resolve().parents[3] / "alembic" / "versions" / "001_initial_schema.py"
)


def load_migration() -> ModuleType:
    spec = importlib.util.spec_from_file_location("initial_schema", INITIAL_MIGRATION)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def run_step(connection: Connection, step: Callable[[], None]) -> None:
    with Operations.context(MigrationContext.configure(connection)):
        step()


@pytest.fixture
def connection() -> Iterator[Connection]:
    engine = create_engine("sqlite://")
    with engine.connect() as connection:
        yield connection
    engine.dispose()


class TestInitialMigration:
    def test_upgrade_creates_every_mapped_table(self, connection: Connection) -> None:
        run_step(connection, load_migration().upgrade)

        assert set(inspect(connection).get_table_names()) == set(Base.metadata.tables)

    def test_columns_and_nullability_match_the_models(self, connection: Connection) -> None:
        run_step(connection, load_migration().upgrade)
        inspector = inspect(connection)

        for name, table in Base.metadata.tables.items():
            reflected = inspector.get_columns(name)
            migrated = {column["name"]: column["nullable"] for column in reflected}
            mapped = {column.name: column.nullable for column in table.columns}
            assert migrated == mapped, name

    def test_every_table_carries_the_soft_delete_flag(self, connection: Connection) -> None:
        run_step(connection, load_migration().upgrade)
        inspector = inspect(connection)

        for name in inspector.get_table_names():
            columns = {column["name"] for column in inspector.get_columns(name)}
            assert "is_deleted" in columns, name

    def test_downgrade_drops_every_table(self, connection: Connection) -> None:
        migration = load_migration()
        run_step(connection, migration.upgrade)

        run_step(connection, migration.downgrade)

        assert inspect(connection).get_table_names() == []

    def test_table_order_lists_each_mapped_table_once(self) -> None:
        tables = load_migration().TABLES

        assert len(tables) == len(set(tables))
        assert set(tables) == set(Base.metadata.tables)
