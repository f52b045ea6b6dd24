"""Tests that the Alembic migrations match the ORM models."""

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from examelement import models  # noqa: F401
from examelement.database import Base

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _alembic_config(database_url: str) -> Config:
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", database_url)
    return config


def test_upgrade_creates_model_tables(tmp_path: Path) -> None:
    """Test every model table and column exists after upgrading to head."""
    database_url = f"sqlite:///{tmp_path / 'migrated.db'}"
    command.upgrade(_alembic_config(database_url), "head")

    engine = create_engine(database_url)
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names())
        for table in Base.metadata.sorted_tables:
            assert table.name in tables
            migrated = {column["name"] for column in inspector.get_columns(table.name)}
            assert migrated == {column.name for column in table.columns}, table.name
    finally:
        engine.dispose()


def test_downgrade_removes_tables(tmp_path: Path) -> None:
    """Test downgrading to base leaves only the version table."""
    database_url = f"sqlite:///{tmp_path / 'migrated.db'}"
    config = _alembic_config(database_url)
    command.upgrade(config, "head")
    command.downgrade(config, "base")

    engine = create_engine(database_url)
    try:
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()


def test_downgrade_to_initial_schema(tmp_path: Path) -> None:
    """Test stepping back to 001 drops flashcard reviews and soft deletion."""
    database_url = f"sqlite:///{tmp_path / 'migrated.db'}"
    config = _alembic_config(database_url)
    command.upgrade(config, "head")
    command.downgrade(config, "001")

    engine = create_engine(database_url)
    try:
        inspector = inspect(engine)
        assert "flashcard_reviews" not in inspector.get_table_names()
        columns = {column["name"] for column in inspector.get_columns("content_items")}
        assert "deleted_at" not in columns
        assert "submitted_at" in columns
    finally:
        engine.dispose()
