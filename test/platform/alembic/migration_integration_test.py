"""
Alembic migration tests against a file-backed SQLite database

The migration chain is upgraded to head and the resulting schema is compared
with the ORM metadata, so the two cannot drift apart unnoticed.
"""

from pathlib import Path

from alembic import command
from alembic.config import Config
import pytest
from sqlalchemy import create_engine, inspect

from src.platform.constant.path import ALEMBIC_DIR
from src.platform.database.orm_db_setting import Base
from src.service.lodging.driven_adapter.model.booking_model import BOOKING_USER_UNIQUE_CONSTRAINT


pytestmark = pytest.mark.integration


def _alembic_config(db_path: Path) -> Config:
    # No ini file: keep the logging setup of the test session untouched
    cfg = Config()
    cfg.set_main_option('script_location', str(ALEMBIC_DIR))
    cfg.set_main_option('sqlalchemy.url', f'sqlite+aiosqlite:///{db_path}')
    return cfg


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / 'migrated.db'


class TestInitialMigration:
    def test_upgrade_matches_orm_metadata(self, db_path: Path):
        # Given
        command.upgrade(_alembic_config(db_path), 'head')

        # When
        engine = create_engine(f'sqlite:///{db_path}')
        try:
            inspector = inspect(engine)
            table_names = set(inspector.get_table_names()) - {'alembic_version'}

            # Then
            assert table_names == set(Base.metadata.tables)
            for table in Base.metadata.tables.values():
                reflected = {c['name']: c for c in inspector.get_columns(table.name)}
                assert set(reflected) == set(table.columns.keys()), table.name
                for column in table.columns:
                    assert reflected[column.name]['nullable'] == column.nullable, (
                        f'{table.name}.{column.name}'
                    )

                model_indexes = {index.name for index in table.indexes}
                migrated_indexes = {index['name'] for index in inspector.get_indexes(table.name)}
                assert model_indexes <= migrated_indexes, table.name

            booking_uniques = {
                uc['name'] for uc in inspector.get_unique_constraints('booking')
            }
            assert BOOKING_USER_UNIQUE_CONSTRAINT in booking_uniques
        finally:
            engine.dispose()

    def test_downgrade_drops_every_table(self, db_path: Path):
        cfg = _alembic_config(db_path)
        command.upgrade(cfg, 'head')

        command.downgrade(cfg, 'base')

        engine = create_engine(f'sqlite:///{db_path}')
        try:
            assert set(inspect(engine).get_table_names()) <= {'alembic_version'}
        finally:
            engine.dispose()
