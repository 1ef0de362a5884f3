"""Entity crate: regenerate SeaORM entities (sea-orm-cli), run migrations."""

from las_tooling.entity.migrate import MIGRATION_ACTIONS, call_migration
from las_tooling.entity.migrate import run as run_migrate
from las_tooling.entity.regenerate import (
    call_sea_orm_generate,
    remove_generated_files,
)
from las_tooling.entity.regenerate import run as run_regenerate

__all__ = [
    "MIGRATION_ACTIONS",
    "call_migration",
    "call_sea_orm_generate",
    "remove_generated_files",
    "run_migrate",
    "run_regenerate",
]
