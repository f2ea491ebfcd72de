"""SQLAlchemy persistence for userbase.

Provides:
- Base / UserModel: declarative models
- UserRepositorySQLAlchemy: repository implementation for users
- create_engine: async engine factory (with SQLite savepoint support)
- create_tables / drop_tables / init_database: schema management
"""

from userbase.infrastructure.persistence.sqlalchemy.engine import create_engine
from userbase.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
    init_database,
)
from userbase.infrastructure.persistence.sqlalchemy.models import Base, UserModel
from userbase.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "UserModel",
    "UserRepositorySQLAlchemy",
    "create_engine",
    "create_tables",
    "drop_tables",
    "init_database",
]
