"""dbplatform Platforms - Database platforms owning a type registry.

Each platform builds its own DbPlatformTypeMapping, replaces the generic
defaults with its DDL syntax and then applies the user configuration (UUID
strategy and custom type overrides).

Usage:
    from dbplatform import PlatformConfig, create_platform

    platform = create_platform(PlatformConfig(platform="postgres"))
    platform.type_mapping.lookup("JSON", False).render_type()   # "json"

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Type

from dbplatform.config import PlatformConfig
from dbplatform.mapping import DbPlatformTypeMapping
from dbplatform.types import DbPlatformType, DbType, DbTypeLookup

logger = logging.getLogger(__name__)


class DatabasePlatform:
    """Generic database platform.

    Subclasses override _configure_types() to bind platform specific types.
    """

    name = "generic"
    native_uuid_type = False

    def __init__(self, logical: bool = False):
        self.type_mapping = DbPlatformTypeMapping(logical=logical)
        self._configure_types(self.type_mapping)

    def _configure_types(self, mapping: DbPlatformTypeMapping) -> None:
        pass

    def configure(self, config: Optional[PlatformConfig] = None) -> "DatabasePlatform":
        """Apply custom type overrides and the UUID strategy from configuration.

        UUID storage is derived from the VARCHAR/BINARY bindings after the
        custom overrides, unless UUID itself is overridden.
        """
        config = config or PlatformConfig(platform=self.name)

        overridden = set()
        for type_name, ddl in config.custom_types.items():
            db_type = DbTypeLookup.by_name(type_name)
            if db_type is None:
                raise ValueError(f"Unknown type [{type_name}] in custom type mapping")
            self.type_mapping.put(db_type, DbPlatformType.parse(ddl))
            overridden.add(db_type)

        if DbType.UUID in overridden:
            uuid_type = self.type_mapping.get(DbType.UUID)
        else:
            uuid_type = self.type_mapping.configure_uuid(self.native_uuid_type, config.db_uuid)

        logger.info(
            f"Configured {self.name} platform: uuid={uuid_type}, "
            f"{len(config.custom_types)} custom type(s)"
        )
        return self

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"


class PostgresPlatform(DatabasePlatform):
    """PostgreSQL with native json, jsonb, hstore and uuid types."""

    name = "postgres"
    native_uuid_type = True

    def _configure_types(self, mapping: DbPlatformTypeMapping) -> None:
        mapping.put(DbType.JSON, DbPlatformType.fixed("json"))
        mapping.put(DbType.JSONB, DbPlatformType.fixed("jsonb"))
        mapping.put(DbType.INTEGER, DbPlatformType.fixed("integer"))
        mapping.put(DbType.BIGINT, DbPlatformType.fixed("bigint"))
        mapping.put(DbType.DOUBLE, DbPlatformType.fixed("float"))
        mapping.put(DbType.TINYINT, DbPlatformType.fixed("smallint"))
        mapping.put(DbType.DECIMAL, DbPlatformType("decimal", 38))
        mapping.put(DbType.TIMESTAMP, DbPlatformType.fixed("timestamptz"))

        mapping.put(DbType.BINARY, DbPlatformType.fixed("bytea"))
        mapping.put(DbType.VARBINARY, DbPlatformType.fixed("bytea"))
        mapping.put(DbType.BLOB, DbPlatformType.fixed("bytea"))
        mapping.put(DbType.LONGVARBINARY, DbPlatformType.fixed("bytea"))
        mapping.put(DbType.CLOB, DbPlatformType.fixed("text"))
        mapping.put(DbType.LONGVARCHAR, DbPlatformType.fixed("text"))


class MySqlPlatform(DatabasePlatform):
    """MySQL with native json and no uuid type."""

    name = "mysql"

    def _configure_types(self, mapping: DbPlatformTypeMapping) -> None:
        mapping.put(DbType.JSON, DbPlatformType.fixed("json"))
        mapping.put(DbType.JSONB, DbPlatformType.fixed("json"))
        mapping.put(DbType.BIT, DbPlatformType.fixed("tinyint(1)"))
        mapping.put(DbType.BOOLEAN, DbPlatformType.fixed("tinyint(1)"))
        mapping.put(DbType.TIMESTAMP, DbPlatformType("datetime", 6))
        mapping.put(DbType.CLOB, DbPlatformType.fixed("longtext"))
        mapping.put(DbType.BLOB, DbPlatformType.fixed("longblob"))
        mapping.put(DbType.LONGVARCHAR, DbPlatformType.fixed("longtext"))
        mapping.put(DbType.LONGVARBINARY, DbPlatformType.fixed("longblob"))


class H2Platform(DatabasePlatform):
    """H2 with native uuid and json types."""

    name = "h2"
    native_uuid_type = True

    def _configure_types(self, mapping: DbPlatformTypeMapping) -> None:
        mapping.put(DbType.JSON, DbPlatformType.fixed("json"))
        mapping.put(DbType.JSONB, DbPlatformType.fixed("json"))


class SqlServerPlatform(DatabasePlatform):
    """Microsoft SQL Server using unicode character types."""

    name = "sqlserver"

    def _configure_types(self, mapping: DbPlatformTypeMapping) -> None:
        mapping.put(DbType.BOOLEAN, DbPlatformType.fixed("bit"))
        mapping.put(DbType.BIT, DbPlatformType.fixed("bit"))
        mapping.put(DbType.REAL, DbPlatformType.fixed("float(16)"))
        mapping.put(DbType.DOUBLE, DbPlatformType.fixed("float(32)"))
        mapping.put(DbType.TIMESTAMP, DbPlatformType.fixed("datetime2"))
        mapping.put(DbType.CHAR, DbPlatformType("nchar", 1))
        mapping.put(DbType.VARCHAR, DbPlatformType("nvarchar", 255))
        mapping.put(DbType.CLOB, DbPlatformType.fixed("nvarchar(max)"))
        mapping.put(DbType.LONGVARCHAR, DbPlatformType.fixed("nvarchar(max)"))
        mapping.put(DbType.BLOB, DbPlatformType.fixed("varbinary(max)"))
        mapping.put(DbType.LONGVARBINARY, DbPlatformType.fixed("varbinary(max)"))


class OraclePlatform(DatabasePlatform):
    """Oracle using number and varchar2 types."""

    name = "oracle"

    def _configure_types(self, mapping: DbPlatformTypeMapping) -> None:
        mapping.put(DbType.BOOLEAN, DbPlatformType.fixed("number(1)"))
        mapping.put(DbType.BIT, DbPlatformType.fixed("number(1)"))
        mapping.put(DbType.INTEGER, DbPlatformType.fixed("number(10)"))
        mapping.put(DbType.BIGINT, DbPlatformType.fixed("number(19)"))
        mapping.put(DbType.SMALLINT, DbPlatformType.fixed("number(5)"))
        mapping.put(DbType.TINYINT, DbPlatformType.fixed("number(3)"))
        mapping.put(DbType.DOUBLE, DbPlatformType.fixed("number(19,4)"))
        mapping.put(DbType.DECIMAL, DbPlatformType("number", 38))
        mapping.put(DbType.VARCHAR, DbPlatformType("varchar2", 255))
        mapping.put(DbType.LONGVARCHAR, DbPlatformType.fixed("clob"))
        mapping.put(DbType.LONGVARBINARY, DbPlatformType.fixed("blob"))
        mapping.put(DbType.BINARY, DbPlatformType("raw", 255))
        mapping.put(DbType.VARBINARY, DbPlatformType("raw", 255))
        mapping.put(DbType.TIME, DbPlatformType.fixed("timestamp"))


class SQLitePlatform(DatabasePlatform):
    """SQLite storage classes."""

    name = "sqlite"

    def _configure_types(self, mapping: DbPlatformTypeMapping) -> None:
        for db_type in (DbType.BOOLEAN, DbType.BIT, DbType.TINYINT, DbType.SMALLINT,
                        DbType.INTEGER, DbType.BIGINT):
            mapping.put(db_type, DbPlatformType.fixed("integer"))
        mapping.put(DbType.REAL, DbPlatformType.fixed("real"))
        mapping.put(DbType.DOUBLE, DbPlatformType.fixed("real"))
        mapping.put(DbType.CLOB, DbPlatformType.fixed("text"))
        mapping.put(DbType.LONGVARCHAR, DbPlatformType.fixed("text"))
        mapping.put(DbType.LONGVARBINARY, DbPlatformType.fixed("blob"))


# =============================================================================
# Platform Registry
# =============================================================================


PLATFORMS: Dict[str, Type[DatabasePlatform]] = {
    "generic": DatabasePlatform,
    "postgres": PostgresPlatform,
    "postgresql": PostgresPlatform,
    "pg": PostgresPlatform,
    "mysql": MySqlPlatform,
    "h2": H2Platform,
    "sqlserver": SqlServerPlatform,
    "mssql": SqlServerPlatform,
    "oracle": OraclePlatform,
    "sqlite": SQLitePlatform,
}


def get_platform(name: str, logical: bool = False) -> DatabasePlatform:
    """Create an unconfigured platform by name."""
    platform_class = PLATFORMS.get((name or "").strip().lower())
    if platform_class is None:
        choices = ", ".join(sorted(set(p.name for p in PLATFORMS.values())))
        raise ValueError(f"Unknown platform [{name}] - expected one of {choices}")
    return platform_class(logical=logical)


def create_platform(config: PlatformConfig) -> DatabasePlatform:
    """Create the platform named in the configuration and configure it."""
    return get_platform(config.platform).configure(config)


__all__ = [
    "DatabasePlatform",
    "PostgresPlatform",
    "MySqlPlatform",
    "H2Platform",
    "SqlServerPlatform",
    "OraclePlatform",
    "SQLitePlatform",
    "PLATFORMS",
    "get_platform",
    "create_platform",
]
