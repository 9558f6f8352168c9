"""dbplatform Mapping - Logical to platform type registry.

Maps every DbType to the DbPlatformType used for DDL generation on a given
database platform. The registry starts from generic defaults which platforms
override with their own syntax.

Two modes of initialization exist:
- physical (default): JSON family and UUID types are bound to placeholders
  resolved at lookup time against CLOB, BLOB or VARCHAR
- logical: JSON family and UUID stay genuine logical types, for two layer
  DDL generation that translates them later

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Dict

from dbplatform.config import DbUuid
from dbplatform.types import DbPlatformType, DbType, DbTypeLookup, PlaceholderKind

logger = logging.getLogger(__name__)

UUID_NATIVE = DbPlatformType.fixed("uuid")
UUID_PLACEHOLDER = DbPlatformType.placeholder_for(PlaceholderKind.UUID)
JSON_CLOB_PLACEHOLDER = DbPlatformType.placeholder_for(PlaceholderKind.JSON_CLOB)
JSON_BLOB_PLACEHOLDER = DbPlatformType.placeholder_for(PlaceholderKind.JSON_BLOB)
JSON_VARCHAR_PLACEHOLDER = DbPlatformType.placeholder_for(PlaceholderKind.JSON_VARCHAR)


class DbPlatformTypeMapping:
    """Registry of platform types used for DDL generation.

    Every DbType is bound after construction. Bindings are replaced via
    put() during platform setup and treated as read-only afterwards.
    """

    def __init__(self, logical: bool = False):
        self.logical = logical
        self._types: Dict[DbType, DbPlatformType] = {}
        self._load_defaults(logical)

    @classmethod
    def logical_types(cls) -> "DbPlatformTypeMapping":
        """Registry keeping JSON family and UUID as logical types."""
        return cls(logical=True)

    def _load_defaults(self, logical: bool) -> None:
        for db_type in (
            DbType.BOOLEAN, DbType.BIT, DbType.INTEGER, DbType.BIGINT,
            DbType.DOUBLE, DbType.SMALLINT, DbType.TINYINT,
            DbType.BLOB, DbType.CLOB, DbType.ARRAY,
            DbType.LONGVARBINARY, DbType.LONGVARCHAR,
            DbType.DATE, DbType.TIME, DbType.TIMESTAMP,
        ):
            self._types[db_type] = db_type.create_platform_type()

        self._types[DbType.REAL] = DbPlatformType("float")
        self._types[DbType.DECIMAL] = DbPlatformType("decimal", 38)
        self._types[DbType.VARCHAR] = DbPlatformType("varchar", 255)
        self._types[DbType.CHAR] = DbPlatformType("char", 1)
        self._types[DbType.VARBINARY] = DbPlatformType("varbinary", 255)
        self._types[DbType.BINARY] = DbPlatformType("binary", 255)
        self._types[DbType.HSTORE] = DbPlatformType.fixed("hstore")

        if logical:
            self._types[DbType.JSON] = DbPlatformType.fixed("json")
            self._types[DbType.JSONB] = DbPlatformType.fixed("jsonb")
            self._types[DbType.JSONCLOB] = DbPlatformType("jsonclob")
            self._types[DbType.JSONBLOB] = DbPlatformType("jsonblob")
            self._types[DbType.JSONVARCHAR] = DbPlatformType("jsonvarchar", 1000)
            self._types[DbType.UUID] = UUID_NATIVE
        else:
            # platforms with a native JSON type (Postgres) override these
            self._types[DbType.JSON] = JSON_CLOB_PLACEHOLDER
            self._types[DbType.JSONB] = JSON_CLOB_PLACEHOLDER
            self._types[DbType.JSONCLOB] = JSON_CLOB_PLACEHOLDER
            self._types[DbType.JSONBLOB] = JSON_BLOB_PLACEHOLDER
            self._types[DbType.JSONVARCHAR] = JSON_VARCHAR_PLACEHOLDER
            self._types[DbType.UUID] = UUID_PLACEHOLDER

    def put(self, db_type: DbType, platform_type: DbPlatformType) -> None:
        """Override the platform type bound to a logical type."""
        previous = self._types.get(db_type)
        self._types[db_type] = platform_type
        logger.debug(f"Mapped {db_type.name} to {platform_type.name} (was {previous.name if previous else None})")

    def get(self, db_type: DbType) -> DbPlatformType:
        """Return the platform type bound to a logical type."""
        return self._types[db_type]

    def get_by_code(self, code: int) -> DbPlatformType:
        """Return the bound platform type for a numeric type code.

        Unlike lookup() this returns the literal binding, placeholders
        included.
        """
        db_type = DbTypeLookup.by_code(code)
        if db_type is None:
            raise ValueError(f"Unknown type code [{code}]")
        return self.get(db_type)

    def lookup(self, name: str, with_scale: bool = False) -> DbPlatformType:
        """Resolve a standard sql type name to its platform type.

        Args:
            name: Standard type name, case-insensitive
            with_scale: Whether the column declares a length/scale, which
                sends placeholder JSON types to VARCHAR instead of CLOB

        Returns:
            Concrete platform type

        Raises:
            ValueError: If the name is not a standard sql type
        """
        db_type = DbTypeLookup.by_name(name)
        if db_type is None:
            raise ValueError(f"Unknown type [{(name or '').strip().upper()}] - not standard sql type")

        if db_type == DbType.JSONBLOB:
            return self.get(DbType.BLOB)
        if db_type == DbType.JSONCLOB:
            return self.get(DbType.CLOB)
        if db_type == DbType.JSONVARCHAR:
            return self.get(DbType.VARCHAR)
        if db_type in (DbType.JSON, DbType.JSONB):
            return self._json_type(db_type, with_scale)
        return self.get(db_type)

    def _json_type(self, db_type: DbType, with_scale: bool) -> DbPlatformType:
        bound = self.get(db_type)
        if bound.placeholder == PlaceholderKind.JSON_CLOB:
            # a declared length means the json is stored as text
            return self.get(DbType.VARCHAR) if with_scale else self.get(DbType.CLOB)
        if bound.placeholder == PlaceholderKind.JSON_BLOB:
            return self.get(DbType.BLOB)
        if bound.placeholder == PlaceholderKind.JSON_VARCHAR:
            return self.get(DbType.VARCHAR)
        return bound

    def configure_uuid(self, native_supported: bool, strategy: DbUuid) -> DbPlatformType:
        """Bind UUID according to native support and the storage strategy."""
        if native_supported and strategy.use_native_type:
            uuid_type = UUID_NATIVE
        elif strategy.use_binary:
            uuid_type = self.get(DbType.BINARY).with_length(16)
        else:
            uuid_type = self.get(DbType.VARCHAR).with_length(40)

        self.put(DbType.UUID, uuid_type)
        logger.debug(f"UUID stored as {uuid_type} (native={native_supported}, strategy={strategy.value})")
        return uuid_type

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        mode = "logical" if self.logical else "physical"
        return f"DbPlatformTypeMapping({mode}, {len(self._types)} types)"


__all__ = [
    "DbPlatformTypeMapping",
    "UUID_NATIVE",
    "UUID_PLACEHOLDER",
    "JSON_CLOB_PLACEHOLDER",
    "JSON_BLOB_PLACEHOLDER",
    "JSON_VARCHAR_PLACEHOLDER",
]
