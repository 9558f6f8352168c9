"""dbplatform Types - Logical column types and platform type descriptors.

Provides the building blocks of the platform type registry:
- DbType: closed set of logical (platform independent) column types
- PlaceholderKind: markers for bindings resolved later against CLOB/BLOB/VARCHAR
- DbPlatformType: immutable DDL type descriptor (name + length/scale rules)
- DbTypeLookup: bidirectional name/code lookup over DbType

Each logical type carries a stable numeric code. Standard SQL types use the
JDBC type codes, extension types (JSON family, UUID, HSTORE) use codes from
the 5000 range.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional


# =============================================================================
# Logical Types
# =============================================================================


class DbType(Enum):
    """Logical database types keyed by their numeric type code."""

    BIT = -7
    TINYINT = -6
    SMALLINT = 5
    INTEGER = 4
    BIGINT = -5
    REAL = 7
    DOUBLE = 8
    DECIMAL = 3
    CHAR = 1
    VARCHAR = 12
    LONGVARCHAR = -1
    BINARY = -2
    VARBINARY = -3
    LONGVARBINARY = -4
    DATE = 91
    TIME = 92
    TIMESTAMP = 93
    BOOLEAN = 16
    ARRAY = 2003
    BLOB = 2004
    CLOB = 2005

    # Extension types
    HSTORE = 5000
    JSON = 5001
    JSONB = 5002
    JSONCLOB = 5003
    JSONBLOB = 5004
    JSONVARCHAR = 5005
    UUID = 5010

    @property
    def code(self) -> int:
        return self.value

    def create_platform_type(self) -> "DbPlatformType":
        """Generic descriptor named after the type."""
        return DbPlatformType(self.name.lower())


class PlaceholderKind(Enum):
    """What a placeholder binding stands for until resolution."""

    UUID = "uuid"
    JSON_CLOB = "json_clob"
    JSON_BLOB = "json_blob"
    JSON_VARCHAR = "json_varchar"


# =============================================================================
# Platform Type
# =============================================================================


_DDL_PATTERN = re.compile(r"^\s*([A-Za-z][\w ]*?)\s*(?:\(\s*(\d+|max)\s*(?:,\s*(\d+)\s*)?\))?\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class DbPlatformType:
    """Platform specific DDL type.

    Attributes:
        name: Type name as emitted in DDL (e.g. "varchar")
        default_length: Length (or precision) used when none is deployed
        default_scale: Scale used when none is deployed
        can_have_length: Whether a length/scale suffix may be rendered
        placeholder: Set only for sentinel bindings, never emitted as DDL
    """

    name: str
    default_length: int = 0
    default_scale: int = 0
    can_have_length: bool = True
    placeholder: Optional[PlaceholderKind] = None

    @classmethod
    def fixed(cls, name: str) -> "DbPlatformType":
        """Type that never renders a length, e.g. "uuid" or "json"."""
        return cls(name, can_have_length=False)

    @classmethod
    def placeholder_for(cls, kind: PlaceholderKind) -> "DbPlatformType":
        return cls(f"{kind.value}Placeholder", can_have_length=False, placeholder=kind)

    @classmethod
    def parse(cls, ddl: str) -> "DbPlatformType":
        """Parse a DDL type string such as ``decimal(16,3)``.

        Args:
            ddl: Type name with optional ``(length[,scale])`` suffix, where
                length may also be ``max`` (e.g. ``nvarchar(max)``)

        Returns:
            Descriptor with the parsed defaults

        Raises:
            ValueError: If the string is not a valid type declaration
        """
        match = _DDL_PATTERN.match(ddl or "")
        if not match:
            raise ValueError(f"Invalid type declaration [{ddl}]")
        name, length, scale = match.groups()
        name = name.lower()
        if length and length.lower() == "max":
            if scale:
                raise ValueError(f"Invalid type declaration [{ddl}] - max length takes no scale")
            return cls.fixed(f"{name}(max)")
        return cls(name, int(length or 0), int(scale or 0))

    @property
    def is_placeholder(self) -> bool:
        return self.placeholder is not None

    @property
    def supports_scale(self) -> bool:
        return self.can_have_length

    def with_length(self, length: int) -> "DbPlatformType":
        """Return a copy using the given default length."""
        return replace(self, default_length=length)

    def render_type(self, length: int = 0, scale: int = 0, strict: bool = True) -> str:
        """Render the DDL column type.

        A length or scale of 0 falls back to the defaults. With ``strict``
        disabled the suffix is rendered even for types that cannot carry one.
        """
        if self.is_placeholder:
            raise ValueError(f"Placeholder type [{self.name}] cannot be rendered")

        sql = self.name
        if not self.can_have_length and strict:
            return sql

        length = length or self.default_length
        if length > 0:
            scale = scale or self.default_scale
            if scale > 0:
                sql += f"({length},{scale})"
            else:
                sql += f"({length})"
        return sql

    def __str__(self) -> str:
        if self.is_placeholder:
            return self.name
        return self.render_type()


# =============================================================================
# Lookup
# =============================================================================


class DbTypeLookup:
    """Bidirectional lookup of DbType by name and by numeric code."""

    _aliases: Dict[str, DbType] = {
        "INT": DbType.INTEGER,
        "NUMERIC": DbType.DECIMAL,
        "FLOAT": DbType.REAL,
        "DOUBLE PRECISION": DbType.DOUBLE,
        "TEXT": DbType.LONGVARCHAR,
    }

    _by_name: Dict[str, DbType] = {**{t.name: t for t in DbType}, **_aliases}
    _by_code: Dict[int, DbType] = {t.code: t for t in DbType}

    @classmethod
    def by_name(cls, name: str) -> Optional[DbType]:
        """Find a type by standard name, ignoring case and surrounding whitespace."""
        if name is None:
            return None
        return cls._by_name.get(" ".join(name.split()).upper())

    @classmethod
    def by_code(cls, code: int) -> Optional[DbType]:
        return cls._by_code.get(code)


__all__ = [
    "DbType",
    "PlaceholderKind",
    "DbPlatformType",
    "DbTypeLookup",
]
