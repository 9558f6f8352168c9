"""dbplatform - Database platform type mapping for DDL generation.

dbplatform maps logical column types to the DDL types of a concrete
database platform:
- Logical types (BOOLEAN, VARCHAR, JSON, UUID, ...) with stable type codes
- Platform type descriptors rendering "varchar(255)", "uuid", "jsonb"
- Deferred JSON storage resolved against CLOB, BLOB or VARCHAR
- Configurable UUID storage (native, binary(16) or varchar(40))
- Platform specific overrides and user supplied custom types

Architecture:
    ┌─────────────────────────────────────────────────────────────────┐
    │                        PlatformConfig                           │
    ├─────────────────────────────────────────────────────────────────┤
    │  ┌─────────────┐  ┌─────────────────────┐  ┌─────────────┐     │
    │  │  Database   │  │  DbPlatformType     │  │   DbType    │     │
    │  │  Platform   │──│  Mapping (registry) │──│   Lookup    │     │
    │  └─────────────┘  └─────────────────────┘  └─────────────┘     │
    └─────────────────────────────────────────────────────────────────┘

Usage:
    from dbplatform import PlatformConfig, DbUuid, create_platform

    platform = create_platform(PlatformConfig(platform="mysql", db_uuid=DbUuid.BINARY))
    mapping = platform.type_mapping

    mapping.lookup("varchar", False).render_type(100)   # "varchar(100)"
    mapping.lookup("JSON", True).render_type(500)       # "json"
    mapping.get(DbType.UUID).render_type()              # "binary(16)"

CLI:
    $ dbplatform types --platform postgres
    $ dbplatform resolve JSON --platform generic --length 1000

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS, Inc."
__email__ = "engineering@blackroad.io"

from dbplatform.config import DbUuid, PlatformConfig
from dbplatform.mapping import DbPlatformTypeMapping
from dbplatform.platforms import DatabasePlatform, create_platform, get_platform
from dbplatform.types import DbPlatformType, DbType, DbTypeLookup, PlaceholderKind

__all__ = [
    # Version
    "__version__",

    # Types
    "DbType",
    "DbPlatformType",
    "DbTypeLookup",
    "PlaceholderKind",

    # Registry
    "DbPlatformTypeMapping",

    # Configuration
    "DbUuid",
    "PlatformConfig",

    # Platforms
    "DatabasePlatform",
    "get_platform",
    "create_platform",
]
