"""dbplatform Config - Platform configuration loading.

Configuration decides which database platform the type registry is built for,
how UUID columns are stored and which logical types get a custom DDL type.
It can be loaded from a YAML file or from environment variables:

    platform: postgres
    db_uuid: auto_binary
    custom_types:
      VARCHAR: varchar(512)
      CLOB: text

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


class DbUuid(Enum):
    """UUID storage strategy."""

    AUTO = "auto"
    AUTO_BINARY = "auto_binary"
    NATIVE = "native"
    BINARY = "binary"
    VARCHAR = "varchar"

    @property
    def use_native_type(self) -> bool:
        """Use the native UUID column type where the platform has one."""
        return self in (DbUuid.AUTO, DbUuid.AUTO_BINARY, DbUuid.NATIVE)

    @property
    def use_binary(self) -> bool:
        """Store as binary(16) when native storage is not used."""
        return self in (DbUuid.AUTO_BINARY, DbUuid.BINARY)

    @classmethod
    def parse(cls, value: Any) -> "DbUuid":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown UUID strategy [{value}] - expected one of {choices}") from None


def _parse_custom_types(raw: str) -> Dict[str, str]:
    """Parse ``VARCHAR=nvarchar(255);CLOB=text`` into a mapping."""
    types: Dict[str, str] = {}
    for entry in raw.split(";"):
        if not entry.strip():
            continue
        name, sep, ddl = entry.partition("=")
        if not sep or not name.strip() or not ddl.strip():
            raise ValueError(f"Invalid custom type entry [{entry.strip()}] - expected NAME=ddl")
        types[name.strip()] = ddl.strip()
    return types


@dataclass
class PlatformConfig:
    """Configuration for building a platform type registry."""
    platform: str = "generic"
    db_uuid: DbUuid = DbUuid.AUTO
    custom_types: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.platform = str(self.platform if self.platform is not None else "generic")
        self.db_uuid = DbUuid.parse(self.db_uuid)
        custom_types = self.custom_types or {}
        if not isinstance(custom_types, dict):
            raise ValueError("custom_types must be a mapping of type name to DDL type")
        self.custom_types = {str(k): str(v) for k, v in custom_types.items()}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PlatformConfig":
        data = data or {}
        if not isinstance(data, dict):
            raise ValueError("Platform configuration must be a mapping at the top level")
        return cls(
            platform=data.get("platform", "generic"),
            db_uuid=data.get("db_uuid", DbUuid.AUTO),
            custom_types=data.get("custom_types") or {},
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "PlatformConfig":
        """Load configuration from YAML file."""
        with Path(path).open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        logger.debug(f"Loaded platform configuration from {path}")
        return cls.from_dict(data)

    @classmethod
    def from_env(cls) -> "PlatformConfig":
        """Load configuration from environment variables."""
        return cls(
            platform=os.getenv("DBPLATFORM_PLATFORM", "generic"),
            db_uuid=os.getenv("DBPLATFORM_UUID", "auto"),
            custom_types=_parse_custom_types(os.getenv("DBPLATFORM_TYPES", "")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "platform": self.platform,
            "db_uuid": self.db_uuid.value,
            "custom_types": dict(self.custom_types),
        }


__all__ = ["DbUuid", "PlatformConfig"]
