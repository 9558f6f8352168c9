"""Unit tests for dbplatform.mapping."""

from __future__ import annotations

import pytest
from dbplatform.config import DbUuid
from dbplatform.mapping import (
    JSON_CLOB_PLACEHOLDER,
    UUID_NATIVE,
    UUID_PLACEHOLDER,
    DbPlatformTypeMapping,
)
from dbplatform.types import DbPlatformType, DbType, PlaceholderKind


@pytest.fixture
def physical() -> DbPlatformTypeMapping:
    return DbPlatformTypeMapping()


@pytest.fixture
def logical() -> DbPlatformTypeMapping:
    return DbPlatformTypeMapping.logical_types()


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_every_type_bound_physical(self, physical):
        for db_type in DbType:
            assert physical.get(db_type) is not None
        assert len(physical) == len(DbType)

    def test_every_type_bound_logical(self, logical):
        for db_type in DbType:
            assert logical.get(db_type) is not None

    def test_generic_defaults(self, physical):
        assert physical.get(DbType.VARCHAR).render_type() == "varchar(255)"
        assert physical.get(DbType.DECIMAL).render_type() == "decimal(38)"
        assert physical.get(DbType.CHAR).render_type() == "char(1)"
        assert physical.get(DbType.REAL).name == "float"
        assert physical.get(DbType.BOOLEAN).name == "boolean"

    def test_physical_placeholders(self, physical):
        assert physical.get(DbType.JSON) == JSON_CLOB_PLACEHOLDER
        assert physical.get(DbType.JSONBLOB).placeholder == PlaceholderKind.JSON_BLOB
        assert physical.get(DbType.JSONVARCHAR).placeholder == PlaceholderKind.JSON_VARCHAR
        assert physical.get(DbType.UUID) == UUID_PLACEHOLDER

    def test_logical_json_types(self, logical):
        assert logical.get(DbType.JSON).render_type() == "json"
        assert logical.get(DbType.JSONVARCHAR).render_type() == "jsonvarchar(1000)"
        assert logical.get(DbType.UUID) == UUID_NATIVE


# ---------------------------------------------------------------------------
# lookup()
# ---------------------------------------------------------------------------


class TestLookup:
    def test_varchar(self, physical):
        assert physical.lookup("VARCHAR", False) == physical.get(DbType.VARCHAR)

    def test_case_and_whitespace(self, physical):
        assert physical.lookup(" varchar ", False) == physical.lookup("VARCHAR", False)

    def test_unknown_name(self, physical):
        with pytest.raises(ValueError, match="UNKNOWNTYPE"):
            physical.lookup("unknowntype", False)

    def test_json_physical_without_scale_is_clob(self, physical):
        assert physical.lookup("JSON", False) == physical.get(DbType.CLOB)
        assert physical.lookup("JSONB", False) == physical.get(DbType.CLOB)

    def test_json_physical_with_scale_is_varchar(self, physical):
        assert physical.lookup("JSON", True) == physical.get(DbType.VARCHAR)
        assert physical.lookup("JSONB", True) == physical.get(DbType.VARCHAR)

    def test_json_logical_is_genuine_json(self, logical):
        resolved = logical.lookup("JSON", False)
        assert resolved.name == "json"
        assert not resolved.is_placeholder
        assert resolved != logical.get(DbType.CLOB)

    def test_json_blob_placeholder(self, physical):
        physical.put(DbType.JSON, DbPlatformType.placeholder_for(PlaceholderKind.JSON_BLOB))
        assert physical.lookup("JSON", False) == physical.get(DbType.BLOB)
        assert physical.lookup("JSON", True) == physical.get(DbType.BLOB)

    def test_json_varchar_placeholder(self, physical):
        physical.put(DbType.JSONB, DbPlatformType.placeholder_for(PlaceholderKind.JSON_VARCHAR))
        assert physical.lookup("JSONB", False) == physical.get(DbType.VARCHAR)

    def test_json_native_override(self, physical):
        physical.put(DbType.JSON, DbPlatformType.fixed("json"))
        assert physical.lookup("json", True).name == "json"

    @pytest.mark.parametrize("with_scale", [True, False])
    def test_json_family_resolves_to_lob_types(self, physical, logical, with_scale):
        for mapping in (physical, logical):
            assert mapping.lookup("JSONVARCHAR", with_scale) == mapping.get(DbType.VARCHAR)
            assert mapping.lookup("JSONCLOB", with_scale) == mapping.get(DbType.CLOB)
            assert mapping.lookup("JSONBLOB", with_scale) == mapping.get(DbType.BLOB)

    def test_alias_lookup(self, physical):
        assert physical.lookup("int", False) == physical.get(DbType.INTEGER)


# ---------------------------------------------------------------------------
# put() / get_by_code()
# ---------------------------------------------------------------------------


class TestOverrides:
    def test_last_write_wins(self, physical):
        physical.put(DbType.VARCHAR, DbPlatformType("nvarchar", 100))
        physical.put(DbType.VARCHAR, DbPlatformType("varchar2", 200))
        assert physical.lookup("VARCHAR", False).render_type() == "varchar2(200)"

    def test_override_visible_through_json_resolution(self, physical):
        physical.put(DbType.CLOB, DbPlatformType("text"))
        assert physical.lookup("JSON", False).name == "text"

    def test_get_by_code(self, physical):
        assert physical.get_by_code(12) == physical.get(DbType.VARCHAR)

    def test_get_by_code_skips_json_resolution(self, physical):
        assert physical.get_by_code(DbType.JSON.code) == JSON_CLOB_PLACEHOLDER

    def test_get_by_code_unknown(self, physical):
        with pytest.raises(ValueError):
            physical.get_by_code(-999)


# ---------------------------------------------------------------------------
# configure_uuid()
# ---------------------------------------------------------------------------


class TestConfigureUuid:
    def test_native(self, physical):
        physical.configure_uuid(True, DbUuid.NATIVE)
        assert physical.get(DbType.UUID) == UUID_NATIVE

    def test_auto_uses_native_when_supported(self, physical):
        physical.configure_uuid(True, DbUuid.AUTO)
        assert physical.get(DbType.UUID).render_type() == "uuid"

    def test_auto_binary_without_native_support(self, physical):
        physical.configure_uuid(False, DbUuid.AUTO_BINARY)
        uuid = physical.get(DbType.UUID)
        assert uuid.name == "binary"
        assert uuid.default_length == 16

    def test_binary_even_when_native_supported(self, physical):
        physical.configure_uuid(True, DbUuid.BINARY)
        assert physical.get(DbType.UUID).render_type() == "binary(16)"

    @pytest.mark.parametrize("native, strategy", [
        (False, DbUuid.AUTO),
        (False, DbUuid.NATIVE),
        (False, DbUuid.VARCHAR),
        (True, DbUuid.VARCHAR),
    ])
    def test_varchar_fallback(self, physical, native, strategy):
        physical.configure_uuid(native, strategy)
        uuid = physical.get(DbType.UUID)
        assert uuid.name == "varchar"
        assert uuid.default_length == 40

    def test_uses_overridden_varchar(self, physical):
        physical.put(DbType.VARCHAR, DbPlatformType("nvarchar", 255))
        physical.configure_uuid(False, DbUuid.VARCHAR)
        assert physical.lookup("UUID", False).render_type() == "nvarchar(40)"

    def test_does_not_change_varchar(self, physical):
        physical.configure_uuid(False, DbUuid.VARCHAR)
        assert physical.get(DbType.VARCHAR).default_length == 255
