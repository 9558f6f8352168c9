"""Tests for the dbplatform command line interface."""

from __future__ import annotations

import json

import pytest
from dbplatform.cli import create_parser, main
from dbplatform.types import DbType


def _json_output(capsys: pytest.CaptureFixture) -> dict:
    return json.loads(capsys.readouterr().out.strip().splitlines()[-1])


class TestTypesCommand:
    def test_lists_every_type(self, capsys):
        assert main(["--json", "--platform", "postgres", "types"]) == 0
        output = _json_output(capsys)
        assert output["headers"] == ["Type", "Code", "Bound", "DDL"]
        assert len(output["rows"]) == len(DbType)
        rows = {row[0]: row for row in output["rows"]}
        assert rows["JSON"][3] == "json"
        assert rows["UUID"][3] == "uuid"

    def test_table_output(self, capsys):
        assert main(["--platform", "generic", "types"]) == 0
        out = capsys.readouterr().out
        assert "generic types" in out
        assert "varchar(255)" in out


class TestResolveCommand:
    def test_resolve_json_with_length(self, capsys):
        assert main(["--json", "resolve", "json", "--length", "1000"]) == 0
        data = _json_output(capsys)["data"]
        assert data["type"] == "JSON"
        assert data["ddl"] == "varchar(1000)"

    def test_resolve_uuid_binary(self, capsys):
        assert main(["--json", "--uuid", "binary", "resolve", "UUID"]) == 0
        assert _json_output(capsys)["data"]["ddl"] == "binary(16)"

    def test_resolve_decimal_scale(self, capsys):
        assert main(["--json", "resolve", "decimal", "--length", "16", "--precision-scale", "3"]) == 0
        assert _json_output(capsys)["data"]["ddl"] == "decimal(16,3)"

    def test_unknown_type(self, capsys):
        assert main(["resolve", "unknowntype"]) == 1
        assert "not standard sql type" in capsys.readouterr().err

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "platform.yaml"
        path.write_text("platform: mysql\ncustom_types:\n  VARCHAR: varchar(64)\n", encoding="utf-8")
        assert main(["--json", "--config", str(path), "resolve", "varchar"]) == 0
        data = _json_output(capsys)["data"]
        assert data["platform"] == "mysql"
        assert data["ddl"] == "varchar(64)"

    def test_missing_config_file(self, tmp_path):
        assert main(["--config", str(tmp_path / "missing.yaml"), "types"]) == 1


class TestParser:
    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_rejects_unknown_platform(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--platform", "db2", "types"])


class TestConfigErrors:
    def test_custom_types_list(self, tmp_path, capsys):
        path = tmp_path / "platform.yaml"
        path.write_text("custom_types:\n  - VARCHAR\n", encoding="utf-8")
        assert main(["--config", str(path), "types"]) == 1
        assert "custom_types must be a mapping" in capsys.readouterr().err

    def test_numeric_platform(self, tmp_path, capsys):
        path = tmp_path / "platform.yaml"
        path.write_text("platform: 5\n", encoding="utf-8")
        assert main(["--config", str(path), "types"]) == 1
        assert "Unknown platform [5]" in capsys.readouterr().err
