"""CLI tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from graphql_client_completion.cli import app
from typer.testing import CliRunner

runner = CliRunner()


def test_cli_displays_help() -> None:
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "suggest" in result.output
    assert "types" in result.output


def test_types_lists_schema_types(tmp_path: Path, schema_file: Path) -> None:
    result = runner.invoke(app, ["types", str(tmp_path)])

    assert result.exit_code == 0
    for name in ("Query", "Mutation", "Character", "CharacterFilter", "Side"):
        assert name in result.output


def test_types_fails_without_schema(tmp_path: Path) -> None:
    result = runner.invoke(app, ["types", str(tmp_path)])

    assert result.exit_code == 1


def test_suggest_api_as_json(tmp_path: Path, schema_file: Path) -> None:
    result = runner.invoke(
        app, ["suggest", str(tmp_path), "--api", "--existing", "hero, heroes", "--output", "json"]
    )

    assert result.exit_code == 0
    assert json.loads(result.stdout) == [
        {
            "text": "@Mutation @NonNull Character createHero(@NonNull String name, List<@NonNull String> tags);",
            "label": "createHero",
            "tail_text": " ",
            "type_text": "GraphQL Mutation",
        }
    ]


def test_suggest_type_as_json(tmp_path: Path, schema_file: Path) -> None:
    result = runner.invoke(
        app, ["suggest", str(tmp_path), "--type", "Character", "--existing", "id", "--output", "json"]
    )

    assert result.exit_code == 0
    assert [s["text"] for s in json.loads(result.stdout)] == [
        "Integer age;",
        "@NonNull List<@NonNull String> tags;",
    ]


def test_suggest_requires_one_container(tmp_path: Path, schema_file: Path) -> None:
    neither = runner.invoke(app, ["suggest", str(tmp_path)])
    both = runner.invoke(app, ["suggest", str(tmp_path), "--api", "--type", "Character"])

    assert neither.exit_code == 1
    assert both.exit_code == 1


def test_workspace_config_is_honoured(tmp_path: Path) -> None:
    (tmp_path / "api.graphqls").write_text("type Query { count: Int }")
    (tmp_path / ".graphql-client.yaml").write_text(
        yaml.dump({"schema_file_name": "api.graphqls", "scalar_mappings": {"Int": "Long"}})
    )

    result = runner.invoke(app, ["suggest", str(tmp_path), "--api", "--output", "json"])

    assert result.exit_code == 0
    assert [s["text"] for s in json.loads(result.stdout)] == ["@Query Long count();"]


def test_config_init_writes_example(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "config.yaml"

    result = runner.invoke(app, ["config", "init", "--path", str(target)])

    assert result.exit_code == 0
    assert yaml.safe_load(target.read_text())["schema_file_name"] == "schema.graphql"


def test_workspace_config_can_turn_off_id_annotation(tmp_path: Path, schema_file: Path) -> None:
    (tmp_path / ".graphql-client.yaml").write_text("scalar_annotations:\n")

    result = runner.invoke(
        app, ["suggest", str(tmp_path), "--type", "Character", "--existing", "age,tags", "--output", "json"]
    )

    assert result.exit_code == 0
    assert [s["text"] for s in json.loads(result.stdout)] == ["@NonNull String id;"]


def test_fields_skips_unsupported_shapes(tmp_path: Path) -> None:
    (tmp_path / "schema.graphql").write_text("type Matrix { rows: [[Float]], name: String }\n")

    result = runner.invoke(app, ["fields", "Matrix", str(tmp_path)])

    assert result.exit_code == 0
    assert "String name;" in result.output
    assert "unsupported type shape [[Float]] in Matrix.rows" in result.output


def test_unknown_log_level_is_reported(tmp_path: Path, schema_file: Path) -> None:
    (tmp_path / ".graphql-client.yaml").write_text("log_level: verbose\n")

    result = runner.invoke(app, ["types", str(tmp_path)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "unknown log level VERBOSE" in result.output


def test_config_init_reports_unwritable_path(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    result = runner.invoke(app, ["config", "init", "--path", str(blocker / "config.yaml")])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error" in result.output
