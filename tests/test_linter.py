import json

import pytest
import yaml

from schema_checker.linter import LintResult, lint_files
from schema_checker.linter.run_lint import find_data_files, main

from fixtures import PRODUCT, USER, USER_SCHEMA


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "user.schema.yaml"
    path.write_text(yaml.safe_dump(USER_SCHEMA, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / "data"
    directory.mkdir()
    return directory


def _write_json(path, data):
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def test_valid_documents(schema_file, data_dir):
    json_doc = _write_json(data_dir / "user.json", USER)
    yaml_doc = data_dir / "user.yaml"
    yaml_doc.write_text(yaml.safe_dump(USER), encoding="utf-8")

    results = lint_files([json_doc, yaml_doc], schema_file)

    assert [r.file_path for r in results] == [schema_file, json_doc, yaml_doc]
    assert all(r.ok for r in results)


def test_violations_carry_locations(schema_file, data_dir):
    user = dict(USER, id="abc")
    del user["enabled"]
    doc = _write_json(data_dir / "user.json", user)

    _, result = lint_files([doc], schema_file)

    assert len(result.errors) == 2
    type_error, missing_error = result.errors
    assert type_error["message"].startswith('Unexpected type of key: "id". Expected: "integer", got: "string"')
    assert type_error["line"] == 2
    assert type_error["yaml_path"] == "/id"
    assert missing_error["message"].startswith('Key "enabled" not found')
    # Missing keys point at the enclosing object.
    assert missing_error["line"] == 1


def test_malformed_json_document(schema_file, data_dir):
    doc = data_dir / "broken.json"
    doc.write_text('{"id": ', encoding="utf-8")

    _, result = lint_files([doc], schema_file)

    [error] = result.errors
    assert error["message"].startswith("Invalid data: ")


def test_empty_yaml_document(schema_file, data_dir):
    doc = data_dir / "empty.yaml"
    doc.write_text("", encoding="utf-8")

    _, result = lint_files([doc], schema_file)

    assert result.errors == [{"message": "Document is empty"}]


def test_scalar_yaml_document(schema_file, data_dir):
    doc = data_dir / "scalar.yaml"
    doc.write_text("42\n", encoding="utf-8")

    _, result = lint_files([doc], schema_file)

    [error] = result.errors
    assert error["message"].startswith("Unsupported document content")


def test_string_yaml_document_is_not_decoded_as_json(tmp_path, data_dir):
    schema = _write_json(tmp_path / "product.schema.json", {"id": "integer"})
    doc = data_dir / "quoted.yaml"
    doc.write_text("'{\"id\": 1}'\n", encoding="utf-8")

    _, result = lint_files([doc], schema)

    assert result.errors == [
        {"message": 'Unsupported document content: expected a mapping or a list, got "string"'}
    ]


def test_unknown_type_words_are_warnings(tmp_path, data_dir):
    schema = _write_json(tmp_path / "product.schema.json", {"id": "integer", "name": "text"})
    doc = _write_json(data_dir / "product.json", {"id": 1, "name": "x"})

    schema_result, data_result = lint_files([doc], schema)

    assert schema_result.ok
    [warning] = schema_result.warnings
    assert warning["message"].startswith('Unknown type "text" in token "text"')
    assert warning["yaml_path"] == "/name"
    assert not data_result.ok


def test_invalid_schema_skips_data_files(tmp_path, data_dir):
    schema = tmp_path / "bad.schema.json"
    schema.write_text(json.dumps({"id": "1", "roles": []}), encoding="utf-8")
    doc = _write_json(data_dir / "user.json", USER)

    results = lint_files([doc], schema)

    assert len(results) == 1
    assert len(results[0].errors) == 2
    assert all("yaml_path=" in e["message"] for e in results[0].errors)


def test_unreadable_schema(tmp_path, data_dir):
    doc = _write_json(data_dir / "user.json", USER)

    [result] = lint_files([doc], tmp_path / "missing.yaml")

    assert result.errors[0]["message"].startswith("Failed to load schema document")


def test_find_data_files(tmp_path, schema_file, data_dir):
    doc = _write_json(data_dir / "user.json", USER)
    (data_dir / "notes.txt").write_text("ignored", encoding="utf-8")
    nested = data_dir / "nested"
    nested.mkdir()
    nested_doc = _write_json(nested / "product.json", PRODUCT)

    assert find_data_files([str(tmp_path)], exclude=schema_file) == sorted([doc, nested_doc])
    assert find_data_files([str(tmp_path / "missing")]) == []


def test_lint_result_to_dict(tmp_path):
    result = LintResult(tmp_path / "a.json")
    result.add_warning("careful")

    assert result.ok
    assert result.to_dict() == {"file": str(tmp_path / "a.json"), "errors": [], "warnings": [{"message": "careful"}]}


def test_main_succeeds(schema_file, data_dir, capsys):
    _write_json(data_dir / "user.json", USER)

    with pytest.raises(SystemExit) as exc_info:
        main([str(data_dir), "--schema", str(schema_file)])

    assert exc_info.value.code == 0
    assert "Checked 1 document(s) with no errors." in capsys.readouterr().out


def test_main_json_output(schema_file, data_dir, capsys):
    _write_json(data_dir / "user.json", dict(USER, id="abc"))

    with pytest.raises(SystemExit) as exc_info:
        main([str(data_dir), "--schema", str(schema_file), "--format", "json"])

    assert exc_info.value.code == 1
    output = json.loads(capsys.readouterr().out)
    assert output["files"] == 2
    assert output["errors"] == 1


def test_main_github_actions_output(schema_file, data_dir, capsys):
    doc = _write_json(data_dir / "user.json", dict(USER, id="abc"))

    with pytest.raises(SystemExit) as exc_info:
        main([str(doc), "--schema", str(schema_file), "--format", "github-actions"])

    assert exc_info.value.code == 1
    assert f"::error file={doc},line=2::" in capsys.readouterr().out


def test_main_without_documents(schema_file, data_dir, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(data_dir), "--schema", str(schema_file)])

    assert exc_info.value.code == 1
    assert "No JSON or YAML documents found." in capsys.readouterr().err
