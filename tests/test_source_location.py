from pathlib import Path

from schema_checker.file_io.source_location import SourceLocation, format_source, lookup_source


SOURCE_MAP = {
    "": {"line": 1, "column": 1},
    "/products": {"line": 2, "column": 13},
    "/products/0": {"line": 3, "column": 5},
}


def test_lookup_exact_path():
    loc = lookup_source(SOURCE_MAP, "/products/0")

    assert (loc.line, loc.column) == (3, 5)
    assert loc.yaml_path == "/products/0"


def test_lookup_falls_back_to_parent():
    loc = lookup_source(SOURCE_MAP, "/products/0/name")

    assert (loc.line, loc.column) == (3, 5)
    assert loc.yaml_path == "/products/0/name"
    assert lookup_source(SOURCE_MAP, "/missing").line == 1


def test_lookup_without_source_map():
    assert lookup_source(None, "/id") == SourceLocation(yaml_path="/id")
    assert lookup_source({}, "/id") == SourceLocation(yaml_path="/id")


def test_format_source():
    loc = SourceLocation(file_path=Path("data.yaml"), yaml_path="/id", line=2, column=3)

    assert format_source(loc) == " (source= data.yaml:2:3  yaml_path=/id)"
    assert format_source(SourceLocation(yaml_path="/id")) == " (yaml_path=/id)"
    assert format_source(SourceLocation()) == ""
    assert format_source(None) == ""
