# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Structural linting of schema documents against the bundled JSON Schema."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import jsonschema
from jsonschema.exceptions import best_match

from ..exceptions import DocumentLoadError
from .type_tokens import DELIMITER, KNOWN_TYPE_WORDS, NULLABLE


JsonPointer = str

SCHEMA_DOCUMENT = "schema_document"

# Meta-schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    yaml_path: Optional[JsonPointer] = None


def get_meta_schema_path(name: str = SCHEMA_DOCUMENT) -> Path:
    """Get the path to a bundled JSON Schema file."""
    return Path(__file__).parent.parent / "schema" / f"{name}.json"


def load_meta_schema(name: str = SCHEMA_DOCUMENT) -> dict:
    """Load a bundled JSON Schema file.

    Raises:
        FileNotFoundError: If the schema file doesn't exist
        DocumentLoadError: If the schema file is invalid JSON
    """
    if name in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[name]

    schema_path = get_meta_schema_path(name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Meta-schema file not found: {schema_path}")

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(f"Invalid JSON in meta-schema file {schema_path}: {e.msg}") from e

    _SCHEMA_CACHE[name] = schema
    return schema


def clear_cache() -> None:
    """Clear the meta-schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()


def _to_pointer(path: Iterable[Any]) -> JsonPointer:
    tokens = [str(p).replace("~", "~0").replace("/", "~1") for p in path]
    return "/" + "/".join(tokens) if tokens else ""


def _root_schema(meta: dict, document: Any) -> dict:
    # Pick the root alternative up front; a failed anyOf would hide per-key errors.
    definition = "list_node" if isinstance(document, list) else "object_node"
    return {
        "$schema": meta["$schema"],
        "definitions": meta["definitions"],
        "allOf": [{"$ref": f"#/definitions/{definition}"}],
    }


def lint_schema_document(schema: Any) -> List[SchemaIssue]:
    """Report every structural problem of a schema document.

    Unlike ``SchemaChecker``, which raises on the first malformed node it
    reaches, this walks the whole document so that schema files can be fixed
    in one pass.
    """
    validator = jsonschema.Draft7Validator(_root_schema(load_meta_schema(), schema))
    issues: List[SchemaIssue] = []

    for error in sorted(validator.iter_errors(schema), key=lambda e: _to_pointer(e.absolute_path)):
        # anyOf failures are only useful through the closest alternative.
        detail = best_match(error.context) if error.context else None
        reported = detail if detail is not None else error
        issues.append(SchemaIssue(message=reported.message, yaml_path=_to_pointer(reported.absolute_path)))

    return issues


def _walk_tokens(node: Any, path: List[Any]) -> Iterable[Tuple[List[Any], str]]:
    if isinstance(node, str):
        yield path, node
    elif isinstance(node, Mapping):
        for key, value in node.items():
            if key == NULLABLE and isinstance(value, bool):
                continue
            yield from _walk_tokens(value, path + [key])
    elif isinstance(node, list):
        for index, value in enumerate(node):
            yield from _walk_tokens(value, path + [index])


def find_unknown_type_words(schema: Any) -> List[SchemaIssue]:
    """Report token words that name no type tag and therefore never match.

    Such words are valid grammar, so ``lint_schema_document`` accepts them.
    """
    issues: List[SchemaIssue] = []
    for path, token in _walk_tokens(schema, []):
        for word in token.split(DELIMITER):
            if word not in KNOWN_TYPE_WORDS:
                issues.append(
                    SchemaIssue(message=f'Unknown type "{word}" in token "{token}"', yaml_path=_to_pointer(path))
                )
    return issues
