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

"""Linters for schema documents and the data files checked against them.

Problems are reported with file locations taken from the YAML/JSON source
map when one is available.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from ..checker import SchemaChecker
from ..exceptions import DocumentLoadError, InvalidArgumentError, InvalidSchemaError
from ..file_io.source_location import SourceLocation, SourceMap, format_source, lookup_source
from ..models.meta_schema import find_unknown_type_words, lint_schema_document
from ..models.shapes import is_container
from ..models.type_tokens import classify_value
from ..parsing.document_loader import DocumentLoader, document_loader, is_json_document
from .report import LintResult

logger = logging.getLogger(__name__)


def _locate(file_path: Path, source_map: SourceMap, yaml_path: Optional[str]) -> SourceLocation:
    loc = lookup_source(source_map, yaml_path)
    return SourceLocation(file_path=file_path, yaml_path=loc.yaml_path, line=loc.line, column=loc.column)


class SchemaDocumentLinter:
    """Structural checks of a schema file before it is used."""

    def __init__(self, loader: Optional[DocumentLoader] = None):
        self.loader = loader or document_loader

    def lint(self, schema_path: Path, result: LintResult) -> Optional[Any]:
        """Lint a schema file.

        Returns:
            The loaded schema when it is usable, otherwise None
        """
        try:
            schema, source_map = self.loader.load_document_with_source(schema_path)
        except DocumentLoadError as e:
            result.add_error(f"Failed to load schema document: {e}")
            return None

        issues = lint_schema_document(schema)
        for issue in issues:
            src = _locate(schema_path, source_map, issue.yaml_path)
            result.add_error(f"{issue.message}{format_source(src)}", src)

        if issues:
            logger.debug(f"Schema document {schema_path} has {len(issues)} issue(s)")
            return None

        for issue in find_unknown_type_words(schema):
            src = _locate(schema_path, source_map, issue.yaml_path)
            result.add_warning(f"{issue.message}{format_source(src)}", src)
        return schema


class DataLinter:
    """Check one data file against an already linted schema."""

    def __init__(self, checker: Optional[SchemaChecker] = None, loader: Optional[DocumentLoader] = None):
        self.checker = checker or SchemaChecker()
        self.loader = loader or document_loader

    def lint(self, file_path: Path, schema: Any, result: LintResult) -> None:
        try:
            content = self.loader.read_text(file_path)
        except DocumentLoadError as e:
            result.add_error(f"Failed to load data document: {e}")
            return

        if is_json_document(file_path):
            # JSON text goes to the checker as-is; decode errors become violations.
            data = content
        else:
            try:
                data = self.loader.load_from_string(content)
            except DocumentLoadError as e:
                result.add_error(f"Failed to load data document: {e}")
                return
            if data is None:
                result.add_error("Document is empty")
                return
            # A string document must not reach the checker, which would decode it as JSON.
            if not is_container(data):
                actual = classify_value(data).display_name
                result.add_error(f'Unsupported document content: expected a mapping or a list, got "{actual}"')
                return

        source_map = self.loader.build_source_map(content)

        try:
            self.checker.assert_schema(data, schema)
        except InvalidArgumentError as e:
            result.add_error(f"Unsupported document content: {e}")
            return
        except InvalidSchemaError as e:
            result.add_error(f"Invalid schema: {e}")
            return

        for violation in self.checker.get_violation_list():
            src = _locate(file_path, source_map, violation.path)
            result.add_error(f"{violation.message}{format_source(src)}", src)
