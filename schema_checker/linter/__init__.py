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

"""Linter package: check schema files and data files from the command line."""

from pathlib import Path
from typing import List

from .report import LintResult
from .document_linter import DataLinter, SchemaDocumentLinter

__all__ = ['lint_files', 'LintResult']


def lint_files(file_paths: List[Path], schema_path: Path) -> List[LintResult]:
    """Lint a schema file and the data files that must match it.

    Args:
        file_paths: Data files to check
        schema_path: Schema document the data files are checked against

    Returns:
        List of LintResult objects; the first one belongs to the schema file.
        Data files are skipped when the schema itself has errors.
    """
    schema_result = LintResult(schema_path)
    schema = SchemaDocumentLinter().lint(schema_path, schema_result)
    results = [schema_result]

    if schema is None:
        return results

    data_linter = DataLinter()
    for file_path in file_paths:
        result = LintResult(file_path)
        try:
            data_linter.lint(file_path, schema, result)
        except Exception as e:
            result.add_error(f"Unexpected error during linting: {str(e)}")
        results.append(result)

    return results
