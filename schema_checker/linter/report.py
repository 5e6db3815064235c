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

"""Result containers for the lint tooling."""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ..file_io.source_location import SourceLocation


class LintResult:
    """Errors and warnings collected for a single file."""

    def __init__(self, file_path: Path):
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []

    @staticmethod
    def _entry(message: str, location: Optional[SourceLocation]) -> Dict[str, Any]:
        entry: Dict[str, Any] = {'message': message}
        if location is None:
            return entry
        if location.line is not None:
            entry['line'] = location.line
        if location.column is not None:
            entry['column'] = location.column
        if location.yaml_path is not None:
            entry['yaml_path'] = location.yaml_path
        return entry

    def add_error(self, message: str, location: Optional[SourceLocation] = None):
        self.errors.append(self._entry(message, location))

    def add_warning(self, message: str, location: Optional[SourceLocation] = None):
        self.warnings.append(self._entry(message, location))

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'errors': self.errors,
            'warnings': self.warnings,
        }
