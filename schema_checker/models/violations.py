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

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple


JsonPointer = str

VIOLATION_SEPARATOR = ",\n"


class ViolationKind(str, Enum):
    MISSING_KEY = "missing_key"
    INVALID_TYPE = "invalid_type"
    INVALID_DATA = "invalid_data"


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    message: str
    key: Optional[str] = None
    path: Optional[JsonPointer] = None

    def __str__(self) -> str:
        return self.message


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def join_path(base: Optional[JsonPointer], token) -> JsonPointer:
    if not base:
        return f"/{_jp_escape(str(token))}"
    return f"{base}/{_jp_escape(str(token))}"


class ViolationSink:
    """Ordered collection of the violations found during one validation run."""

    def __init__(self):
        self._violations: List[Violation] = []

    def __len__(self) -> int:
        return len(self._violations)

    def __iter__(self) -> Iterator[Violation]:
        return iter(self._violations)

    def is_empty(self) -> bool:
        return not self._violations

    def add_missing_key(self, key: str, path: Optional[JsonPointer] = None) -> None:
        self._violations.append(
            Violation(ViolationKind.MISSING_KEY, f'Key "{key}" not found', key=key, path=path)
        )

    def add_invalid_type(
        self, key: str, actual: str, expected: str, path: Optional[JsonPointer] = None
    ) -> None:
        message = f'Unexpected type of key: "{key}". Expected: "{expected}", got: "{actual}"'
        self._violations.append(Violation(ViolationKind.INVALID_TYPE, message, key=key, path=path))

    def add_invalid_data(
        self,
        detail: Optional[str] = None,
        key: Optional[str] = None,
        path: Optional[JsonPointer] = None,
    ) -> None:
        message = f"Invalid data: {detail}" if detail else "Invalid data"
        self._violations.append(Violation(ViolationKind.INVALID_DATA, message, key=key, path=path))

    def freeze(self) -> Tuple[Violation, ...]:
        return tuple(self._violations)


def render_violations(violations) -> str:
    """Join violation messages the way ``SchemaChecker.get_violations`` reports them."""
    return VIOLATION_SEPARATOR.join(v.message for v in violations)
