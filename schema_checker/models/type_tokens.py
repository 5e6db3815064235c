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

"""Type tokens: the ``type|type|...`` mini-language used by leaf schemas.

A token is one or more lowercase words of at least four letters, or the
wildcard ``*``, joined by ``|``. Words name runtime type tags (``string``,
``integer``, ``boolean``, ...) or the pseudo-type ``nullable``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple, Union

from ..exceptions import InvalidArgumentError, InvalidSchemaError


DELIMITER = "|"
WILDCARD = "*"
NULLABLE = "nullable"

_TOKEN_RE = re.compile(r"([a-z]{4,}|\*)(\|([a-z]{4,}|\*))*")


class TypeTag(str, Enum):
    """Closed set of runtime type tags a data value can carry."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    OBJECT = "object"
    LIST = "list"
    NULL = NULLABLE

    @property
    def display_name(self) -> str:
        return "null" if self is TypeTag.NULL else self.value


# Extra token words that also name a tag.
TYPE_ALIASES: Dict[str, FrozenSet[str]] = {
    TypeTag.FLOAT.value: frozenset({"double"}),
    TypeTag.OBJECT.value: frozenset({"array"}),
    TypeTag.LIST.value: frozenset({"array"}),
}

# Every word a token can use and still match something.
KNOWN_TYPE_WORDS: FrozenSet[str] = frozenset(
    {tag.value for tag in TypeTag} | {WILDCARD}
).union(*TYPE_ALIASES.values())


def classify_value(value: Any) -> TypeTag:
    """Map a data value to exactly one type tag."""
    if value is None:
        return TypeTag.NULL
    # bool is a subclass of int
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, int):
        return TypeTag.INTEGER
    if isinstance(value, float):
        return TypeTag.FLOAT
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, Mapping):
        return TypeTag.OBJECT
    if isinstance(value, (list, tuple)):
        return TypeTag.LIST
    raise InvalidArgumentError(f"Unsupported data value of type {type(value).__name__}: {value!r}")


def is_schema_valid(token: Any) -> bool:
    """Check a leaf token against the type token grammar."""
    if not isinstance(token, str):
        return False
    return _TOKEN_RE.fullmatch(token) is not None


def contains_nullable_type(token: str) -> bool:
    """Whether ``nullable`` appears anywhere in a raw token."""
    return NULLABLE in token


def type_names(actual_type: str) -> FrozenSet[str]:
    """All token words that name ``actual_type``."""
    return frozenset({actual_type}) | TYPE_ALIASES.get(actual_type, frozenset())


def is_includes(actual_type: str, expected: Union[str, Iterable[str]]) -> bool:
    """Whether ``actual_type`` is accepted by a single token word or a union of them."""
    names = type_names(actual_type)
    if isinstance(expected, str):
        return expected == WILDCARD or expected in names
    return bool((names | {WILDCARD}) & set(expected))


@dataclass(frozen=True)
class TypeToken:
    """A parsed leaf token."""

    raw: str
    members: Tuple[str, ...]

    @classmethod
    def parse(cls, raw: Any, key: Optional[str] = None) -> "TypeToken":
        if not is_schema_valid(raw):
            where = f' for key "{key}"' if key is not None else ""
            raise InvalidSchemaError(f"Invalid type token {raw!r}{where}")
        return cls(raw=raw, members=tuple(raw.split(DELIMITER)))

    @property
    def is_union(self) -> bool:
        return len(self.members) > 1

    @property
    def wildcard(self) -> bool:
        return WILDCARD in self.members

    @property
    def nullable(self) -> bool:
        return contains_nullable_type(self.raw)

    def accepts(self, actual_type: str) -> bool:
        if self.wildcard:
            return True
        if self.is_union:
            return is_includes(actual_type, self.members)
        return is_includes(actual_type, self.raw)
