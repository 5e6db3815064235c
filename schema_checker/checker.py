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

"""Recursive matching of data against lightweight schemas.

A schema is a mapping of keys to type tokens (``"integer"``,
``"string|nullable"``, ``"*"``), nested mappings, or single-element lists
describing homogeneous lists. A mapping may carry ``"nullable": True`` to
accept an empty container in place of the object.
"""

import json
import logging
from typing import Any, List, Mapping, Optional, Tuple, Union

from .config import checker_config
from .exceptions import InvalidArgumentError, InvalidSchemaError, SchemaCheckerError, SchemaDepthError
from .models.shapes import first_item, is_container, is_indexed, is_plain
from .models.type_tokens import NULLABLE, TypeTag, TypeToken, classify_value
from .models.violations import JsonPointer, Violation, ViolationSink, join_path, render_violations

logger = logging.getLogger(__name__)

# Governing key used for list elements matched at the document root.
ROOT_KEY = "$"

# Expected token reported when a container was required.
CONTAINER_TOKEN = "array"


def _has_key(data: Any, key: str) -> bool:
    return isinstance(data, Mapping) and key in data


def _is_nullable_marker(key: str, expected: Any) -> bool:
    return key == NULLABLE and isinstance(expected, bool)


class Matcher:
    """Walks a schema in lock-step with the data for a single validation run.

    Each run gets its own matcher; violations from nested containers are
    collected into the same sink so that one run reports every problem.
    """

    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = checker_config.max_depth if max_depth is None else max_depth
        self.violations = ViolationSink()

    def check(
        self,
        data: Any,
        schema: Any,
        key: Optional[str] = None,
        path: JsonPointer = "",
        depth: int = 0,
    ) -> bool:
        """Match ``data`` against ``schema``; return True if the run has no violations so far.

        Args:
            data: Container (or, under a list schema, scalar) to validate
            schema: Non-empty mapping or single-element list schema node
            key: Governing key, i.e. the key under which this schema node was reached
            path: JSON pointer of ``data`` inside the validated document
            depth: Current nesting depth

        Raises:
            InvalidSchemaError: If the schema node is empty or malformed
            SchemaDepthError: If nesting exceeds ``max_depth``
        """
        if depth > self.max_depth:
            raise SchemaDepthError(f"Schema nesting exceeds the maximum depth of {self.max_depth}")
        self._require_schema(schema, key)

        if is_container(data):
            if len(data) == 0:
                return self.is_nullable(schema, key=key, path=path)
            if is_indexed(data):
                # Lists are trusted to be homogeneous; only the first element is checked.
                path = join_path(path, 0)
                data = first_item(data)

        if is_plain(data, schema):
            governing_key = self._governing_key(key)
            expected = first_item(schema)
            if is_container(expected):
                self.violations.add_invalid_type(
                    governing_key, classify_value(data).display_name, CONTAINER_TOKEN, path
                )
                return False
            return self.validate_key_type(governing_key, classify_value(data), expected, path)

        if not is_container(data):
            self.violations.add_invalid_data(
                f'expected a container, got "{classify_value(data).display_name}"', key=key, path=path
            )
            return False

        if is_indexed(schema):
            expected = first_item(schema)
            if is_container(expected):
                return self.check(data, expected, key, path, depth + 1)
            return self.validate_key_type(self._governing_key(key), classify_value(data), expected, path)

        for field, expected in schema.items():
            if not isinstance(field, str) or _is_nullable_marker(field, expected):
                continue
            field_path = join_path(path, field)

            if isinstance(expected, str):
                token = TypeToken.parse(expected, key=field)
                if not _has_key(data, field):
                    self.violations.add_missing_key(field, field_path)
                    continue
                self._validate_token(field, classify_value(data[field]), token, field_path)
                continue

            if not is_container(expected):
                raise InvalidSchemaError(f'Invalid schema node for key "{field}": {expected!r}')

            if not _has_key(data, field):
                self.violations.add_missing_key(field, field_path)
                continue

            item = data[field]
            if not is_container(item):
                self.violations.add_invalid_type(
                    field, classify_value(item).display_name, CONTAINER_TOKEN, field_path
                )
                continue

            self.check(item, expected, field, field_path, depth + 1)

        return self.violations.is_empty()

    def validate_key_type(
        self,
        key: str,
        actual_type: Union[TypeTag, str],
        expected_token: str,
        path: Optional[JsonPointer] = None,
    ) -> bool:
        """Check a runtime type against a raw token, recording a mismatch.

        Raises:
            InvalidSchemaError: If ``expected_token`` does not follow the token grammar
        """
        return self._validate_token(key, actual_type, TypeToken.parse(expected_token, key=key), path)

    def _validate_token(
        self,
        key: str,
        actual_type: Union[TypeTag, str],
        token: TypeToken,
        path: Optional[JsonPointer],
    ) -> bool:
        name = actual_type.value if isinstance(actual_type, TypeTag) else actual_type
        match = token.accepts(name)
        if not match:
            actual = TypeTag.NULL.display_name if name == NULLABLE else name
            self.violations.add_invalid_type(key, actual, token.raw, path)
        return match

    def is_nullable(self, schema: Any, key: Optional[str] = None, path: Optional[JsonPointer] = None) -> bool:
        """Whether an empty container is acceptable for ``schema``.

        A list schema whose element is a mapping defers to that mapping's
        ``nullable`` marker.
        """
        self._require_schema(schema, key)
        if is_indexed(schema):
            expected = first_item(schema)
            if is_container(expected):
                return self.is_nullable(expected, key=key, path=path)
            nullable = TypeToken.parse(expected, key=key).nullable
        else:
            nullable = schema.get(NULLABLE) is True

        if not nullable:
            self.violations.add_invalid_data("null value not allowed", key=key, path=path)

        return nullable

    @staticmethod
    def _require_schema(schema: Any, key: Optional[str]) -> None:
        where = f' for key "{key}"' if key is not None else ""
        if not is_container(schema):
            raise InvalidSchemaError(f"Schema{where} must be a mapping or a list, got {type(schema).__name__}")
        if len(schema) == 0:
            raise InvalidSchemaError(f"Schema{where} cannot be empty")
        if is_indexed(schema) and len(schema) > 1:
            raise InvalidSchemaError(f"List schema{where} must contain exactly one entry, got {len(schema)}")

    @staticmethod
    def _governing_key(key: Optional[str]) -> str:
        if key is None:
            raise SchemaCheckerError("Cannot match a plain value without a governing key")
        return key


class SchemaChecker:
    """Validate documents against lightweight schemas.

    Example:
        checker = SchemaChecker()
        if not checker.assert_schema('{"id": 1}', {"id": "integer", "name": "string"}):
            print(checker.get_violations())
    """

    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = max_depth
        self._violations: Tuple[Violation, ...] = ()

    def assert_schema(self, data: Any, schema: Any) -> bool:
        """Validate ``data`` (container or JSON text) against ``schema``.

        Violations from this call replace those of any previous call.

        Raises:
            InvalidArgumentError: If ``data`` is neither a container nor a string
            InvalidSchemaError: If the schema is empty or malformed
        """
        self._violations = ()

        if not is_container(data) and not isinstance(data, (str, bytes, bytearray)):
            raise InvalidArgumentError("Invalid data format")

        matcher = Matcher(max_depth=self.max_depth)
        try:
            if not is_container(data):
                data = self._decode(data, matcher.violations)
                if data is None:
                    return False
            return matcher.check(data, schema, key=ROOT_KEY)
        finally:
            self._violations = matcher.violations.freeze()
            logger.debug(f"Schema check finished with {len(self._violations)} violation(s)")

    @staticmethod
    def _decode(raw: Union[str, bytes, bytearray], violations: ViolationSink) -> Optional[Any]:
        try:
            decoded = json.loads(raw)
        except ValueError as exc:
            violations.add_invalid_data(str(exc), path="")
            return None
        except RecursionError:
            violations.add_invalid_data("document nesting is too deep to decode", path="")
            return None

        if decoded is None:
            violations.add_invalid_data("document decodes to null", path="")
            return None
        if not is_container(decoded):
            violations.add_invalid_data(
                f'expected a container, got "{classify_value(decoded).display_name}"', path=""
            )
            return None
        return decoded

    def get_violations(self) -> str:
        """Violations of the most recent call, joined with ``",\\n"``."""
        return render_violations(self._violations)

    def get_violation_list(self) -> List[Violation]:
        return list(self._violations)

    @property
    def violations(self) -> Tuple[Violation, ...]:
        return self._violations


def assert_schema(data: Any, schema: Any) -> Tuple[bool, List[Violation]]:
    """Validate once with a throwaway checker and return ``(ok, violations)``."""
    checker = SchemaChecker()
    ok = checker.assert_schema(data, schema)
    return ok, checker.get_violation_list()
