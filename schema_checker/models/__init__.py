"""Type tokens, shape classification and violation records.

These modules hold no validation state of their own; a validation run owns
its ``ViolationSink``.
"""

from .shapes import first_item, is_container, is_indexed, is_plain
from .type_tokens import (
    DELIMITER,
    NULLABLE,
    WILDCARD,
    TypeTag,
    TypeToken,
    classify_value,
    contains_nullable_type,
    is_includes,
    is_schema_valid,
)
from .violations import Violation, ViolationKind, ViolationSink, render_violations
