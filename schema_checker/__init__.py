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

"""Validate nested data against lightweight, string-based schemas."""

__version__ = "0.3.0"

from .checker import Matcher, SchemaChecker, assert_schema
from .exceptions import (
    DocumentLoadError,
    InvalidArgumentError,
    InvalidSchemaError,
    SchemaCheckerError,
    SchemaDepthError,
)
from .models.violations import Violation, ViolationKind

__all__ = [
    "DocumentLoadError",
    "InvalidArgumentError",
    "InvalidSchemaError",
    "Matcher",
    "SchemaChecker",
    "SchemaCheckerError",
    "SchemaDepthError",
    "Violation",
    "ViolationKind",
    "assert_schema",
]
