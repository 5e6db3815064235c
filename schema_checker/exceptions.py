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

"""Custom exceptions for the schema checker."""


class SchemaCheckerError(Exception):
    """Base exception for schema checker errors."""
    pass


class InvalidArgumentError(SchemaCheckerError, ValueError):
    """Exception raised when the data passed to the checker has an unsupported type."""
    pass


class InvalidSchemaError(SchemaCheckerError):
    """Exception raised for structurally invalid schemas."""
    pass


class SchemaDepthError(InvalidSchemaError):
    """Exception raised when a schema nests deeper than the configured limit."""
    pass


class DocumentLoadError(SchemaCheckerError):
    """Exception raised when a schema or data document cannot be read or parsed."""
    pass
