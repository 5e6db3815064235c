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

"""Shape classification shared by data and schema nodes."""

from typing import Any, Mapping


def is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def is_indexed(container: Any) -> bool:
    """True if the container's keys are exactly 0..n-1 in order (list-like)."""
    if isinstance(container, (list, tuple)):
        return True
    if isinstance(container, Mapping):
        return all(key == idx and type(key) is int for idx, key in enumerate(container))
    return False


def is_plain(data: Any, schema: Any) -> bool:
    """True if a scalar is being matched against a list-shaped schema."""
    return not is_container(data) and is_container(schema) and is_indexed(schema)


def first_item(container: Any) -> Any:
    if isinstance(container, Mapping):
        return next(iter(container.values()))
    return container[0]
