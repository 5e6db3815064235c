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

"""JSON/YAML document loader with source maps and optional caching."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from ..config import checker_config
from ..exceptions import DocumentLoadError
from ..file_io.source_location import SourceMap

logger = logging.getLogger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")
DOCUMENT_SUFFIXES = JSON_SUFFIXES + YAML_SUFFIXES

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class JsonCompatibleLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as plain strings, like JSON would."""


JsonCompatibleLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def is_json_document(path: Union[str, Path]) -> bool:
    return Path(path).suffix.lower() in JSON_SUFFIXES


class DocumentLoader:
    """Load schema and data documents from disk."""

    def __init__(self, cache_enabled: Optional[bool] = None):
        """Initialize the loader.

        Args:
            cache_enabled: Whether to cache parsed documents. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else checker_config.cache_enabled
        self._cache: Dict[Path, Tuple[Any, SourceMap]] = {}

    @staticmethod
    def _json_pointer_escape(token: str) -> str:
        # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
        return token.replace("~", "~0").replace("/", "~1")

    @classmethod
    def build_source_map(cls, content: str) -> SourceMap:
        """Build a mapping from JSON-pointer paths to 1-based line/column.

        Uses PyYAML's node tree (yaml.compose); JSON documents are valid YAML
        flow content, so the same walk serves both formats.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=JsonCompatibleLoader)
        except yaml.YAMLError:
            # Parsing errors are reported by the caller that decodes the document.
            return source_map

        if root is None:
            return source_map

        def _record(path: str, node) -> None:
            mark = getattr(node, "start_mark", None)
            if mark is None:
                return
            # PyYAML uses 0-based line/column
            source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

        def _walk(node, path: str) -> None:
            _record(path, node)

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    _walk(value_node, f"{path}/{cls._json_pointer_escape(str(key))}")
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, f"{path}/{idx}")

        _walk(root, "")
        return source_map

    def read_text(self, file_path: Union[str, Path]) -> str:
        path = Path(file_path)

        if not path.exists():
            raise DocumentLoadError(f"Document not found: {path}")

        if not path.is_file():
            raise DocumentLoadError(f"Path is not a file: {path}")

        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Failed to read document {path}: {exc}") from exc

    def load_from_string(self, content: str, as_json: bool = False) -> Any:
        """Parse document content; ``None`` is returned for an empty YAML document.

        Raises:
            DocumentLoadError: If content cannot be parsed
        """
        try:
            if as_json:
                return json.loads(content)
            return yaml.load(content, Loader=JsonCompatibleLoader)
        except json.JSONDecodeError as exc:
            raise DocumentLoadError(f"Failed to parse JSON content: {exc}") from exc
        except yaml.YAMLError as exc:
            raise DocumentLoadError(f"Failed to parse YAML content: {exc}") from exc

    def load_document_with_source(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Load a document and return (data, source_map).

        Raises:
            DocumentLoadError: If the file cannot be read or parsed
        """
        path = Path(file_path)

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading document from cache: {path}")
            return self._cache[path]

        logger.debug(f"Loading document: {path}")
        content = self.read_text(path)
        try:
            data = self.load_from_string(content, as_json=is_json_document(path))
        except DocumentLoadError as exc:
            raise DocumentLoadError(f"{path}: {exc}") from exc
        source_map = self.build_source_map(content)

        if self.cache_enabled:
            self._cache[path] = (data, source_map)

        return data, source_map

    def load_document(self, file_path: Union[str, Path]) -> Any:
        data, _ = self.load_document_with_source(file_path)
        return data

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.debug("Document cache cleared")


# Global loader instance
document_loader = DocumentLoader()
