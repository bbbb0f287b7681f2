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

"""YAML document loader that also records source locations."""

import yaml
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from ...config import linter_config
from ...exceptions import ContractLoadError

logger = logging.getLogger(__name__)

SourceMap = Dict[str, Dict[str, int]]


def json_pointer_escape(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


class YamlParser:
    """YAML loader with optional caching.

    Contract documents are plain YAML (JSON documents load as well, JSON being
    a subset of YAML).
    """

    def __init__(self, cache_enabled: Optional[bool] = None):
        """Initialize YAML parser.

        Args:
            cache_enabled: Whether to enable caching. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else linter_config.cache_enabled
        self._cache: Dict[Path, Tuple[Any, SourceMap]] = {}

    @staticmethod
    def build_source_map(content: str) -> SourceMap:
        """Map JSON-pointer paths (e.g. "/spec/assertions/0/id") to 1-based line/column.

        Uses PyYAML's node tree (yaml.compose) so locations are tracked without
        changing the data returned by safe_load.
        """
        source_map: SourceMap = {}

        try:
            root = yaml.compose(content, Loader=yaml.SafeLoader)
        except yaml.YAMLError:
            # Syntax errors are reported by safe_load.
            return source_map

        if root is None:
            return source_map

        stack = [(root, "")]
        while stack:
            node, path = stack.pop()
            mark = node.start_mark
            # PyYAML marks are 0-based
            source_map[path] = {"line": mark.line + 1, "column": mark.column + 1}

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    stack.append((value_node, f"{path}/{json_pointer_escape(str(key))}"))
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    stack.append((item_node, f"{path}/{idx}"))

        return source_map

    def load_document_from_string_with_source(self, content: str) -> Tuple[Any, SourceMap]:
        """Parse YAML text and return (data, source_map).

        Raises:
            ContractLoadError: If the content is not valid YAML.
        """
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ContractLoadError(f"Failed to parse YAML content: {exc}") from exc

        if data is None:
            data = {}
        return data, self.build_source_map(content)

    def load_document_with_source(self, file_path: Union[str, Path]) -> Tuple[Any, SourceMap]:
        """Load a YAML file and return (data, source_map).

        Raises:
            ContractLoadError: If the file cannot be read or parsed.
        """
        path = Path(file_path)

        if not path.exists():
            raise ContractLoadError(f"Contract file not found: {path}")

        if not path.is_file():
            raise ContractLoadError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading contract from cache: {path}")
            return self._cache[path]

        logger.debug(f"Loading contract file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ContractLoadError(f"Failed to read contract file {path}: {exc}") from exc

        try:
            loaded = self.load_document_from_string_with_source(content)
        except ContractLoadError as exc:
            raise ContractLoadError(f"Failed to parse YAML file {path}: {exc.__cause__}") from exc.__cause__

        if self.cache_enabled:
            self._cache[path] = loaded
        return loaded

    def load_document(self, file_path: Union[str, Path]) -> Any:
        """Load a YAML file without source information."""
        data, _ = self.load_document_with_source(file_path)
        return data

    def clear_cache(self):
        """Clear the document cache."""
        self._cache.clear()
        logger.debug("Contract cache cleared")


# Global parser instance
yaml_parser = YamlParser()
