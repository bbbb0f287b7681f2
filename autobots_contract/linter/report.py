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

"""Error reporting for the contract linter."""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ..file_io.source_location import SourceLocation


class LintResult:
    """Container for linting results for a single file."""

    def __init__(self, file_path: Path):
        """Initialize lint result.

        Args:
            file_path: Path to the file being linted
        """
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []

    @property
    def ok(self) -> bool:
        return not self.errors

    @staticmethod
    def _entry(message: str, loc: Optional[SourceLocation]) -> Dict[str, Any]:
        entry: Dict[str, Any] = {'message': message}
        if loc is None:
            return entry
        if loc.line is not None:
            entry['line'] = loc.line
        if loc.column is not None:
            entry['column'] = loc.column
        if loc.yaml_path is not None:
            entry['yaml_path'] = loc.yaml_path
        return entry

    def add_error(self, message: str, loc: Optional[SourceLocation] = None):
        """Add an error message, optionally with its source location."""
        self.errors.append(self._entry(message, loc))

    def add_warning(self, message: str, loc: Optional[SourceLocation] = None):
        """Add a warning message, optionally with its source location."""
        self.warnings.append(self._entry(message, loc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'errors': self.errors,
            'warnings': self.warnings,
        }
