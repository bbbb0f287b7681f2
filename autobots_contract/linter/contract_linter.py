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

"""Linter for contract files.

Runs, in order: YAML loading, the structural JSON Schema check, the apiVersion
check and the contract validator. Every problem is reported with the YAML
location it refers to when one is known.
"""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

from ..exceptions import ContractLoadError
from ..file_io.source_location import (
    SourceLocation,
    finding_path_to_pointer,
    format_source,
    lookup_source,
)
from ..models.parsing.contract_parser import parse_contract
from ..models.parsing.yaml_parser import YamlParser, yaml_parser
from ..models.yaml_schema import validate_structure
from ..utils.api_version import check_api_version
from ..validation import ContractValidator
from .report import LintResult

logger = logging.getLogger(__name__)


class ContractLinter:
    """Linter for structure, schema and references of a contract file."""

    def __init__(self, parser: Optional[YamlParser] = None, validator: Optional[ContractValidator] = None):
        self.parser = parser or yaml_parser
        self.validator = validator or ContractValidator()

    def lint(self, file_path: Path, result: LintResult):
        """Lint one contract file.

        Args:
            file_path: Path to the file to lint
            result: LintResult to add errors/warnings to
        """
        try:
            document, source_map = self.parser.load_document_with_source(file_path)
        except ContractLoadError as e:
            result.add_error(f"Failed to load contract file: {e}")
            return

        def locate(yaml_path: str) -> SourceLocation:
            loc = lookup_source(source_map, yaml_path)
            return replace(loc, file_path=file_path)

        issues = validate_structure(document)
        if issues:
            for issue in issues:
                loc = locate(issue.yaml_path or "")
                result.add_error(f"{issue.message}{format_source(loc)}", loc)
            logger.debug(f"{file_path}: {len(issues)} schema issue(s), skipping contract validation")
            return

        raw_version = document.get("apiVersion")
        ver_result = check_api_version(raw_version if isinstance(raw_version, str) else None)
        if not ver_result.compatible:
            loc = locate("/apiVersion")
            result.add_warning(f"{ver_result.message}{format_source(loc)}", loc)

        try:
            contract = parse_contract(document)
        except ContractLoadError as e:
            result.add_error(f"Failed to parse contract: {e}")
            return

        for finding in self.validator.validate(contract):
            loc = locate(finding_path_to_pointer(finding.path))
            result.add_error(f"{finding}{format_source(loc)}", loc)
