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

"""Schema and reference validation for Contract documents.

Validation never stops at the first problem: every rule group runs and appends
to the same :class:`ValidationResult`. It does NOT judge whether bound tests
pass; running them is the job of CI.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set

from ..models.contract import (
    CONTRACT_KIND,
    Assertion,
    Contract,
    ContractBindings,
    ContractSpec,
    ContractSurface,
    HTTPSurface,
    SurfaceKind,
    TestKind,
)
from .findings import ValidationResult

logger = logging.getLogger(__name__)

_SCHEME_WHITESPACE = (" ", "\t", "\n")


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class ContractValidator:
    """Validator for contract documents.

    Holds no state between calls; a single instance can be shared across
    threads.
    """

    def validate(self, contract: Optional[Contract]) -> ValidationResult:
        """Validate a parsed contract.

        Args:
            contract: Contract to validate. May be None.

        Returns:
            ValidationResult with every finding, in rule-group order.
        """
        result = ValidationResult()

        if contract is None:
            result.add("", "contract is required")
            return result

        self.validate_top_level(contract, result)
        self.validate_spec(contract.spec, result)

        logger.debug(f"Contract validation finished with {len(result)} finding(s)")
        return result

    def validate_top_level(self, contract: Contract, result: ValidationResult) -> None:
        if _blank(contract.api_version):
            result.add("apiVersion", "required")
        if _blank(contract.kind):
            result.add("kind", "required")
        elif contract.kind != CONTRACT_KIND:
            result.add("kind", f"must be '{CONTRACT_KIND}'")
        # metadata.is_draft may be absent, true or false; all are accepted.

    def validate_spec(self, spec: Optional[ContractSpec], result: ValidationResult) -> None:
        if spec is None:
            result.add("spec", "required")
            return

        self.validate_parties(spec, result)
        self.validate_surface(spec.surface, result)
        assertion_ids = self.validate_assertions(spec.assertions, result)
        self.validate_bindings(spec.bindings, assertion_ids, result)

    def validate_parties(self, spec: ContractSpec, result: ValidationResult) -> None:
        if _blank(spec.consumer.component if spec.consumer else None):
            result.add("spec.consumer.component", "required")
        if _blank(spec.provider.component if spec.provider else None):
            result.add("spec.provider.component", "required")

    def validate_surface(self, surface: Optional[ContractSurface], result: ValidationResult) -> None:
        if surface is None:
            result.add("spec.surface", "required")
            return

        if _blank(surface.kind):
            result.add("spec.surface.kind", "required")
            return

        try:
            kind = SurfaceKind(surface.kind)
        except ValueError:
            result.add("spec.surface.kind", "unsupported kind (v0.0.1 supports only 'http')")
            return

        if kind is SurfaceKind.HTTP:
            self._validate_http(surface.http, result)

    def _validate_http(self, http: Optional[HTTPSurface], result: ValidationResult) -> None:
        if http is None:
            result.add("spec.surface.http", "required for kind=http")
            return

        if _blank(http.method):
            result.add("spec.surface.http.method", "required")
        if _blank(http.path):
            result.add("spec.surface.http.path", "required")
        elif not http.path.startswith("/"):
            result.add("spec.surface.http.path", "must start with '/'")

        # scopes carry no constraints in this revision
        if http.auth is not None and any(ch in (http.auth.scheme or "") for ch in _SCHEME_WHITESPACE):
            result.add("spec.surface.http.auth.scheme", "must not contain whitespace")

    def validate_assertions(self, assertions: List[Assertion], result: ValidationResult) -> Set[str]:
        """Check assertions and return the set of their ids."""
        ids: Set[str] = set()
        if not assertions:
            result.add("spec.assertions", "must have at least one assertion")
            return ids

        for i, assertion in enumerate(assertions):
            prefix = f"spec.assertions[{i}]"

            if _blank(assertion.id):
                result.add(f"{prefix}.id", "required")
                continue
            if assertion.id in ids:
                result.add(f"{prefix}.id", "duplicate assertion id")
            else:
                ids.add(assertion.id)

            if _blank(assertion.text):
                result.add(f"{prefix}.text", "required")

        return ids

    def validate_bindings(
        self,
        bindings: Optional[ContractBindings],
        assertion_ids: Set[str],
        result: ValidationResult,
    ) -> None:
        if bindings is None:
            result.add("spec.bindings", "required")
            return

        if not bindings.tests:
            result.add("spec.bindings.tests", "must have at least one test binding")
            return

        test_ids: Set[str] = set()
        for i, test in enumerate(bindings.tests):
            prefix = f"spec.bindings.tests[{i}]"

            if _blank(test.id):
                result.add(f"{prefix}.id", "required")
            elif test.id in test_ids:
                result.add(f"{prefix}.id", "duplicate test id")
            else:
                test_ids.add(test.id)

            if _blank(test.kind):
                result.add(f"{prefix}.kind", "required")
            elif test.kind not in TestKind.get_all_kinds():
                result.add(f"{prefix}.kind", "unsupported kind (v0.0.1 supports postman|sql)")

            if _blank(test.path):
                result.add(f"{prefix}.path", "required")

            covers = test.covers or []
            for j, assertion_id in enumerate(covers):
                if assertion_id not in assertion_ids:
                    result.add(f"{prefix}.covers[{j}]", f"unknown assertion id '{assertion_id}'")

            if test.required and not covers:
                result.add(f"{prefix}.covers", "required tests should cover at least one assertion")


_validator = ContractValidator()


def validate_contract(contract: Optional[Contract]) -> ValidationResult:
    """Validate a contract and return all findings."""
    return _validator.validate(contract)


def check_contract(contract: Optional[Contract]) -> None:
    """Validate a contract.

    Raises:
        InvalidContractError: If any finding is produced.
    """
    validate_contract(contract).raise_if_invalid()
