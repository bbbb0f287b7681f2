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

"""Findings produced by a contract validation pass."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from ..exceptions import InvalidContractError


@dataclass(frozen=True)
class Finding:
    """One violation: a dotted/indexed document path and a message."""

    path: str
    message: str

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.path}: {self.message}"


@dataclass
class ValidationResult:
    """Ordered collection of findings for one contract.

    An empty result means the contract is valid.
    """

    findings: List[Finding] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.findings

    def add(self, path: str, message: str) -> None:
        self.findings.append(Finding(path=path, message=message))

    def __len__(self) -> int:
        return len(self.findings)

    def __iter__(self) -> Iterator[Finding]:
        return iter(self.findings)

    def render(self) -> str:
        """Return the multi-line report, or an empty string when valid."""
        if self.ok:
            return ""
        return InvalidContractError(self.findings).render()

    def as_error(self) -> Optional[InvalidContractError]:
        """Return the composite error, or None when there are no findings."""
        if self.ok:
            return None
        return InvalidContractError(self.findings)

    def raise_if_invalid(self) -> None:
        error = self.as_error()
        if error is not None:
            raise error
