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

"""Custom exceptions for the autobots contract tooling."""

from typing import Iterable, List


class ContractError(Exception):
    """Base exception for contract related errors."""
    pass


class ContractLoadError(ContractError):
    """Exception raised when a contract document cannot be read or parsed."""
    pass


class ApiVersionError(ContractError):
    """Exception raised when an apiVersion string cannot be parsed."""
    pass


class InvalidContractError(ContractError):
    """Exception raised when a contract fails validation.

    Carries every finding of the validation pass. The rendered message starts
    with a fixed header line followed by one bullet per finding.
    """

    HEADER = "contract validation failed:"

    def __init__(self, findings: Iterable):
        self.findings: List = list(findings)
        super().__init__(self.render())

    def render(self) -> str:
        lines = [f"invalid contract: {self.HEADER}"]
        lines.extend(f" - {finding}" for finding in self.findings)
        return "\n".join(lines)
