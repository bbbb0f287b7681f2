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

"""Contract validation engine.

This package only reads the in-memory contract; it performs no I/O so that it
can be used from the linter, from services and from tests alike.
"""

from .findings import Finding, ValidationResult
from .validator import ContractValidator, check_contract, validate_contract

__all__ = [
    "ContractValidator",
    "Finding",
    "ValidationResult",
    "check_contract",
    "validate_contract",
]
