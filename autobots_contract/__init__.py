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

"""Validation of autobots consumer/provider Contract documents."""

__version__ = "0.0.1"

# Only one contract revision is understood by this tool.
SUPPORTED_API_VERSION = "autobots/v1alpha1"
SCHEMA_REVISION = "v1alpha1"

from .exceptions import ContractError, ContractLoadError, InvalidContractError  # noqa: E402
from .validation import (  # noqa: E402
    ContractValidator,
    Finding,
    ValidationResult,
    check_contract,
    validate_contract,
)
