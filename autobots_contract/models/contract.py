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

"""In-memory entity graph of a Contract document.

Document layout (``autobots/v1alpha1``)::

    apiVersion: autobots/v1alpha1
    kind: Contract
    metadata:
      is_draft: true
      labels: { ... }
    spec:
      consumer: { component: ... }
      provider: { component: ... }
      surface:
        kind: http
        http: { method, path, auth: { scheme, scopes } }
      assertions: [{id, text}, ...]
      bindings:
        tests: [{id, kind, path, required, covers}, ...]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


CONTRACT_KIND = "Contract"


class SurfaceKind(str, Enum):
    """Surface kinds understood by this revision."""

    HTTP = "http"


class TestKind(str, Enum):
    """Test binding kinds understood by this revision."""

    __test__ = False

    POSTMAN = "postman"
    SQL = "sql"

    @classmethod
    def get_all_kinds(cls) -> List[str]:
        return [kind.value for kind in cls]


@dataclass
class ContractMeta:
    # None when the document omits is_draft.
    is_draft: Optional[bool] = None
    labels: Dict[str, str] = field(default_factory=dict)


@dataclass
class ContractParty:
    component: str = ""


@dataclass
class HTTPAuth:
    scheme: str = ""
    scopes: List[str] = field(default_factory=list)


@dataclass
class HTTPSurface:
    method: str = ""
    path: str = ""
    auth: Optional[HTTPAuth] = None


@dataclass
class ContractSurface:
    # Raw string so that unsupported kinds can be reported.
    kind: str = ""
    http: Optional[HTTPSurface] = None


@dataclass
class Assertion:
    id: str = ""
    text: str = ""


@dataclass
class TestBinding:
    __test__ = False

    id: str = ""
    kind: str = ""
    path: str = ""
    required: bool = False
    covers: List[str] = field(default_factory=list)


@dataclass
class ContractBindings:
    tests: List[TestBinding] = field(default_factory=list)


@dataclass
class ContractSpec:
    consumer: ContractParty = field(default_factory=ContractParty)
    provider: ContractParty = field(default_factory=ContractParty)
    surface: Optional[ContractSurface] = field(default_factory=ContractSurface)
    assertions: List[Assertion] = field(default_factory=list)
    bindings: Optional[ContractBindings] = field(default_factory=ContractBindings)


@dataclass
class Contract:
    """Root of a parsed contract document."""

    api_version: str = ""
    kind: str = ""
    metadata: ContractMeta = field(default_factory=ContractMeta)
    spec: Optional[ContractSpec] = None
